"""
Duration parsing tests.
"""

import pytest

from coffeeshop.core.exceptions import ConfigurationError
from coffeeshop.utils.durations import parse_duration


@pytest.mark.parametrize(
    "value, seconds",
    [
        ("0", 0.0),
        ("0s", 0.0),
        ("2s", 2.0),
        ("100ms", 0.1),
        ("1m30s", 90.0),
        ("1.5h", 5400.0),
        ("500us", 0.0005),
        ("500µs", 0.0005),
        ("250ns", 2.5e-7),
        ("+3s", 3.0),
        (".5s", 0.5),
    ],
)
def test_parse_valid_durations(value: str, seconds: float):
    assert parse_duration(value) == pytest.approx(seconds)


@pytest.mark.parametrize(
    "value",
    ["", " 2s ", "2s\n", "2", "100m s", "abc", "2sec", "-1s", "1.5.5s", "ms", "100m!"],
)
def test_parse_invalid_durations(value: str):
    with pytest.raises(ConfigurationError):
        parse_duration(value)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        parse_duration("soon")
