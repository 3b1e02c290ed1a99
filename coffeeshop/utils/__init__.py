"""
==============================================================================
Utilities Package
==============================================================================

Utility functions for the application.

Modules:
--------
- durations: Duration string parsing ("2s", "100ms", "1m30s")

==============================================================================
"""

from .durations import parse_duration

__all__ = [
    "parse_duration",
]
