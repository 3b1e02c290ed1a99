"""
Pretty-printed JSON response.

Leaves the content type unset so DefaultHeaderMiddleware supplies
``application/json; charset=utf-8``.
"""

import json
from typing import Any

from fastapi.responses import Response


class PrettyJSONResponse(Response):
    """JSON body indented with two spaces, non-ASCII kept literal."""

    media_type = None

    def render(self, content: Any) -> bytes:
        return json.dumps(content, indent=2, ensure_ascii=False).encode("utf-8")
