from __future__ import annotations

from typing import Any
from urllib.parse import quote


def segment(value: Any) -> str:
    """Percent-encode an id for use as one path segment."""
    return quote(str(value), safe="")
