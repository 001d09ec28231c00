from __future__ import annotations

from typing import Any


def coerce_id(value: Any) -> int | None:
    """Form ids arrive as strings; anything that is not an integer becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def coerce_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
