"""
Decoded JSON Value Helpers.

Graph API bodies are decoded into plain dicts and lists. A value that is missing,
null or of an unexpected type is read as its zero value, so typed responses never
fail on an odd field.
"""

from typing import Any


def int_value(v: Any) -> int:
    """
    Reads an integer from a decoded JSON value.

    Accepts integers, integral floats and strings of decimal digits (the Graph API
    sends some numbers, e.g. paging limits, as strings). Anything else, including
    booleans and null, reads as 0.
    """
    if isinstance(v, bool):
        return 0
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    if isinstance(v, str) and v.isdigit():
        return int(v)
    return 0


def str_value(v: Any) -> str:
    """Reads a string from a decoded JSON value; anything else reads as ""."""
    return v if isinstance(v, str) else ""


def bool_value(v: Any) -> bool:
    return v if isinstance(v, bool) else False


def list_value(v: Any) -> list:
    """Reads a list from a decoded JSON value; anything else reads as []."""
    return v if isinstance(v, list) else []


def dict_value(v: Any) -> dict[str, Any]:
    """Reads an object from a decoded JSON value; anything else reads as {}."""
    return v if isinstance(v, dict) else {}


def dict_items(v: Any) -> list[dict[str, Any]]:
    """Reads a list of objects, skipping entries that are not objects."""
    return [item for item in list_value(v) if isinstance(item, dict)]


def str_list(v: Any) -> list[str]:
    """Reads a list of strings, skipping entries that are not strings."""
    return [item for item in list_value(v) if isinstance(item, str)]
