"""Helpers for reading the JSON posted by the identity platform.

The request body is read once; lookups are case-insensitive because B2C and
External ID do not agree on claim casing (``email`` vs ``Email``).
"""
import json
from collections.abc import Mapping
from typing import Any


def read_json_body(raw: bytes | str) -> tuple[dict[str, Any] | None, str]:
    """
    Decode a buffered request body.

    Returns:
        Tuple of (parsed object or None for a blank body, raw text)

    Raises:
        json.JSONDecodeError: If the body is not valid JSON
        ValueError: If the body is JSON but not an object
    """
    text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
    if not text.strip():
        return None, text

    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        raise ValueError("Expected a JSON object")
    return parsed, text


def find_property(mapping: Mapping[str, Any], name: str) -> tuple[bool, Any]:
    """Return ``(found, value)`` for the first key equal to ``name`` ignoring case."""
    wanted = name.casefold()
    for key, value in mapping.items():
        if key.casefold() == wanted:
            return True, value
    return False, None


def get_string(mapping: Mapping[str, Any] | None, name: str) -> str | None:
    """
    Case-insensitive string property getter.

    Returns None if the property is absent. Non-string values come back as
    their compact JSON text, which is handy for numbers and booleans.
    """
    if mapping is None:
        return None
    found, value = find_property(mapping, name)
    if not found:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def get_path(mapping: Mapping[str, Any] | None, *names: str) -> Any:
    """Walk nested objects by case-insensitive names; None when any step is missing."""
    current: Any = mapping
    for name in names:
        if not isinstance(current, Mapping):
            return None
        found, current = find_property(current, name)
        if not found:
            return None
    return current
