"""Coercion of decoded header values into the shapes the schema allows.

Decoded YAML can hold anything; past these functions a field is either a
``str`` or a ``list[str]``, or a ValidationError has been raised.
"""

from __future__ import annotations

from typing import Union

from zolafm.errors import ValidationError

MetaValue = Union[str, list[str], dict[str, "MetaValue"]]


def coerce_string(field: str, value: object) -> str:
    """Accept only a plain string."""
    if not isinstance(value, str):
        raise ValidationError(field, "a string", value)
    return value


def coerce_string_list(field: str, value: object) -> list[str]:
    """Wrap a single string in a list; pass a list of strings through."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    raise ValidationError(field, "a string or a list of strings", value)
