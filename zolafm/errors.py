"""Exception hierarchy for the conversion pipeline."""

from __future__ import annotations


class ZolaFmError(Exception):
    """Base class for every fatal conversion error."""


class MalformedInputError(ZolaFmError):
    """Input does not carry a properly delimited metadata header."""


class ParseError(ZolaFmError):
    """Header text cannot be decoded as a key-value mapping."""


class UnexpectedFieldError(ZolaFmError):
    """A header field outside the recognized schema."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unexpected property `{key}`")


class ValidationError(ZolaFmError):
    """A recognized field has the wrong type or shape."""

    def __init__(self, field: str, expected: str, value: object = None) -> None:
        self.field = field
        self.expected = expected
        self.value = value
        super().__init__(f"Unexpected value for `{field}`: expected {expected}, got {value!r}")


class TimestampError(ZolaFmError):
    """Change history could not be retrieved or normalized."""
