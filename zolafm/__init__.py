"""zolafm: convert YAML-fronted markdown into Zola documents with TOML frontmatter."""

from .errors import (
    MalformedInputError,
    ParseError,
    TimestampError,
    UnexpectedFieldError,
    ValidationError,
    ZolaFmError,
)
from .pipeline import ConversionPipeline, ConversionResult

__all__ = [
    "ConversionPipeline",
    "ConversionResult",
    "MalformedInputError",
    "ParseError",
    "TimestampError",
    "UnexpectedFieldError",
    "ValidationError",
    "ZolaFmError",
]
