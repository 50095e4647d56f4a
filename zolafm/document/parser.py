"""Decode the raw YAML header into an ordered metadata document."""

from __future__ import annotations

import re

import yaml

from zolafm.errors import ParseError


class _HeaderLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 scalars: dates stay strings, only true/false are bools."""


_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"

# Dates are compared and reformatted as text, so keep ``2024-01-05`` a str;
# ``no``, ``on`` and friends are ordinary author/category names.
_HeaderLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_BOOL_TAG, _TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_HeaderLoader.add_implicit_resolver(
    _BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF")
)


def parse_metadata(header: str) -> dict:
    """Parse header text into a dict (insertion ordered).

    Raises ParseError on malformed YAML, a non-mapping top level, or
    non-string keys. An empty header yields an empty dict.
    """
    try:
        data = yaml.load(header, Loader=_HeaderLoader)
    except yaml.YAMLError as exc:
        raise ParseError(f"YAML parse error: {exc}") from exc

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ParseError(f"Frontmatter is not a mapping, got {type(data).__name__}")

    for key in data:
        if not isinstance(key, str):
            raise ParseError(f"Frontmatter keys must be strings, got {key!r}")

    return data
