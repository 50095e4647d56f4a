"""Slug and publication path helpers."""

from __future__ import annotations

import re

# lowercase/digit followed by uppercase: "helloWorld" -> "hello World"
_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[^\W_])(?=[A-Z][a-z])|(?<=[a-z0-9])(?=[A-Z])")
_SEPARATOR_RE = re.compile(r"[\W_]+")


def kebab_case(text: str) -> str:
    """Lower-case ``text`` and join its words with single hyphens.

    "Hello, World!" -> "hello-world", "parseHTTPResponse" -> "parse-http-response".
    Applying it to its own output returns the same string.
    """
    spaced = _CAMEL_BOUNDARY_RE.sub(" ", text).lower()
    return "-".join(word for word in _SEPARATOR_RE.split(spaced) if word)


def publication_path(prefix: str, year: str, month: str, day: str, slug: str) -> str:
    """URL path the page is served under, e.g. ``/blog/2024/03/07/hello-world``."""
    return f"{prefix.rstrip('/')}/{year}/{month}/{day}/{slug}"


def storage_stem(year: str, month: str, day: str, slug: str) -> str:
    """Relative file location without extension, e.g. ``2024/03/2024-03-07-hello-world``."""
    return f"{year}/{month}/{year}-{month}-{day}-{slug}"
