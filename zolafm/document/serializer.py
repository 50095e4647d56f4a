"""Render transformed metadata as a TOML-fronted document."""

from __future__ import annotations

import tomli_w

TOML_DELIMITER = "+++"


def render_metadata(metadata: dict) -> str:
    """Dump metadata as TOML, keeping insertion order."""
    return tomli_w.dumps(metadata)


def render_document(
    metadata: dict,
    body: str,
    *,
    delimiter: str = TOML_DELIMITER,
    trailing_newline: bool = False,
) -> str:
    """Frame the TOML header with ``delimiter`` lines and append the body as-is."""
    toml_str = render_metadata(metadata)
    rendered = f"{delimiter}\n{toml_str}{delimiter}\n{body}"
    if trailing_newline:
        rendered += "\n"
    return rendered
