"""Split a YAML-fronted document into header and body."""

from __future__ import annotations

from zolafm.document.models import RawDocument
from zolafm.errors import MalformedInputError

YAML_DELIMITER = "---"


def _strip_cr(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def split_header(text: str, delimiter: str = YAML_DELIMITER) -> RawDocument:
    """Separate the delimited header block from the body.

    Lines are split on ``\\n`` only. Delimiter and header lines may end in
    ``\\r\\n``; the ``\\r`` is dropped there. Everything after the closing
    delimiter is joined back with ``\\n`` and returned untouched, ``\\r``
    included.
    """
    if not text:
        raise MalformedInputError("Input is empty, expected a frontmatter header")

    lines = iter(text.split("\n"))

    first_line = next(lines)
    if _strip_cr(first_line) != delimiter:
        raise MalformedInputError(
            f"File must start with frontmatter delimiter {delimiter!r}, got {first_line!r}"
        )

    header_lines: list[str] = []
    for line in lines:
        line = _strip_cr(line)
        if line == delimiter:
            break
        header_lines.append(line + "\n")
    else:
        raise MalformedInputError("Couldn't find end of frontmatter (unterminated header)")

    return RawDocument(header="".join(header_lines), body="\n".join(lines))
