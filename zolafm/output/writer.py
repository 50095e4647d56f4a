"""DocumentWriter: emits converted documents to stdout or to dated files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from zolafm.config.models import OutputConfig

logger = logging.getLogger(__name__)


class DocumentWriter:
    """Writes rendered documents.

    Generic runs print to a stream; path-deriving runs land under
    ``base_dir`` at the stem computed by the transformer.
    """

    def __init__(self, config: OutputConfig, stream: TextIO | None = None) -> None:
        self.config = config
        self.base_dir = Path(config.base_dir)
        self.stream = stream

    def write_stdout(self, text: str) -> None:
        """Print the document followed by a newline."""
        stream = self.stream or sys.stdout
        print(text, file=stream)

    def destination(self, relative_stem: str) -> Path:
        """Resolve ``{base_dir}/{relative_stem}.{extension}``.

        Raises ValueError if the result escapes ``base_dir``.
        """
        dest = self.base_dir / f"{relative_stem}.{self.config.extension}"
        if not dest.resolve().is_relative_to(self.base_dir.resolve()):
            raise ValueError(f"Output path escapes base directory: {dest}")
        return dest

    def write_file(self, relative_stem: str, text: str, *, dry_run: bool = False) -> Path:
        """Write ``text`` to the destination for ``relative_stem``.

        Returns the Path of the written (or would-be) file.
        """
        dest = self.destination(relative_stem)

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(text, encoding="utf-8", newline="")
        logger.info("wrote %s (%d bytes)", dest, len(text))
        return dest
