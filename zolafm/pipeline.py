"""ConversionPipeline: split, parse, transform and render one input file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from zolafm.config.models import ZolaFmConfig
from zolafm.document import parse_metadata, render_document, split_header
from zolafm.output import DocumentWriter
from zolafm.timestamps.base import TimestampNormalizer, TimestampSource
from zolafm.transform import DateMismatchWarning, MetadataTransformer

logger = logging.getLogger(__name__)


class ConversionResult(BaseModel):
    """Rendered document plus where a path-deriving run stores it."""

    text: str
    storage_path: str | None = None
    warnings: list[DateMismatchWarning] = Field(default_factory=list)


class ConversionPipeline:
    def __init__(
        self,
        config: ZolaFmConfig,
        source: TimestampSource,
        normalizer: TimestampNormalizer,
    ) -> None:
        self.config = config
        self.mode = config.mode_config()
        self.transformer = MetadataTransformer(self.mode, source, normalizer)

    def convert(self, input_path: str | Path) -> ConversionResult:
        """Convert ``input_path`` in memory. Nothing is written."""
        input_path = Path(input_path)
        logger.debug("converting %s (mode: %s)", input_path, self.mode.name)
        # newline="" keeps \r in the body; the splitter handles CRLF delimiters.
        with open(input_path, encoding="utf-8", newline="") as f:
            content = f.read()

        raw = split_header(content)
        document = parse_metadata(raw.header)
        result = self.transformer.transform(document, input_path)

        text = render_document(result.metadata, raw.body, trailing_newline=self.mode.derive_path)
        return ConversionResult(
            text=text,
            storage_path=result.storage_path,
            warnings=result.warnings,
        )

    def run(
        self,
        input_path: str | Path,
        *,
        writer: DocumentWriter | None = None,
        dry_run: bool = False,
    ) -> Path | None:
        """Convert and emit. Returns the written file, or None for stdout output.

        With ``dry_run`` a path-deriving run prints the document and returns
        the would-be destination instead of writing it.
        """
        converted = self.convert(input_path)
        writer = writer or DocumentWriter(self.config.output)

        if converted.storage_path is None:
            writer.write_stdout(converted.text)
            return None

        # Resolve first so a rejected destination emits nothing.
        writer.destination(converted.storage_path)
        if dry_run:
            writer.write_stdout(converted.text)
        return writer.write_file(converted.storage_path, converted.text, dry_run=dry_run)
