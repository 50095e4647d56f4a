"""MetadataTransformer: rewrites parsed YAML frontmatter into Zola's schema."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from zolafm.errors import UnexpectedFieldError, ValidationError
from zolafm.timestamps.base import TimestampNormalizer, TimestampSource
from zolafm.transform.models import (
    DateMismatchWarning,
    DateParts,
    ModeConfig,
    TransformResult,
)
from zolafm.transform.slug import kebab_case, publication_path
from zolafm.transform.values import MetaValue, coerce_string, coerce_string_list

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

# (source field, key under ``taxonomies``)
TAXONOMIES: tuple[tuple[str, str], ...] = (
    ("author", "author"),
    ("categories", "category"),
)


class MetadataTransformer:
    """Validates frontmatter fields, reconciles dates with the file history,
    derives slug/path and groups taxonomy fields.

    One instance serves one mode; the timestamp collaborators are injected
    so tests never touch git.
    """

    def __init__(
        self,
        mode: ModeConfig,
        source: TimestampSource,
        normalizer: TimestampNormalizer,
    ) -> None:
        self.mode = mode
        self.source = source
        self.normalizer = normalizer

    def transform(self, document: dict[str, MetaValue], input_path: str | Path) -> TransformResult:
        """Transform a parsed header. ``document`` itself is left untouched."""
        metadata = dict(document)
        result = TransformResult()

        self._check_fields(metadata)

        record = self.source.timestamps(Path(input_path))
        created: str | None = record.created
        updated: str | None = record.updated

        declared = self._extract_date(metadata, result)
        if declared is not None and not created.startswith(declared):
            warning = DateMismatchWarning(declared=declared, authoritative=created)
            logger.warning("%s: %s", input_path, warning.message)
            result.warnings.append(warning)
            created = None
            updated = None

        if created is not None:
            metadata["date"] = self.normalizer.normalize(created)
        else:
            metadata.pop("date", None)
        if updated is not None:
            metadata["updated"] = self.normalizer.normalize(updated)

        if self.mode.derive_path:
            self._derive_path(metadata, result)

        for source_key, target_key in TAXONOMIES:
            _convert_taxonomy(metadata, source_key, target_key)

        result.metadata = metadata
        return result

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _check_fields(self, metadata: dict) -> None:
        for key in metadata:
            if key not in self.mode.recognized_fields:
                raise UnexpectedFieldError(key)
        if "title" in metadata:
            coerce_string("title", metadata["title"])

    def _extract_date(self, metadata: dict, result: TransformResult) -> str | None:
        """Return the declared date, validating it as the mode requires."""
        if "date" not in metadata:
            if self.mode.date_required:
                raise ValidationError("date", "a YYYY-MM-DD date (field is required)")
            return None

        declared = coerce_string("date", metadata["date"])
        if not self.mode.derive_path:
            return declared

        # The declared date is replaced by the normalized timestamp later on.
        del metadata["date"]
        match = _DATE_RE.match(declared)
        if match is None:
            raise ValidationError("date", "a date in YYYY-MM-DD format", declared)
        year, month, day = match.groups()
        result.date_parts = DateParts(year=year, month=month, day=day)
        return declared

    def _derive_path(self, metadata: dict, result: TransformResult) -> None:
        if "slug" in metadata:
            slug = coerce_string("slug", metadata.pop("slug"))
            if not slug:
                raise ValidationError("slug", "a non-empty string", slug)
        else:
            if "title" not in metadata:
                raise ValidationError("title", "a string (needed to derive the slug)")
            slug = kebab_case(metadata["title"])
            if not slug:
                raise ValidationError(
                    "title", "a title containing letters or digits", metadata["title"]
                )

        d = result.date_parts
        if d is None:
            raise ValidationError("date", "a YYYY-MM-DD date (needed to derive the path)")
        metadata["path"] = publication_path(self.mode.path_prefix, d.year, d.month, d.day, slug)
        result.slug = slug


def _convert_taxonomy(metadata: dict, old_key: str, new_key: str) -> None:
    """Move ``old_key`` under ``taxonomies[new_key]`` as a list of strings."""
    if old_key not in metadata:
        return
    value = coerce_string_list(old_key, metadata.pop(old_key))
    taxonomies = metadata.setdefault("taxonomies", {})
    taxonomies[new_key] = value
