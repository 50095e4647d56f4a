"""Metadata transformation: schema checks, date reconciliation, slug/path, taxonomies."""

from .models import (
    BLOG_MODE,
    GENERIC_MODE,
    DateMismatchWarning,
    DateParts,
    ModeConfig,
    TransformResult,
    mode_config,
)
from .slug import kebab_case, publication_path, storage_stem
from .transformer import MetadataTransformer

__all__ = [
    "BLOG_MODE",
    "GENERIC_MODE",
    "DateMismatchWarning",
    "DateParts",
    "MetadataTransformer",
    "ModeConfig",
    "TransformResult",
    "kebab_case",
    "mode_config",
    "publication_path",
    "storage_stem",
]
