"""Pydantic models for the metadata transformer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from zolafm.transform.slug import storage_stem

_BASE_FIELDS = frozenset({"date", "title", "author", "categories"})


class ModeConfig(BaseModel):
    """Switches between the generic and the path-deriving (blog) pipeline."""

    model_config = ConfigDict(frozen=True)

    name: str
    date_required: bool = False
    derive_path: bool = False
    recognized_fields: frozenset[str] = _BASE_FIELDS
    path_prefix: str = "/blog"


GENERIC_MODE = ModeConfig(name="generic")

BLOG_MODE = ModeConfig(
    name="blog",
    date_required=True,
    derive_path=True,
    recognized_fields=_BASE_FIELDS | {"slug"},
)

_MODES: dict[str, ModeConfig] = {m.name: m for m in (GENERIC_MODE, BLOG_MODE)}


def mode_config(name: str) -> ModeConfig:
    """Look up a mode preset by name."""
    try:
        return _MODES[name]
    except KeyError:
        raise ValueError(
            f"Unknown mode {name!r}: expected one of {', '.join(sorted(_MODES))}"
        ) from None


class DateParts(BaseModel):
    """Year/month/day substrings of a declared ``YYYY-MM-DD`` date."""

    model_config = ConfigDict(frozen=True)

    year: str
    month: str
    day: str


class DateMismatchWarning(BaseModel):
    """Declared frontmatter date disagrees with the file history."""

    declared: str
    authoritative: str

    @property
    def message(self) -> str:
        return (
            f"date mismatch, git date = {self.authoritative}, "
            f"frontmatter date = {self.declared}"
        )


class TransformResult(BaseModel):
    """Output of one metadata transformation."""

    metadata: dict = Field(default_factory=dict)
    slug: str | None = None
    date_parts: DateParts | None = None
    warnings: list[DateMismatchWarning] = Field(default_factory=list)

    @property
    def storage_path(self) -> str | None:
        """Relative output location without extension, for path-deriving runs."""
        if self.slug is None or self.date_parts is None:
            return None
        d = self.date_parts
        return storage_stem(d.year, d.month, d.day, self.slug)
