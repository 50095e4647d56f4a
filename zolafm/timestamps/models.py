"""Pydantic models for change-history timestamps."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from zolafm.errors import TimestampError


class TimestampRecord(BaseModel):
    """Authoritative created/updated timestamps for one file."""

    model_config = ConfigDict(frozen=True)

    created: str
    updated: str | None = None

    @classmethod
    def from_history(cls, entries: Sequence[str]) -> TimestampRecord:
        """Build a record from a newest-first history.

        The first entry is taken as ``created``; the last one becomes
        ``updated`` only when there is more than one entry and it differs.
        """
        if not entries:
            raise TimestampError("No change history found for file")
        created = entries[0]
        updated = entries[-1] if len(entries) > 1 and entries[-1] != created else None
        return cls(created=created, updated=updated)
