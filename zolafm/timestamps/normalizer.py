"""Normalize ISO-8601-ish timestamps to canonical UTC."""

from __future__ import annotations

from datetime import datetime, timezone

from zolafm.errors import TimestampError
from zolafm.timestamps.base import TimestampNormalizer

UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class UtcTimestampNormalizer(TimestampNormalizer):
    """Parses with ``datetime.fromisoformat`` and renders in UTC.

    Naive values (no offset) are read as local time, matching ``date --date``.
    """

    def normalize(self, timestamp: str) -> str:
        text = timestamp.strip()
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise TimestampError(f"Invalid timestamp {timestamp!r}: {e}") from e
        return parsed.astimezone(timezone.utc).strftime(UTC_FORMAT)
