"""Abstract timestamp collaborators for the metadata transformer."""

from abc import ABC, abstractmethod
from pathlib import Path

from zolafm.timestamps.models import TimestampRecord


class TimestampSource(ABC):
    """Provides the change history of an input file."""

    @abstractmethod
    def history(self, path: Path) -> list[str]:
        """Return ISO-8601 change timestamps for ``path``, newest first."""
        ...

    def timestamps(self, path: Path) -> TimestampRecord:
        """Derive the created/updated pair from :meth:`history`."""
        return TimestampRecord.from_history(self.history(path))


class TimestampNormalizer(ABC):
    """Converts loosely formatted timestamps to canonical UTC strings."""

    @abstractmethod
    def normalize(self, timestamp: str) -> str:
        """Return ``timestamp`` as ``YYYY-MM-DDTHH:MM:SSZ``."""
        ...
