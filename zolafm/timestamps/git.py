"""Timestamp source backed by ``git log``."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from zolafm.errors import TimestampError
from zolafm.timestamps.base import TimestampSource

logger = logging.getLogger(__name__)


class GitTimestampSource(TimestampSource):
    """Reads commit dates for a file from the repository containing it.

    git runs with ``cwd`` set to the file's directory, so the process
    working directory is left alone.
    """

    def __init__(self, git: str = "git", timeout: int = 30) -> None:
        self.git = git
        self.timeout = timeout

    def history(self, path: Path) -> list[str]:
        path = Path(path)
        cmd = [self.git, "log", "--format=%cd", "--date=iso-strict", "--", path.name]
        logger.debug("running %s in %s", " ".join(cmd), path.parent)
        try:
            result = subprocess.run(
                cmd,
                cwd=path.parent,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise TimestampError(f"Could not run {self.git!r}: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise TimestampError(f"git log timed out for {path}") from e

        if result.returncode != 0:
            raise TimestampError(
                f"git log exited {result.returncode} for {path}: {result.stderr.strip()[:200]}"
            )

        entries = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        if not entries:
            raise TimestampError(f"No git history for {path}; commit the file first")
        return entries
