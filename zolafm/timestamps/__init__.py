from .base import TimestampNormalizer, TimestampSource
from .git import GitTimestampSource
from .models import TimestampRecord
from .normalizer import UtcTimestampNormalizer

__all__ = [
    "GitTimestampSource",
    "TimestampNormalizer",
    "TimestampRecord",
    "TimestampSource",
    "UtcTimestampNormalizer",
]
