"""Shared test fixtures for zolafm."""

from pathlib import Path

import pytest

from zolafm.config.models import OutputConfig, ZolaFmConfig
from zolafm.timestamps.base import TimestampSource
from zolafm.timestamps.normalizer import UtcTimestampNormalizer


class StaticTimestampSource(TimestampSource):
    """Returns a fixed newest-first history and records the paths asked for."""

    def __init__(self, *entries: str) -> None:
        self.entries = list(entries)
        self.calls: list[Path] = []

    def history(self, path: Path) -> list[str]:
        self.calls.append(path)
        return list(self.entries)


SAMPLE_POST = """\
---
title: "Hello, World!"
date: "2024-03-07"
author: jane
categories:
  - rust
  - zola
---
# Hello

Some *markdown* body.
"""


@pytest.fixture
def static_source():
    return StaticTimestampSource


@pytest.fixture
def single_commit_source():
    return StaticTimestampSource("2024-03-07T09:30:00+01:00")


@pytest.fixture
def normalizer():
    return UtcTimestampNormalizer()


@pytest.fixture
def sample_config():
    return ZolaFmConfig()


@pytest.fixture
def blog_config(tmp_path):
    return ZolaFmConfig(mode="blog", output=OutputConfig(base_dir=str(tmp_path / "site")))


@pytest.fixture
def sample_post(tmp_path):
    path = tmp_path / "hello.md"
    path.write_text(SAMPLE_POST, encoding="utf-8")
    return path
