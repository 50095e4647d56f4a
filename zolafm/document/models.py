"""Pydantic models for the document layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RawDocument(BaseModel):
    """Input split into its undecoded header and verbatim body."""

    model_config = ConfigDict(frozen=True)

    header: str
    body: str
