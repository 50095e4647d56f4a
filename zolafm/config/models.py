from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from zolafm.transform.models import ModeConfig, mode_config


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_dir: str = "."
    extension: str = "md"


class ZolaFmConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: Literal["generic", "blog"] = "generic"
    path_prefix: str = "/blog"
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"

    def mode_config(self) -> ModeConfig:
        """Transformer settings for the configured mode."""
        return mode_config(self.mode).model_copy(update={"path_prefix": self.path_prefix})
