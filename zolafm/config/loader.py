"""Load converter settings from an explicit YAML file."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import ZolaFmConfig


def load_config(path: str | Path | None = None) -> ZolaFmConfig:
    """Read settings from ``path``; without a path the defaults apply.

    Nothing is picked up implicitly from the working directory or home, so
    the output mode only changes when a file is passed on purpose. String
    values may reference environment variables as ``${VAR}``.
    """
    if path is None:
        return ZolaFmConfig()

    path = Path(path)
    if not path.is_file():
        raise ValueError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return ZolaFmConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")

    try:
        return ZolaFmConfig(**_expand_env_vars(raw))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {_describe_errors(e)}") from e


def _describe_errors(exc: ValidationError) -> str:
    """One ``key.path: message`` entry per problem, e.g. ``output.extension: ...``."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj
