from .loader import load_config
from .models import OutputConfig, ZolaFmConfig

__all__ = [
    "OutputConfig",
    "ZolaFmConfig",
    "load_config",
]
