from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import (
    FolioConfig,
    LLMSettings,
    OutputConfig,
    RenderConfig,
)

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "FolioConfig",
    "LLMSettings",
    "OutputConfig",
    "RenderConfig",
    "load_config",
]
