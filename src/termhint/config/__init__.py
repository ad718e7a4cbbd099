"""
Configuration module for overlay algorithm parameters.
"""

from .overlay_config import (
    FuzzyConfig,
    NavConfig,
    OverlayConfig,
    TooltipConfig,
    get_overlay_config,
    load_config_from_env,
    reset_overlay_config,
    validate_charset,
)

__all__ = [
    "FuzzyConfig",
    "NavConfig",
    "OverlayConfig",
    "TooltipConfig",
    "get_overlay_config",
    "load_config_from_env",
    "reset_overlay_config",
    "validate_charset",
]
