"""
Configuration management for LoopFlow

This module provides configuration loading, validation, and saving for
configured loops processing.
"""

from .config import (Config, config_to_dict, get_default_config, load_config,
                     save_config, validate_config)

__all__ = [
    "Config",
    "load_config",
    "save_config",
    "validate_config",
    "get_default_config",
    "config_to_dict",
]
