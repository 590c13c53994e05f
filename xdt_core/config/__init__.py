"""
Configuration Management
========================

Configuration utilities for transformation validation.
"""

from xdt_core.config.settings import (
    ValidatorConfig,
    LoggerConfig,
    EngineConfig,
    load_config,
    save_config,
    get_default_config,
)

__all__ = [
    "ValidatorConfig",
    "LoggerConfig",
    "EngineConfig",
    "load_config",
    "save_config",
    "get_default_config",
]
