# ABOUTME: Configuration loading for leafery.
# ABOUTME: Exports the loader, the built config container, and its error type.

from leafery.config.loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    ConfigError,
    LeaferyConfig,
    build_config,
    default_config_path,
    load_config,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "LeaferyConfig",
    "build_config",
    "default_config_path",
    "load_config",
]
