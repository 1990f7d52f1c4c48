"""Configuration loading for astro-agent."""

from .settings import (
    DEFAULT_CONFIG_FILE,
    DocsConfig,
    OutputConfig,
    Settings,
    VersionsConfig,
    load_settings,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DocsConfig",
    "OutputConfig",
    "Settings",
    "VersionsConfig",
    "load_settings",
]
