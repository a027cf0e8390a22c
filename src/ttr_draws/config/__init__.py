"""Settings shared by the CLI commands."""

from .settings import ConfigError, DrawSettings, load_settings

__all__ = ["ConfigError", "DrawSettings", "load_settings"]
