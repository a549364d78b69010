"""Configuration management."""

from guidelint.config.loader import ConfigError, load_config
from guidelint.config.settings import RuleSettings, Settings

__all__ = ["ConfigError", "RuleSettings", "Settings", "load_config"]
