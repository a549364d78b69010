"""Configuration file loading."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from guidelint.config.settings import Settings

CONFIG_FILENAMES = [".guidelint.yaml", ".guidelint.yml", "guidelint.yaml", "guidelint.yml"]


class ConfigError(Exception):
  """Configuration is invalid; nothing may be scanned."""


def _find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path:
    if not config_path.exists():
      raise ConfigError(f"Config file not found: {config_path}")
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None) -> Settings:
  """Load configuration from file or defaults.

  Raises:
    ConfigError: If the file is missing, is not valid YAML, or does not
      match the settings schema.
  """
  path = _find_config_file(config_path)
  if path:
    return _load_from_file(path)
  return Settings()


def _load_from_file(path: Path) -> Settings:
  """Load settings from a YAML file."""
  try:
    with open(path) as f:
      data = yaml.safe_load(f) or {}
  except (OSError, yaml.YAMLError) as e:
    raise ConfigError(f"Cannot read config {path}: {e}") from e

  if not isinstance(data, dict):
    raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

  return _parse_config(data)


def _parse_config(data: dict) -> Settings:
  """Parse config dict into Settings.

  A rule entry may be a bare boolean (`JS005: false`) or a severity
  string (`JS005: must`) as shorthand for the full mapping.
  """
  data = dict(data)
  if "rules" in data:
    rules = data["rules"] or {}
    if not isinstance(rules, dict):
      raise ConfigError("'rules' must be a mapping of rule id to settings")
    data["rules"] = {str(key): _expand_rule_entry(value) for key, value in rules.items()}

  try:
    return Settings.model_validate(data)
  except ValidationError as e:
    raise ConfigError(f"Invalid configuration: {e}") from e


def _expand_rule_entry(value: object) -> object:
  if isinstance(value, bool):
    return {"enabled": value}
  if isinstance(value, str):
    return {"severity": value}
  if value is None:
    return {}
  return value
