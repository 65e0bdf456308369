"""
Configuration management for invocator.

Loads and validates an invocator.yaml configuration file:

    registry:
      allow_imports: true
      functions:
        strlen: builtins:len
      classes:
        Path: pathlib:Path
    logging:
      level: INFO
      format: pretty
      console: true
      output: logs/invocator-{date}.log
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# Environment variable naming the default config file
CONFIG_ENV_VAR = "INVOCATOR_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("structured", "pretty")


class ConfigError(Exception):
    """Configuration validation error."""
    pass


class InvocatorConfig:
    """Complete invocator configuration."""

    def __init__(self, data: Optional[Dict[str, Any]] = None, config_path: Optional[Path] = None):
        self.config_path = config_path
        self.raw_config = data or {}

        if not isinstance(self.raw_config, dict):
            raise ConfigError("Configuration must be a mapping")

        # Registry
        registry = self.raw_config.get("registry") or {}
        if not isinstance(registry, dict):
            raise ConfigError("'registry' must be a mapping")
        self.allow_imports = bool(registry.get("allow_imports", True))
        self.functions = self._load_paths(registry, "functions")
        self.classes = self._load_paths(registry, "classes")

        # Logging
        self.logging = self.raw_config.get("logging") or {}
        if not isinstance(self.logging, dict):
            raise ConfigError("'logging' must be a mapping")

    @staticmethod
    def _load_paths(section: Dict[str, Any], key: str) -> Dict[str, str]:
        """Read a name -> import path mapping."""
        entries = section.get(key) or {}
        if not isinstance(entries, dict):
            raise ConfigError(f"'registry.{key}' must be a mapping of name to import path")
        for name, path in entries.items():
            if not isinstance(name, str) or not name:
                raise ConfigError(f"'registry.{key}': invalid name {name!r}")
            if not isinstance(path, str) or not path:
                raise ConfigError(f"'registry.{key}.{name}': import path must be a non-empty string")
        return dict(entries)

    def get_log_file_path(self) -> Optional[Path]:
        """Get log file path with date interpolation, if file logging is configured."""
        log_output = self.logging.get("output")
        if not log_output:
            return None
        log_output = log_output.replace("{date}", datetime.now().strftime("%Y-%m-%d"))
        return Path(log_output)

    def get_log_level(self) -> str:
        """Get logging level."""
        return str(self.logging.get("level", "INFO")).upper()

    def get_log_format(self) -> str:
        """Get log format (structured or pretty)."""
        return self.logging.get("format", "pretty")

    def should_log_to_console(self) -> bool:
        """Check if console logging is enabled."""
        return self.logging.get("console", True)

    def validate(self) -> None:
        """Validate entire configuration."""
        if self.get_log_level() not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level: {self.get_log_level()}. Expected one of {', '.join(LOG_LEVELS)}"
            )
        if self.get_log_format() not in LOG_FORMATS:
            raise ConfigError(
                f"Invalid log format: {self.get_log_format()}. Expected one of {', '.join(LOG_FORMATS)}"
            )

    def __repr__(self) -> str:
        return (
            f"InvocatorConfig(functions={len(self.functions)}, "
            f"classes={len(self.classes)}, allow_imports={self.allow_imports})"
        )


def _load_yaml(config_path: Path) -> Dict[str, Any]:
    """Load and parse YAML configuration file."""
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {config_path}")
    return config


def load_config(config_path: Optional[Path] = None) -> InvocatorConfig:
    """
    Load invocator configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to $INVOCATOR_CONFIG;
                     without either, the built-in defaults are used.

    Returns:
        Validated InvocatorConfig instance

    Raises:
        ConfigError: If config is invalid or missing
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            config = InvocatorConfig()
            config.validate()
            return config
        config_path = Path(env_path)

    config_path = Path(config_path)
    config = InvocatorConfig(_load_yaml(config_path), config_path=config_path)
    config.validate()
    return config
