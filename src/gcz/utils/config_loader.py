"""
Configuration loader for gcz.

This module provides functionality for loading and managing
configuration settings.

"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml
from xdg.BaseDirectory import xdg_config_home

from gcz.config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENV_PREFIX = "GCZ_"

# Type for configuration values
ConfigValue = str | int | float | bool | dict[str, Any] | list[Any] | None


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


def _coerce_env_value(value: str) -> ConfigValue:
	"""Convert an environment variable string to bool, int or float where possible."""
	if value.lower() in ("true", "yes", "on"):
		return True
	if value.lower() in ("false", "no", "off"):
		return False
	try:
		return int(value)
	except ValueError:
		pass
	try:
		return float(value)
	except ValueError:
		return value


class ConfigLoader:
	"""
	Loads and manages configuration for gcz.

	Configuration comes from the defaults, then a YAML file, then
	environment variables, each layer overriding the previous one.

	"""

	_instance: ConfigLoader | None = None

	@classmethod
	def get_instance(cls, config_file: str | None = None, reload: bool = False) -> ConfigLoader:
		"""
		Get the singleton instance of ConfigLoader.

		Args:
		        config_file: Path to configuration file (optional)
		        reload: Whether to reload config even if already loaded

		Returns:
		        ConfigLoader: Singleton instance

		"""
		if cls._instance is None or reload:
			cls._instance = cls(config_file)
		return cls._instance

	def __init__(self, config_file: str | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
		        config_file: Path to configuration file (optional)

		"""
		self.config: dict[str, Any] = {}
		self.config_file = self._resolve_config_file(config_file)
		self.load_config()

	def _resolve_config_file(self, config_file: str | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.gcz.yml in the current directory
		2. $XDG_CONFIG_HOME/gcz/config.yml
		3. ~/.gcz/config.yml

		Args:
		        config_file: Explicitly provided config file path (optional)

		Returns:
		        Resolved config file path or None if no suitable file found

		"""
		if config_file:
			path = Path(config_file).expanduser().resolve()
			if not path.exists():
				logger.warning("Specified config file not found: %s", path)
			return path

		local_config = Path(".gcz.yml")
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / "gcz" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		legacy_config = Path.home() / ".gcz" / "config.yml"
		if legacy_config.exists():
			return legacy_config

		return None

	def load_config(self) -> dict[str, Any]:
		"""
		Load configuration from file and apply environment variable overrides.

		Returns:
		        Loaded configuration

		Raises:
		        ConfigError: If configuration file exists but cannot be loaded

		"""
		self.config = copy.deepcopy(DEFAULT_CONFIG)

		if self.config_file:
			try:
				if self.config_file.exists():
					with self.config_file.open(encoding="utf-8") as f:
						file_config = yaml.safe_load(f)
					if file_config is not None and not isinstance(file_config, dict):
						msg = f"Configuration in {self.config_file} must be a mapping"
						raise ConfigError(msg)
					if file_config:
						self._merge_configs(self.config, file_config)
					logger.info("Loaded configuration from %s", self.config_file)
				else:
					logger.warning("Configuration file not found: %s", self.config_file)
			except (OSError, yaml.YAMLError) as e:
				error_msg = f"Error loading configuration from {self.config_file}: {e}"
				logger.debug(error_msg, exc_info=True)
				raise ConfigError(error_msg) from e

		self._apply_env_overrides()
		self._validate()
		return self.config

	def _merge_configs(self, base: dict[str, Any], override: dict[str, Any]) -> None:
		"""
		Recursively merge two configuration dictionaries.

		Args:
		        base: Base configuration dictionary to merge into
		        override: Override configuration to apply

		"""
		for key, value in override.items():
			if isinstance(value, dict) and key in base and isinstance(base[key], dict):
				self._merge_configs(base[key], value)
			else:
				base[key] = value

	def _split_env_name(self, name: str) -> tuple[str, str] | None:
		"""Split ``section_key`` into a known section and its key."""
		for section in sorted(self.config, key=len, reverse=True):
			prefix = f"{section}_"
			if name.startswith(prefix) and len(name) > len(prefix):
				return section, name[len(prefix) :]

		section, _, key = name.partition("_")
		if section and key:
			return section, key
		return None

	def _apply_env_overrides(self) -> None:
		"""Apply GCZ_SECTION_KEY environment variable overrides."""
		for env_var, value in os.environ.items():
			if not env_var.startswith(ENV_PREFIX):
				continue
			parts = self._split_env_name(env_var[len(ENV_PREFIX) :].lower())
			if parts is None:
				continue

			section, key = parts
			typed_value = _coerce_env_value(value)
			if not isinstance(self.config.get(section), dict):
				self.config[section] = {}
			self.config[section][key] = typed_value
			logger.debug("Applied environment override %s: %s", env_var, typed_value)

	def _validate(self) -> None:
		"""
		Check the values gcz depends on.

		Raises:
		        ConfigError: If a value has the wrong type or the exit codes clash

		"""
		for key in ("use_emoji", "use_editor"):
			if not isinstance(self.get(f"commit.{key}"), bool):
				msg = f"commit.{key} must be a boolean"
				raise ConfigError(msg)

		editor = self.get("commit.editor")
		if editor is not None and not isinstance(editor, str):
			msg = "commit.editor must be a string"
			raise ConfigError(msg)

		for key in ("cancelled", "failure"):
			code = self.get(f"exit_codes.{key}")
			if isinstance(code, bool) or not isinstance(code, int):
				msg = f"exit_codes.{key} must be an integer"
				raise ConfigError(msg)
			if code == 0:
				msg = f"exit_codes.{key} must be non-zero"
				raise ConfigError(msg)

		if self.get("exit_codes.cancelled") == self.get("exit_codes.failure"):
			msg = "exit_codes.cancelled and exit_codes.failure must differ"
			raise ConfigError(msg)

	def get(self, key: str, default: T = None) -> T:
		"""
		Get a configuration value.

		Examples:
		        config.get("commit")
		        config.get("exit_codes.cancelled")

		Args:
		        key: Configuration key, can include dots for nested access
		        default: Default value if key not found

		Returns:
		        Configuration value or default

		"""
		current: Any = self.config
		for part in key.split("."):
			if isinstance(current, dict) and part in current:
				current = current[part]
			else:
				return default
		return cast("T", current)

	def get_exit_code(self, outcome: str) -> int:
		"""
		Get the exit code for a non-successful outcome.

		Args:
		        outcome: "cancelled" or "failure"

		Returns:
		        Configured exit code

		"""
		return self.get(f"exit_codes.{outcome}", DEFAULT_CONFIG["exit_codes"][outcome])
