#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from collections.abc import Mapping
from dataclasses import dataclass
import json
import logging
from pathlib import Path

# PIP3 modules
import yaml

logger = logging.getLogger(__name__)

#============================================


class ConfigError(RuntimeError):
	"""
	Raised when a user config value has the wrong type.
	"""


#============================================


@dataclass(slots=True)
class AppConfig:
	"""
	Runtime configuration settings.

	Attributes:
		verbose: Verbose logging.
		show_details: Print the details block with the command line.
		user_data_home: Optional override for XDG_DATA_HOME.
		data_dirs: Optional override for XDG_DATA_DIRS.
		locales: Optional override for the locale cascade.
		config_path: Optional user config path.
	"""
	verbose: bool = False
	show_details: bool = False
	user_data_home: Path | None = None
	data_dirs: list[Path] | None = None
	locales: list[str] | None = None
	config_path: Path | None = None

	#============================================
	def apply_environ(self, environ: Mapping[str, str]) -> dict[str, str]:
		"""
		Overlay directory overrides onto an environment mapping.

		Args:
			environ: Base environment.

		Returns:
			New environment dictionary.
		"""
		merged = dict(environ)
		if self.user_data_home is not None:
			merged["XDG_DATA_HOME"] = str(self.user_data_home.expanduser())
		if self.data_dirs is not None:
			merged["XDG_DATA_DIRS"] = ":".join(str(p.expanduser()) for p in self.data_dirs)
		return merged


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	try:
		if config_path.suffix.lower() in {".yml", ".yaml"}:
			with config_path.open("r", encoding="utf-8") as handle:
				loaded = yaml.safe_load(handle)
				return loaded or {}
		with config_path.open("r", encoding="utf-8") as handle:
			return json.load(handle)
	except (yaml.YAMLError, json.JSONDecodeError) as exc:
		raise ConfigError(f"Cannot parse {config_path}: {exc}") from exc


#============================================


def _require_str_list(key: str, value: object) -> list[str]:
	if isinstance(value, str):
		return [value]
	if isinstance(value, list) and all(isinstance(item, str) for item in value):
		return list(value)
	raise ConfigError(f"{key} must be a string or a list of strings")


#============================================


def apply_user_config(config: AppConfig, data: Mapping[str, object]) -> AppConfig:
	"""
	Copy loaded user settings onto a config.

	Args:
		config: Config to update.
		data: Values from load_user_config.

	Returns:
		The updated config.
	"""
	if not isinstance(data, Mapping):
		raise ConfigError("config file must hold a mapping")
	for key, value in data.items():
		if key in {"verbose", "show_details"}:
			if not isinstance(value, bool):
				raise ConfigError(f"{key} must be true or false")
			setattr(config, key, value)
		elif key == "user_data_home":
			if not isinstance(value, str):
				raise ConfigError("user_data_home must be a string")
			config.user_data_home = Path(value)
		elif key == "data_dirs":
			config.data_dirs = [Path(p) for p in _require_str_list(key, value)]
		elif key == "locales":
			config.locales = _require_str_list(key, value)
		else:
			logger.warning("Ignoring unknown config key %r", key)
	return config
