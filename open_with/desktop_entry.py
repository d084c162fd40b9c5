#!/usr/bin/env python3
"""
Desktop entry file parsing.
"""

from __future__ import annotations

# Standard Library
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import logging
import os
from pathlib import Path

# local repo modules
from .exec_line import tokenize_exec

logger = logging.getLogger(__name__)

#============================================


MAIN_SECTION = "[Desktop Entry]"
LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")

#============================================


@dataclass(frozen=True, slots=True)
class CandidateInfo:
	"""
	Application able to open a file.

	Attributes:
		name: Display name.
		command_template: Raw Exec value.
		declared_mimetypes: MimeType value as written in the entry.
		run_in_terminal: True when the entry sets Terminal=true.
		source_path: Path of the originating entry file.
	"""
	name: str
	command_template: str
	declared_mimetypes: str = ""
	run_in_terminal: bool = False
	source_path: str = ""


#============================================


def locales_from_environ(environ: Mapping[str, str] | None = None) -> list[str]:
	"""
	Collect locale names from LC_ALL, LC_MESSAGES and LANG.

	Args:
		environ: Environment mapping, defaults to os.environ.

	Returns:
		Locale names with any ".encoding" suffix removed, in lookup order.
	"""
	if environ is None:
		environ = os.environ
	locales: list[str] = []
	for var in LOCALE_ENV_VARS:
		value = environ.get(var, "")
		if len(value) < 2:
			continue
		locale = value.split(".", 1)[0]
		if locale:
			locales.append(locale)
	return locales


#============================================


def localized_value(values: Mapping[str, str], key: str, locales: Sequence[str]) -> str:
	"""
	Look up a key preferring its localized variants.

	For each locale, tries Key[lang_COUNTRY] and then Key[lang] before
	falling back to the plain key.

	Args:
		values: Parsed key/value pairs.
		key: Base key, e.g. "Name".
		locales: Locale names in lookup order.

	Returns:
		Value found, or an empty string.
	"""
	for locale in locales:
		hit = values.get(f"{key}[{locale}]")
		if hit is not None:
			return hit
		if "_" in locale:
			lang = locale.split("_", 1)[0]
			hit = values.get(f"{key}[{lang}]")
			if hit is not None:
				return hit
	return values.get(key, "")


#============================================


def parse_entry_file(path: Path | str, locales: Sequence[str] = ()) -> CandidateInfo | None:
	"""
	Parse one entry file into a candidate.

	Args:
		path: Entry file path.
		locales: Locale names used to pick the display name.

	Returns:
		CandidateInfo, or None when the entry is not usable.
	"""
	path = Path(path)
	values: dict[str, str] = {}
	exec_value = ""
	mimetypes = ""
	terminal = False
	hidden = False
	is_application = False
	in_main_section = False

	try:
		with path.open("r", encoding="utf-8", errors="surrogateescape") as handle:
			for raw_line in handle:
				line = raw_line.strip()
				if not line or line.startswith("#"):
					continue
				if line == MAIN_SECTION:
					in_main_section = True
					continue
				if line.startswith("["):
					in_main_section = False
					continue
				if not in_main_section or "=" not in line:
					continue
				key, value = line.split("=", 1)
				key = key.strip()
				value = value.strip()
				values[key] = value
				if key == "Exec":
					exec_value = value
				elif key == "Terminal" and value == "true":
					terminal = True
				elif key == "MimeType":
					mimetypes = value
				elif key == "Hidden" and value == "true":
					hidden = True
				elif key == "Type" and value == "Application":
					is_application = True
	except OSError as exc:
		logger.debug("Cannot read entry %s: %s", path, exc)
		return None

	if hidden:
		logger.debug("Rejecting hidden entry %s", path)
		return None
	if not exec_value or not is_application:
		logger.debug("Rejecting entry %s without Exec or Type=Application", path)
		return None
	if not tokenize_exec(exec_value):
		logger.debug("Rejecting entry %s with malformed Exec %r", path, exec_value)
		return None

	name = localized_value(values, "Name", locales)
	if not name:
		name = localized_value(values, "GenericName", locales)
	if not name:
		name = path.name

	return CandidateInfo(
		name=name,
		command_template=exec_value,
		declared_mimetypes=mimetypes,
		run_in_terminal=terminal,
		source_path=str(path),
	)
