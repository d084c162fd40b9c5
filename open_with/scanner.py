#!/usr/bin/env python3
"""
Desktop entry directory discovery.
"""

from __future__ import annotations

# Standard Library
from collections.abc import Mapping
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

#============================================


ENTRY_SUFFIX = ".desktop"
MAX_DATA_DIRS = 50
DEFAULT_SYSTEM_DIRS = ("/usr/local/share/applications", "/usr/share/applications")

#============================================


def is_applications_dir(path: Path) -> bool:
	"""
	Check that a path exists and is a directory.
	"""
	try:
		return path.is_dir()
	except OSError:
		return False


#============================================


def user_dirs(environ: Mapping[str, str]) -> list[Path]:
	"""
	Return the user-scope applications directory, if it exists.

	Args:
		environ: Environment mapping (XDG_DATA_HOME, HOME).

	Returns:
		List with zero or one directory.
	"""
	data_home = environ.get("XDG_DATA_HOME", "")
	if data_home:
		candidate = Path(data_home) / "applications"
	else:
		home = environ.get("HOME", "")
		if not home:
			return []
		candidate = Path(home) / ".local" / "share" / "applications"
	if is_applications_dir(candidate):
		return [candidate]
	logger.debug("Skipping missing user applications dir %s", candidate)
	return []


#============================================


def system_dirs(environ: Mapping[str, str]) -> list[Path]:
	"""
	Return system-scope applications directories that exist.

	At most MAX_DATA_DIRS segments of XDG_DATA_DIRS are considered.

	Args:
		environ: Environment mapping (XDG_DATA_DIRS).

	Returns:
		Ordered list of directories.
	"""
	data_dirs = environ.get("XDG_DATA_DIRS", "")
	if data_dirs:
		candidates = [
			Path(segment) / "applications"
			for segment in data_dirs.split(":")[:MAX_DATA_DIRS]
			if segment
		]
	else:
		candidates = [Path(path) for path in DEFAULT_SYSTEM_DIRS]
	dirs: list[Path] = []
	for candidate in candidates:
		if is_applications_dir(candidate):
			dirs.append(candidate)
		else:
			logger.debug("Skipping missing system applications dir %s", candidate)
	return dirs


#============================================


def application_dirs(environ: Mapping[str, str] | None = None) -> list[Path]:
	"""
	Return user then system applications directories.

	Args:
		environ: Environment mapping, defaults to os.environ.

	Returns:
		Ordered list of directories to scan.
	"""
	if environ is None:
		environ = os.environ
	return user_dirs(environ) + system_dirs(environ)


#============================================


def iter_entry_files(directory: Path) -> list[Path]:
	"""
	List entry files directly inside a directory.

	Args:
		directory: Applications directory.

	Returns:
		Entry file paths sorted by name.
	"""
	try:
		with os.scandir(directory) as entries:
			names = sorted(entry.name for entry in entries)
	except OSError as exc:
		logger.debug("Cannot list %s: %s", directory, exc)
		return []
	return [
		directory / name
		for name in names
		if name.endswith(ENTRY_SUFFIX) and len(name) > len(ENTRY_SUFFIX)
	]


#============================================


def find_entry_file(name: str, dirs: list[Path]) -> Path | None:
	"""
	Locate an entry file by its file name.

	Args:
		name: Entry file name, e.g. "firefox.desktop".
		dirs: Directories to search, in order.

	Returns:
		First regular file found, or None.
	"""
	if not name:
		return None
	for directory in dirs:
		candidate = directory / name
		if candidate.is_file():
			return candidate
	return None
