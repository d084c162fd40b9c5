#!/usr/bin/env python3
"""
Oracle backed by the xdg-mime and file command line tools.
"""

from __future__ import annotations

# Standard Library
import logging
import subprocess

logger = logging.getLogger(__name__)

#============================================


def run_query(args: list[str]) -> str:
	"""
	Run a query command and capture its trimmed output.

	Args:
		args: Command and arguments.

	Returns:
		Trimmed stdout, or an empty string on any failure.
	"""
	try:
		result = subprocess.run(
			args,
			capture_output=True,
			text=True,
			errors="replace",
			check=False,
		)
	except (FileNotFoundError, PermissionError):
		logger.debug("Oracle command unavailable: %s", args[0])
		return ""
	if result.returncode != 0:
		logger.debug("Oracle command %s exited with %d", args[0], result.returncode)
		return ""
	return result.stdout.strip()


#============================================


class XdgMimeOracle:
	name = "xdg"

	def __init__(self, xdg_mime: str = "xdg-mime", file_cmd: str = "file") -> None:
		self.xdg_mime = xdg_mime
		self.file_cmd = file_cmd

	def mime_by_path(self, path: str) -> str:
		return run_query([self.xdg_mime, "query", "filetype", path])

	def mime_by_content(self, path: str) -> str:
		return run_query([self.file_cmd, "-b", "--mime-type", path])

	def default_app(self, mime_type: str) -> str:
		return run_query([self.xdg_mime, "query", "default", mime_type])
