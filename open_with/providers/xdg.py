#!/usr/bin/env python3
"""
Provider following the freedesktop desktop entry conventions.
"""

from __future__ import annotations

# Standard Library
from collections.abc import Mapping, Sequence
import logging
import os
from pathlib import Path

# local repo modules
from ..desktop_entry import CandidateInfo, locales_from_environ
from ..exec_line import construct_command_line
from ..mime import describe_mime_type, prioritize_mime_types
from ..oracles import MimeOracle, XdgMimeOracle
from ..ranker import RankedCandidate, rank_candidates
from ..scanner import application_dirs, find_entry_file

logger = logging.getLogger(__name__)

#============================================


class XdgAppProvider:
	"""
	Resolves applications from desktop entries found on XDG data dirs.

	The environment and locales are captured at construction; every call
	rescans the directories and requeries the oracle.
	"""

	name = "xdg"

	def __init__(
		self,
		oracle: MimeOracle | None = None,
		environ: Mapping[str, str] | None = None,
		locales: Sequence[str] | None = None,
	) -> None:
		self.oracle = oracle if oracle is not None else XdgMimeOracle()
		self.environ = dict(os.environ if environ is None else environ)
		if locales is None:
			locales = locales_from_environ(self.environ)
		self.locales = list(locales)

	#============================================
	def application_dirs(self) -> list[Path]:
		return application_dirs(self.environ)

	#============================================
	def prioritized_mime_types(self, path: str) -> list[str]:
		return prioritize_mime_types(path, self.oracle)

	#============================================
	def get_mime_type(self, path: str) -> str:
		return describe_mime_type(path, self.oracle)

	#============================================
	def get_ranked_candidates(self, path: str) -> list[RankedCandidate]:
		"""
		Return candidates with rank and default flag, best first.
		"""
		prioritized = self.prioritized_mime_types(path)
		dirs = self.application_dirs()
		logger.debug("Scanning %d applications dirs for %s", len(dirs), path)
		return rank_candidates(dirs, prioritized, self.oracle, self.locales)

	#============================================
	def get_app_candidates(self, path: str) -> list[CandidateInfo]:
		return [ranked.info for ranked in self.get_ranked_candidates(path)]

	#============================================
	def construct_command_line(self, candidate: CandidateInfo, path: str) -> str:
		return construct_command_line(candidate, path)

	#============================================
	def find_entry_file(self, name: str) -> Path | None:
		"""
		Locate an entry file by name on the applications dirs.
		"""
		return find_entry_file(name, self.application_dirs())

	#============================================
	def default_entry_file(self, path: str) -> Path | None:
		"""
		Locate the entry file of the default application for a path.

		Args:
			path: File path.

		Returns:
			Entry file path, or None when there is no usable default.
		"""
		prioritized = self.prioritized_mime_types(path)
		return self.find_entry_file(self.oracle.default_app(prioritized[0]).strip())
