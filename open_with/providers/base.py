#!/usr/bin/env python3
"""
Provider interface consumed by the menu and launcher layers.
"""

from __future__ import annotations

from typing import Protocol

# local repo modules
from ..desktop_entry import CandidateInfo


class AppProvider(Protocol):
	name: str

	def get_mime_type(self, path: str) -> str:
		"""
		Return the MIME type string shown to the user.
		"""

	def get_app_candidates(self, path: str) -> list[CandidateInfo]:
		"""
		Return applications able to open a path, best first.
		"""

	def construct_command_line(self, candidate: CandidateInfo, path: str) -> str:
		"""
		Return the command line for a candidate, or an empty string.
		"""
