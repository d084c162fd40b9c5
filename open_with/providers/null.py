#!/usr/bin/env python3
"""
Provider for platforms without desktop entries.
"""

from __future__ import annotations

# local repo modules
from ..desktop_entry import CandidateInfo


class NullAppProvider:
	name = "null"

	def get_mime_type(self, path: str) -> str:
		return ""

	def get_app_candidates(self, path: str) -> list[CandidateInfo]:
		return []

	def construct_command_line(self, candidate: CandidateInfo, path: str) -> str:
		return ""
