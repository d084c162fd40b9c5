#!/usr/bin/env python3
"""
Oracle interface for MIME and default-application queries.
"""

from __future__ import annotations

from typing import Protocol


class MimeOracle(Protocol):
	name: str

	def mime_by_path(self, path: str) -> str:
		"""
		Return the MIME type a path resolves to, or an empty string.
		"""

	def mime_by_content(self, path: str) -> str:
		"""
		Return the MIME type sniffed from file content, or an empty string.
		"""

	def default_app(self, mime_type: str) -> str:
		"""
		Return the default entry identifier for a MIME type, or an empty string.
		"""
