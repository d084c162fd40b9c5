#!/usr/bin/env python3
"""
In-memory oracle with canned answers.
"""

from __future__ import annotations


class StaticMimeOracle:
	"""
	Oracle answering from dictionaries.

	Unknown keys answer with an empty string, the same as a failed query.
	"""

	name = "static"

	def __init__(
		self,
		by_path: dict[str, str] | None = None,
		by_content: dict[str, str] | None = None,
		defaults: dict[str, str] | None = None,
	) -> None:
		self.by_path = dict(by_path or {})
		self.by_content = dict(by_content or {})
		self.defaults = dict(defaults or {})
		self.default_queries: list[str] = []

	def mime_by_path(self, path: str) -> str:
		return self.by_path.get(path, "").strip()

	def mime_by_content(self, path: str) -> str:
		return self.by_content.get(path, "").strip()

	def default_app(self, mime_type: str) -> str:
		self.default_queries.append(mime_type)
		return self.defaults.get(mime_type, "").strip()
