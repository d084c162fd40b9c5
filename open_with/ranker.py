#!/usr/bin/env python3
"""
MIME-based ranking of desktop entries.
"""

from __future__ import annotations

# Standard Library
from collections.abc import Sequence
from dataclasses import dataclass
import logging
from pathlib import Path

# local repo modules
from .desktop_entry import MAIN_SECTION, CandidateInfo, parse_entry_file
from .oracles import MimeOracle
from .scanner import iter_entry_files

logger = logging.getLogger(__name__)

#============================================


@dataclass(slots=True)
class RankedCandidate:
	"""
	Candidate with its match rank; lower rank is a better match.
	"""

	info: CandidateInfo
	rank: int
	is_default: bool = False

	#============================================
	def sort_key(self) -> tuple[bool, int, str]:
		return (not self.is_default, self.rank, self.info.name)


#============================================


def mime_matches(declared: str, target: str) -> bool:
	"""
	Match a declared MIME against a prioritized one.

	A declared "type/*" matches any target starting with "type/".
	"""
	if declared.endswith("/*"):
		return target.startswith(declared[:-1])
	return declared == target


#============================================


def best_rank_for_mimetypes(declared_value: str, prioritized: Sequence[str]) -> int | None:
	"""
	Compute the best rank of a semicolon-separated MimeType value.

	Args:
		declared_value: Raw MimeType value.
		prioritized: Prioritized MIME list.

	Returns:
		Lowest matching index, or None when nothing matches.
	"""
	best: int | None = None
	for declared in declared_value.split(";"):
		declared = declared.strip()
		if not declared:
			continue
		for index, target in enumerate(prioritized):
			if best is not None and index >= best:
				break
			if mime_matches(declared, target):
				best = index
				break
	return best


#============================================


def best_mime_match_rank(entry_path: Path, prioritized: Sequence[str]) -> int | None:
	"""
	Rank an entry file by its MimeType line in the main section.

	Scanning stops at the first MimeType line that yields a match.

	Args:
		entry_path: Entry file path.
		prioritized: Prioritized MIME list.

	Returns:
		Rank, or None when the entry does not match or cannot be read.
	"""
	in_main_section = False
	try:
		with entry_path.open("r", encoding="utf-8", errors="surrogateescape") as handle:
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
				if in_main_section and line.startswith("MimeType="):
					rank = best_rank_for_mimetypes(line.split("=", 1)[1], prioritized)
					if rank is not None:
						return rank
	except OSError as exc:
		logger.debug("Cannot rank entry %s: %s", entry_path, exc)
	return None


#============================================


def collect_ranked_candidates(
	dirs: Sequence[Path],
	prioritized: Sequence[str],
	locales: Sequence[str] = (),
) -> list[RankedCandidate]:
	"""
	Scan directories for matching entries, deduplicated by Exec.

	Args:
		dirs: Applications directories in scan order.
		prioritized: Prioritized MIME list.
		locales: Locale names for display names.

	Returns:
		Ranked candidates in scan order.
	"""
	ranked: list[RankedCandidate] = []
	seen_templates: set[str] = set()
	for directory in dirs:
		for entry_path in iter_entry_files(directory):
			rank = best_mime_match_rank(entry_path, prioritized)
			if rank is None:
				continue
			info = parse_entry_file(entry_path, locales)
			if info is None:
				continue
			if info.command_template in seen_templates:
				logger.debug("Dropping duplicate Exec from %s", entry_path)
				continue
			seen_templates.add(info.command_template)
			ranked.append(RankedCandidate(info=info, rank=rank))
	return ranked


#============================================


def mark_default(ranked: list[RankedCandidate], default_entry: str) -> RankedCandidate | None:
	"""
	Flag the first candidate whose entry path contains the default token.

	Args:
		ranked: Candidates in their current order.
		default_entry: Token reported by the default application oracle.

	Returns:
		The flagged candidate, or None.
	"""
	if not default_entry:
		return None
	for candidate in ranked:
		if default_entry in candidate.info.source_path:
			candidate.is_default = True
			return candidate
	return None


#============================================


def rank_candidates(
	dirs: Sequence[Path],
	prioritized: Sequence[str],
	oracle: MimeOracle,
	locales: Sequence[str] = (),
) -> list[RankedCandidate]:
	"""
	Rank matching entries, flag the default and sort.

	Args:
		dirs: Applications directories in scan order.
		prioritized: Prioritized MIME list.
		oracle: Oracle answering the default application query.
		locales: Locale names for display names.

	Returns:
		Sorted ranked candidates, default first.
	"""
	ranked = collect_ranked_candidates(dirs, prioritized, locales)
	if prioritized:
		default = mark_default(ranked, oracle.default_app(prioritized[0]).strip())
		if default is not None:
			logger.debug("Default application: %s", default.info.source_path)
	ranked.sort(key=RankedCandidate.sort_key)
	return ranked


#============================================


def find_candidates(
	dirs: Sequence[Path],
	prioritized: Sequence[str],
	oracle: MimeOracle,
	locales: Sequence[str] = (),
) -> list[CandidateInfo]:
	"""
	Return the sorted candidates without ranking metadata.
	"""
	return [ranked.info for ranked in rank_candidates(dirs, prioritized, oracle, locales)]
