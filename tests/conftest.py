"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()

from open_with.oracles import StaticMimeOracle  # noqa: E402


def write_entry(directory: Path, filename: str, body: str) -> Path:
	"""
	Write a desktop entry file and return its path.
	"""
	directory.mkdir(parents=True, exist_ok=True)
	path = directory / filename
	path.write_text(body, encoding="utf-8")
	return path


def app_entry(name: str, exec_line: str, mimetypes: str = "", **extra: str) -> str:
	"""
	Render a minimal Type=Application entry.
	"""
	lines = ["[Desktop Entry]", "Type=Application", f"Name={name}", f"Exec={exec_line}"]
	if mimetypes:
		lines.append(f"MimeType={mimetypes}")
	for key, value in extra.items():
		lines.append(f"{key}={value}")
	return "\n".join(lines) + "\n"


@pytest.fixture
def apps_dir(tmp_path: Path) -> Path:
	directory = tmp_path / "share" / "applications"
	directory.mkdir(parents=True)
	return directory


@pytest.fixture
def empty_oracle() -> StaticMimeOracle:
	return StaticMimeOracle()
