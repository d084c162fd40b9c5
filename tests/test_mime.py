#!/usr/bin/env python3
"""
Tests for MIME prioritization.
"""

import pytest

from open_with.mime import (
	CATCH_ALL_MIME_TYPES,
	combine_mime_types,
	describe_mime_type,
	extension_of,
	prioritize_mime_types,
)
from open_with.oracles import StaticMimeOracle


def test_oracle_results_come_first():
	oracle = StaticMimeOracle(
		by_path={"/tmp/page.html": "text/html"},
		by_content={"/tmp/page.html": "application/xhtml+xml"},
	)
	mimes = prioritize_mime_types("/tmp/page.html", oracle)
	assert mimes == [
		"text/html",
		"application/xhtml+xml",
		"application/xhtml",
		"text/*",
		"text/plain",
		"application/*",
		"application/x-executable",
		"application/octet-stream",
	]


def test_extension_fallback_without_oracles(empty_oracle):
	mimes = prioritize_mime_types("/tmp/script.PY", empty_oracle)
	assert mimes == [
		"text/x-python",
		"text/*",
		"text/plain",
		"application/x-executable",
		"application/octet-stream",
	]


def test_compound_extension_uses_last_segment(empty_oracle):
	mimes = prioritize_mime_types("/tmp/backup.tar.gz", empty_oracle)
	assert mimes[0] == "application/gzip"
	assert "application/x-tar" not in mimes


def test_unknown_extension_yields_only_catch_alls(empty_oracle):
	mimes = prioritize_mime_types("/tmp/data.qqq", empty_oracle)
	assert mimes == list(CATCH_ALL_MIME_TYPES)


def test_oracle_output_without_slash_is_ignored():
	oracle = StaticMimeOracle(by_path={"/tmp/x": "cannot open"}, by_content={"/tmp/x": "  "})
	assert prioritize_mime_types("/tmp/x", oracle) == list(CATCH_ALL_MIME_TYPES)


def test_catch_all_not_duplicated():
	oracle = StaticMimeOracle(by_content={"/tmp/prog.bin": "application/octet-stream"})
	mimes = prioritize_mime_types("/tmp/prog.bin", oracle)
	assert mimes == [
		"application/octet-stream",
		"application/x-executable",
		"application/*",
	]
	assert len(mimes) == len(set(mimes))


@pytest.mark.parametrize(
	"path, oracle_mime",
	[
		("/tmp/a.txt", "text/plain"),
		("/tmp/photo.png", "image/png"),
		("/tmp/noext", ""),
		("/tmp/prog.elf", "application/x-executable"),
	],
)
def test_list_is_unique_and_ends_with_catch_alls(path, oracle_mime):
	oracle = StaticMimeOracle(by_path={path: oracle_mime})
	mimes = prioritize_mime_types(path, oracle)
	assert mimes
	assert len(mimes) == len(set(mimes))
	for mime in CATCH_ALL_MIME_TYPES:
		assert mime in mimes
	if oracle_mime != "application/x-executable":
		assert mimes[-2:] == list(CATCH_ALL_MIME_TYPES)


def test_extension_of_ignores_dotted_directories():
	assert extension_of("/home/user/conf.d/README") == ""
	assert extension_of("/tmp/Photo.JPEG") == "jpeg"


@pytest.mark.parametrize(
	"path_mime, content_mime, expected",
	[
		("text/html", "text/html", "text/html"),
		("", "text/plain", "text/plain"),
		("image/png", "", "image/png"),
		("text/x-python", "text/plain", "text/x-python;text/plain"),
		("", "", ""),
	],
)
def test_combine_mime_types(path_mime, content_mime, expected):
	assert combine_mime_types(path_mime, content_mime) == expected


def test_describe_mime_type_queries_both_oracles():
	oracle = StaticMimeOracle(
		by_path={"/tmp/a.py": "text/x-python"},
		by_content={"/tmp/a.py": "text/x-script.python"},
	)
	assert describe_mime_type("/tmp/a.py", oracle) == "text/x-python;text/x-script.python"
