#!/usr/bin/env python3
"""
MIME type inference and prioritization for a file path.
"""

from __future__ import annotations

# Standard Library
import logging
import posixpath

# local repo modules
from .oracles import MimeOracle

logger = logging.getLogger(__name__)

#============================================


EXTENSION_MIME_TYPES: dict[str, str] = {
	"sh": "text/x-shellscript",
	"bash": "text/x-shellscript",
	"csh": "text/x-shellscript",
	"py": "text/x-python",
	"pl": "text/x-perl",
	"rb": "text/x-ruby",
	"js": "text/javascript",
	"html": "text/html",
	"htm": "text/html",
	"xml": "application/xml",
	"pdf": "application/pdf",
	"exe": "application/x-ms-dos-executable",
	"bin": "application/x-executable",
	"elf": "application/x-executable",
	"txt": "text/plain",
	"conf": "text/plain",
	"cfg": "text/plain",
	"md": "text/markdown",
	"jpg": "image/jpeg",
	"jpeg": "image/jpeg",
	"png": "image/png",
	"gif": "image/gif",
	"doc": "application/msword",
	"odt": "application/vnd.oasis.opendocument.text",
	"zip": "application/zip",
	"tar": "application/x-tar",
	"gz": "application/gzip",
}

CATCH_ALL_MIME_TYPES = ("application/x-executable", "application/octet-stream")

#============================================


def extension_of(path: str) -> str:
	"""
	Return the lowercase final dot suffix of the file name.

	Only the last segment counts, so "a.tar.gz" yields "gz".

	Args:
		path: File path.

	Returns:
		Extension without the dot, or an empty string.
	"""
	name = posixpath.basename(path)
	if "." not in name:
		return ""
	return name.rsplit(".", 1)[1].lower()


#============================================


class _MimeList:
	"""
	Ordered list of unique MIME strings; first occurrence wins.
	"""

	def __init__(self) -> None:
		self.items: list[str] = []
		self._seen: set[str] = set()

	def add(self, mime: str) -> None:
		if not mime or "/" not in mime or mime in self._seen:
			return
		self._seen.add(mime)
		self.items.append(mime)


#============================================


def prioritize_mime_types(path: str, oracle: MimeOracle) -> list[str]:
	"""
	Build the prioritized MIME list for a path.

	Order: path oracle, content oracle, "+suffix" generalizations,
	extension fallback, "type/*" wildcards (plus text/plain for text types),
	then the executable and octet-stream catch-alls.

	Args:
		path: File path.
		oracle: MIME oracle to query.

	Returns:
		Non-empty list of unique MIME strings, most specific first.
	"""
	mimes = _MimeList()
	mimes.add(oracle.mime_by_path(path).strip())
	mimes.add(oracle.mime_by_content(path).strip())

	for mime in list(mimes.items):
		if "+" in mime:
			mimes.add(mime.split("+", 1)[0])

	ext = extension_of(path)
	if ext in EXTENSION_MIME_TYPES:
		mimes.add(EXTENSION_MIME_TYPES[ext])

	for mime in list(mimes.items):
		media_type = mime.split("/", 1)[0]
		mimes.add(f"{media_type}/*")
		if media_type == "text":
			mimes.add("text/plain")

	for mime in CATCH_ALL_MIME_TYPES:
		mimes.add(mime)

	logger.debug("Prioritized MIME types for %s: %s", path, mimes.items)
	return mimes.items


#============================================


def combine_mime_types(path_mime: str, content_mime: str) -> str:
	"""
	Combine the two oracle answers into one display string.

	Args:
		path_mime: Answer of the path-based oracle.
		content_mime: Answer of the content-sniffing oracle.

	Returns:
		The single answer when they agree or one is empty, else both joined by ";".
	"""
	if not path_mime:
		return content_mime
	if not content_mime or path_mime == content_mime:
		return path_mime
	return f"{path_mime};{content_mime}"


#============================================


def describe_mime_type(path: str, oracle: MimeOracle) -> str:
	"""
	Query both oracles and combine their answers for display.
	"""
	return combine_mime_types(
		oracle.mime_by_path(path).strip(),
		oracle.mime_by_content(path).strip(),
	)
