"""
open_with
=========

Resolve the applications able to open a file from freedesktop desktop
entries, rank them and build their launch command lines.
"""

__all__ = [
	"config",
	"desktop_entry",
	"exec_line",
	"mime",
	"oracles",
	"providers",
	"ranker",
	"scanner",
]
