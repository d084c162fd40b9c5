#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
import sys

# local repo modules
from .base import AppProvider
from .null import NullAppProvider
from .xdg import XdgAppProvider

__all__ = [
	"AppProvider",
	"NullAppProvider",
	"XdgAppProvider",
	"create_app_provider",
	"uses_desktop_entries",
]

_XDG_PLATFORM_PREFIXES = ("linux", "freebsd", "openbsd", "netbsd")


def uses_desktop_entries(platform: str) -> bool:
	return platform.startswith(_XDG_PLATFORM_PREFIXES)


def create_app_provider(platform: str | None = None, **kwargs) -> AppProvider:
	"""
	Select the provider for a platform.

	Args:
		platform: sys.platform style name, defaults to the running platform.
		kwargs: Passed to XdgAppProvider.

	Returns:
		XdgAppProvider on Linux and the BSDs, NullAppProvider elsewhere.
	"""
	if platform is None:
		platform = sys.platform
	if uses_desktop_entries(platform):
		return XdgAppProvider(**kwargs)
	return NullAppProvider()
