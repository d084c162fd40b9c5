#!/usr/bin/env python3
from __future__ import annotations

from .base import MimeOracle
from .static import StaticMimeOracle
from .xdg import XdgMimeOracle, run_query

__all__ = ["MimeOracle", "StaticMimeOracle", "XdgMimeOracle", "run_query"]
