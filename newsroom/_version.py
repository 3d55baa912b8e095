#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Package version for newsroom.

Installed builds report the distribution metadata.  A plain source checkout
has no metadata, so the ``version`` line of the ``[project]`` table in the
neighbouring pyproject.toml is used instead.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DIST_NAME = "newsroom"
UNKNOWN_VERSION = "0.0.0"

_PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"
_VERSION_LINE_RE = re.compile(r'^version\s*=\s*"([^"]+)"', re.MULTILINE)


def read_checkout_version(pyproject: Path = _PYPROJECT) -> str:
    """Version declared in *pyproject*, or ``UNKNOWN_VERSION`` if unreadable."""
    try:
        source = pyproject.read_text(encoding="utf-8")
    except OSError:
        return UNKNOWN_VERSION
    m = _VERSION_LINE_RE.search(source)
    return m.group(1) if m else UNKNOWN_VERSION


def package_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return read_checkout_version()


__version__: str = package_version()
