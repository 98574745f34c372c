"""Installed distribution version of c2wiki."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("c2wiki")
except PackageNotFoundError:
    # source checkout without `pip install -e .`
    __version__ = "0.0.0"
