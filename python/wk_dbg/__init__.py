"""
wk-dbg CLI package.

Interactive front-end over :mod:`wkdbg` for inspecting how debug target
URLs map onto local paths.  Use ``python -m wk_dbg`` or the ``wk-dbg``
console script to launch it.
"""

from __future__ import annotations

from .cli import main

__all__ = ["main"]
__version__ = "0.1.0"
