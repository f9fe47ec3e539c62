"""Web root resolution from launch arguments."""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from .platform import Platform


def get_web_root(args: Optional[Mapping[str, Any]], *, platform: Platform) -> str:
    """
    Compute the web root from launch arguments.

    ``webRoot`` is returned as-is when absolute and resolved against ``cwd``
    when relative.  Without a ``webRoot`` the ``cwd`` itself is the web root.
    A missing ``cwd`` falls back to the process working directory.
    """
    args = args or {}
    pathmod = platform.pathmod
    cwd = args.get("cwd") or os.getcwd()
    web_root = args.get("webRoot") or ""
    if not web_root:
        return cwd
    if pathmod.isabs(web_root):
        return web_root
    return pathmod.normpath(pathmod.join(cwd, web_root))


__all__ = ["get_web_root"]
