"""Filesystem existence probe used by browser lookup and URL resolution."""

from __future__ import annotations

import functools
import logging
import os
from typing import Any, Callable

logger = logging.getLogger(__name__)

ExistsCheck = Callable[[str], bool]
StatProbe = Callable[[str], Any]


def exists_sync(path: str, *, stat: StatProbe = os.stat) -> bool:
    """Return True when ``stat(path)`` succeeds; every probe failure means absent."""
    if not path:
        return False
    try:
        stat(path)
    except Exception as exc:
        logger.debug("stat %s failed: %s", path, exc)
        return False
    return True


def exists_checker(stat: StatProbe) -> ExistsCheck:
    """Bind a custom status probe into an ExistsCheck capability."""
    return functools.partial(exists_sync, stat=stat)


__all__ = ["ExistsCheck", "StatProbe", "exists_sync", "exists_checker"]
