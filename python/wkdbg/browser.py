"""Browser executable lookup table."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from .fs import ExistsCheck, exists_sync
from .platform import Platform

logger = logging.getLogger(__name__)

BROWSER_CANDIDATES: Dict[Platform, Tuple[str, ...]] = {
    Platform.WINDOWS: (
        "C:\\Program Files\\Google\\Chrome\\Application\\chrome.exe",
        "C:\\Program Files (x86)\\Google\\Chrome\\Application\\chrome.exe",
    ),
    Platform.OSX: ("/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",),
    Platform.LINUX: ("/usr/bin/google-chrome",),
}


def get_browser_path(platform: Platform, *, exists: ExistsCheck = exists_sync) -> Optional[str]:
    """Return the first browser candidate for *platform* that exists, else None."""
    for candidate in BROWSER_CANDIDATES.get(platform, ()):
        if exists(candidate):
            return candidate
    logger.debug("no browser found for %s", platform.value)
    return None


__all__ = ["BROWSER_CANDIDATES", "get_browser_path"]
