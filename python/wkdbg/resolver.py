"""
Mapping of target URLs onto files below a local web root.

Servers and bundlers often mount sources under virtual prefixes that do not
exist on disk (``http://site.com/page/scripts/a.js`` served from
``<webroot>/scripts/a.js``).  Resolution therefore tries every suffix of the
URL path below the web root, longest first, down to the bare filename.
"""

from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import unquote, urlsplit

from .canonical import canonicalize_url
from .fs import ExistsCheck, exists_sync
from .locator import FILE_URL_PREFIX
from .platform import Platform

logger = logging.getLogger(__name__)


def _url_path(url: str) -> str:
    try:
        return urlsplit(url).path
    except ValueError:
        return ""


def _path_segments(url: str, platform: Platform) -> List[str]:
    # Decoded segments may carry "\" or a drive; neither may escape the web root.
    path = unquote(_url_path(url))
    if platform is Platform.WINDOWS:
        path = path.replace("\\", "/")
    splitdrive = platform.pathmod.splitdrive
    return [
        segment
        for segment in path.split("/")
        if segment not in ("", ".", "..") and not splitdrive(segment)[0]
    ]


def candidate_paths(web_root: Optional[str], url: Optional[str], *, platform: Platform) -> List[str]:
    """Return the local candidates for *url*, most specific first."""
    if not web_root or not url:
        return []
    segments = _path_segments(url, platform)
    sep = platform.sep
    root = web_root.rstrip("/\\" if platform is Platform.WINDOWS else "/")
    return [root + sep + sep.join(segments[index:]) for index in range(len(segments))]


def webkit_url_to_client_path(
    web_root: Optional[str],
    url: Optional[str],
    *,
    platform: Platform,
    exists: ExistsCheck = exists_sync,
) -> str:
    """
    Resolve a target URL to an existing local path.

    ``file:///`` URLs are decoded and canonicalized without touching the
    disk.  Other URLs are matched against the web root by probing each
    candidate from :func:`candidate_paths`; the first existing one is
    returned canonicalized.  Returns ``""`` when nothing matches.
    """
    if not url:
        return ""
    if url.startswith(FILE_URL_PREFIX):
        return canonicalize_url(unquote(url), platform=platform)
    if not web_root:
        return ""
    candidates = candidate_paths(web_root, url, platform=platform)
    if not candidates:
        logger.debug("url %s has no path to map below %s", url, web_root)
        return ""
    for candidate in candidates:
        if exists(candidate):
            logger.debug("resolved %s -> %s", url, candidate)
            return canonicalize_url(candidate, platform=platform)
    logger.debug("no candidate for %s exists: %s", url, candidates)
    return ""


__all__ = ["candidate_paths", "webkit_url_to_client_path"]
