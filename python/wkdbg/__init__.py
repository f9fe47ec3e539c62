"""
wkdbg - path/URL reconciliation for script debugging sessions.

A debug target reports sources as URLs (``http://``, ``file:///``,
``webpack:///``); the editor works with local paths.  This package maps one
onto the other.  Each module keeps one concern:

    platform.py    -> host platform detection, separator and path flavour
    fs.py          -> existence probe (absence is False, never an error)
    browser.py     -> browser executable lookup table
    locator.py     -> tagged URL / drive-letter classification
    canonical.py   -> canonical forms, drive letter and slash fixing
    webroot.py     -> web root from launch arguments
    resolver.py    -> URL to local path resolution by suffix probing
    reconciler.py  -> PathURLReconciler facade binding platform + probe
"""

from .platform import Platform, get_platform, platform_from_identifier  # noqa: F401
from .fs import ExistsCheck, exists_checker, exists_sync  # noqa: F401
from .browser import BROWSER_CANDIDATES, get_browser_path  # noqa: F401
from .locator import (  # noqa: F401
    FILE_URL_PREFIX,
    RECOGNIZED_SCHEMES,
    LocatorClass,
    LocatorKind,
    classify_locator,
    is_drive_letter_path,
    is_url,
)
from .canonical import canonicalize_url, fix_drive_letter_and_slashes, lstrip  # noqa: F401
from .webroot import get_web_root  # noqa: F401
from .resolver import candidate_paths, webkit_url_to_client_path  # noqa: F401
from .reconciler import PathURLReconciler  # noqa: F401

__all__ = [
    "Platform",
    "get_platform",
    "platform_from_identifier",
    "ExistsCheck",
    "exists_checker",
    "exists_sync",
    "BROWSER_CANDIDATES",
    "get_browser_path",
    "FILE_URL_PREFIX",
    "RECOGNIZED_SCHEMES",
    "LocatorClass",
    "LocatorKind",
    "classify_locator",
    "is_drive_letter_path",
    "is_url",
    "canonicalize_url",
    "fix_drive_letter_and_slashes",
    "lstrip",
    "get_web_root",
    "candidate_paths",
    "webkit_url_to_client_path",
    "PathURLReconciler",
]

__version__ = "0.1.0"
