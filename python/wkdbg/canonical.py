"""Canonical forms for locators reported by the debug target."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from .locator import FILE_URL_PREFIX, LocatorKind, classify_locator, is_drive_letter_path
from .platform import Platform


def lstrip(text: Optional[str], prefix: Optional[str]) -> str:
    """Remove one leading *prefix* from *text* when present."""
    if text is None:
        return ""
    if prefix and text.startswith(prefix):
        return text[len(prefix) :]
    return text


def _normalize_separators(path: str, platform: Platform) -> str:
    foreign = "/" if platform.sep == "\\" else "\\"
    return path.replace(foreign, platform.sep)


def _lower_drive_letter(path: str) -> str:
    return path[:1].lower() + path[1:]


def _strip_empty_path_slash(url: str) -> str:
    # Only "scheme://host/" loses its slash; "/dir/" paths and queries are kept.
    if not url.endswith("/"):
        return url
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    if parts.path == "/" and not parts.query and not parts.fragment:
        return url[:-1]
    return url


def fix_drive_letter_and_slashes(path: Optional[str], *, platform: Platform) -> str:
    """
    Lowercase the drive letter and normalize slashes of a drive-letter path.

    A ``file:///`` prefix is kept verbatim; only the path behind it changes.
    Paths without a drive letter are returned as given.
    """
    if not path:
        return ""
    prefix = FILE_URL_PREFIX if path.startswith(FILE_URL_PREFIX) else ""
    rest = lstrip(path, prefix)
    if not is_drive_letter_path(rest):
        return path
    return prefix + _normalize_separators(_lower_drive_letter(rest), platform)


def canonicalize_url(locator: Optional[str], *, platform: Platform) -> str:
    """
    Return the canonical form of a URL or local path.

    ``file:///`` URLs become local paths.  Local paths use the platform
    separator, with a lowercase drive letter on Windows; on POSIX platforms
    the leading ``/`` eaten by the ``file:///`` prefix is put back.  Network
    URLs are kept as-is apart from the trailing slash of an empty path.
    """
    if not locator:
        return ""
    from_file_url = locator.startswith(FILE_URL_PREFIX)
    text = locator
    while text.startswith(FILE_URL_PREFIX):
        text = lstrip(text, FILE_URL_PREFIX)
    classification = classify_locator(text)
    if classification.is_url:
        return _strip_empty_path_slash(text)
    path = _normalize_separators(text, platform)
    if classify_locator(path).is_url:
        # "svc:\\host" only reads as a URL once separators are fixed
        return canonicalize_url(path, platform=platform)
    if classification.kind is LocatorKind.DRIVE_LETTER:
        if platform is Platform.WINDOWS:
            path = _lower_drive_letter(path)
    elif from_file_url and platform.is_posix and not path.startswith("/"):
        path = "/" + path
    return path


__all__ = ["lstrip", "fix_drive_letter_and_slashes", "canonicalize_url"]
