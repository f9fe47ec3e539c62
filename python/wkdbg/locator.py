"""
Locator classification.

A locator is either a URL reported by the debug target or a local path.
The ambiguous case is a Windows drive letter: ``c:/project/code.js`` parses
as a URL with the one-letter scheme ``c``.  Classification is therefore an
explicit tagged result instead of a boolean probe:

    RECOGNIZED_SCHEME(name)  -> a URL
    DRIVE_LETTER(letter)     -> a local Windows path
    NEITHER                  -> a local path or an unparseable string
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import FrozenSet, Optional
from urllib.parse import urlsplit

FILE_URL_PREFIX = "file:///"

RECOGNIZED_SCHEMES: FrozenSet[str] = frozenset(
    {
        "http",
        "https",
        "file",
        "ws",
        "wss",
        "webpack",
        "webpack-internal",
        "ng",
        "chrome",
        "chrome-extension",
        "eval",
        "data",
        "blob",
        "about",
    }
)

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


class LocatorKind(enum.Enum):
    RECOGNIZED_SCHEME = "scheme"
    DRIVE_LETTER = "drive"
    NEITHER = "neither"


@dataclass(frozen=True)
class LocatorClass:
    kind: LocatorKind
    value: Optional[str] = None

    @property
    def is_url(self) -> bool:
        return self.kind is LocatorKind.RECOGNIZED_SCHEME

    def describe(self) -> str:
        if self.kind is LocatorKind.RECOGNIZED_SCHEME:
            return f"url (scheme={self.value})"
        if self.kind is LocatorKind.DRIVE_LETTER:
            return f"local path (drive={self.value})"
        return "local path"


NEITHER = LocatorClass(LocatorKind.NEITHER)


def _has_network_host(text: str) -> bool:
    try:
        return bool(urlsplit(text).netloc)
    except ValueError:
        return False


def classify_locator(text: Optional[str]) -> LocatorClass:
    """Classify *text* as a URL scheme, a drive letter, or neither."""
    if not text:
        return NEITHER
    match = _SCHEME_RE.match(text)
    if not match:
        return NEITHER
    scheme = match.group(1)
    if len(scheme) == 1:
        return LocatorClass(LocatorKind.DRIVE_LETTER, scheme)
    name = scheme.lower()
    if name in RECOGNIZED_SCHEMES:
        return LocatorClass(LocatorKind.RECOGNIZED_SCHEME, name)
    if text[match.end() :].startswith("//") and _has_network_host(text):
        return LocatorClass(LocatorKind.RECOGNIZED_SCHEME, name)
    return NEITHER


def is_url(text: Optional[str]) -> bool:
    return classify_locator(text).is_url


def is_drive_letter_path(text: Optional[str]) -> bool:
    return classify_locator(text).kind is LocatorKind.DRIVE_LETTER


__all__ = [
    "FILE_URL_PREFIX",
    "RECOGNIZED_SCHEMES",
    "LocatorKind",
    "LocatorClass",
    "classify_locator",
    "is_url",
    "is_drive_letter_path",
]
