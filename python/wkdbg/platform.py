"""Host platform detection for path reconciliation."""

from __future__ import annotations

import enum
import ntpath
import posixpath
import sys
from types import ModuleType
from typing import Callable, Optional, Union

OSIdentifierSource = Union[str, Callable[[], str], None]


class Platform(enum.Enum):
    WINDOWS = "windows"
    OSX = "osx"
    LINUX = "linux"

    @property
    def sep(self) -> str:
        return "\\" if self is Platform.WINDOWS else "/"

    @property
    def pathmod(self) -> ModuleType:
        """Path flavour (``ntpath`` or ``posixpath``) matching the platform."""
        return ntpath if self is Platform.WINDOWS else posixpath

    @property
    def is_posix(self) -> bool:
        return self is not Platform.WINDOWS

    @classmethod
    def from_name(cls, name: str) -> "Platform":
        """Look up a platform by its lowercase value (``windows``, ``osx``, ``linux``)."""
        return cls(str(name).strip().lower())


_IDENTIFIERS = {
    "win32": Platform.WINDOWS,
    "darwin": Platform.OSX,
}


def platform_from_identifier(identifier: Optional[str]) -> Platform:
    """Map an OS identifier (``sys.platform`` style) to a Platform; unknown -> Linux."""
    if not identifier:
        return Platform.LINUX
    return _IDENTIFIERS.get(identifier, Platform.LINUX)


def get_platform(os_identifier: OSIdentifierSource = None) -> Platform:
    """
    Derive the Platform from an identifier source.

    ``os_identifier`` may be a literal identifier, a zero-argument callable
    returning one, or None for ``sys.platform``.  The source is read exactly
    once per call; callers that need a process-wide value keep the result.
    """
    if os_identifier is None:
        identifier = sys.platform
    elif callable(os_identifier):
        identifier = os_identifier()
    else:
        identifier = os_identifier
    return platform_from_identifier(identifier)


__all__ = ["Platform", "OSIdentifierSource", "platform_from_identifier", "get_platform"]
