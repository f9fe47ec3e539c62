"""Reconciler binding platform and existence probe for a debug session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from . import browser, canonical, locator, resolver, webroot
from .fs import ExistsCheck, StatProbe, exists_checker, exists_sync
from .platform import OSIdentifierSource, Platform, get_platform


@dataclass(frozen=True)
class PathURLReconciler:
    """Path/URL operations with the platform and existence check fixed once."""

    platform: Platform
    exists: ExistsCheck = field(default=exists_sync, repr=False, compare=False)

    @classmethod
    def for_host(
        cls,
        os_identifier: OSIdentifierSource = None,
        *,
        stat: Optional[StatProbe] = None,
    ) -> "PathURLReconciler":
        exists = exists_checker(stat) if stat is not None else exists_sync
        return cls(platform=get_platform(os_identifier), exists=exists)

    @property
    def sep(self) -> str:
        return self.platform.sep

    def classify(self, text: Optional[str]) -> locator.LocatorClass:
        return locator.classify_locator(text)

    def is_url(self, text: Optional[str]) -> bool:
        return locator.is_url(text)

    def canonicalize_url(self, text: Optional[str]) -> str:
        return canonical.canonicalize_url(text, platform=self.platform)

    def fix_drive_letter_and_slashes(self, path: Optional[str]) -> str:
        return canonical.fix_drive_letter_and_slashes(path, platform=self.platform)

    def get_web_root(self, args: Optional[Mapping[str, Any]]) -> str:
        return webroot.get_web_root(args, platform=self.platform)

    def candidate_paths(self, web_root: Optional[str], url: Optional[str]) -> List[str]:
        return resolver.candidate_paths(web_root, url, platform=self.platform)

    def webkit_url_to_client_path(self, web_root: Optional[str], url: Optional[str]) -> str:
        return resolver.webkit_url_to_client_path(web_root, url, platform=self.platform, exists=self.exists)

    def browser_path(self) -> Optional[str]:
        return browser.get_browser_path(self.platform, exists=self.exists)


__all__ = ["PathURLReconciler"]
