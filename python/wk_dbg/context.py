"""Reconciler context shared by wk-dbg commands."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from wkdbg import ExistsCheck, PathURLReconciler, Platform, exists_sync, get_platform

LOGGER = logging.getLogger("wk_dbg.context")

PLATFORM_ENV = "WK_DBG_PLATFORM"


def platform_from_env(value: Optional[str] = None) -> Optional[Platform]:
    """Parse a platform override (``windows``/``osx``/``linux``); blank means host."""
    raw = os.environ.get(PLATFORM_ENV, "") if value is None else value
    if not raw.strip():
        return None
    try:
        return Platform.from_name(raw)
    except ValueError:
        LOGGER.warning("ignoring unknown platform override %r", raw)
        return None


@dataclass
class ReconcileContext:
    """Holds shared CLI state: platform, web root and aliases."""

    json_output: bool = False
    platform_override: Optional[Platform] = None
    web_root: Optional[str] = None
    cwd: Optional[str] = None
    exists: ExistsCheck = field(default=exists_sync, repr=False)
    aliases: Dict[str, str] = field(default_factory=dict)
    _reconciler: Optional[PathURLReconciler] = field(default=None, init=False, repr=False)

    def ensure_reconciler(self) -> PathURLReconciler:
        """Build the reconciler once; the host platform is read on first use."""
        if self._reconciler is None:
            platform = self.platform_override or get_platform()
            self._reconciler = PathURLReconciler(platform, exists=self.exists)
            LOGGER.debug("reconciler ready for %s", self._reconciler.platform.value)
        return self._reconciler

    @property
    def platform(self) -> Platform:
        return self.ensure_reconciler().platform

    def set_platform(self, platform: Optional[Platform]) -> None:
        self.platform_override = platform
        self._reconciler = None

    def set_web_root(self, web_root: Optional[str], *, cwd: Optional[str] = None) -> None:
        self.web_root = web_root or None
        if cwd is not None:
            self.cwd = cwd or None

    def effective_web_root(self, override: Optional[str] = None) -> str:
        args = {"webRoot": override if override is not None else self.web_root, "cwd": self.cwd}
        return self.ensure_reconciler().get_web_root(args)

    def resolve_alias(self, name: str) -> str:
        return self.aliases.get(name, name)

    def set_alias(self, alias: str, command: str) -> None:
        if alias == command:
            self.aliases.pop(alias, None)
            return
        self.aliases[alias] = command

    def list_aliases(self) -> Dict[str, str]:
        return dict(self.aliases)
