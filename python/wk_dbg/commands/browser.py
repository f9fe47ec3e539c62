"""Browser lookup command."""

from __future__ import annotations

from typing import List

from wkdbg import BROWSER_CANDIDATES

from .base import Command
from ..context import ReconcileContext
from ..output import emit_error, emit_result


class BrowserCommand(Command):
    def __init__(self) -> None:
        super().__init__("browser", "Locate the browser executable for the platform")

    def run(self, ctx: ReconcileContext, argv: List[str]) -> int:
        reconciler = ctx.ensure_reconciler()
        path = reconciler.browser_path()
        if path is None:
            candidates = list(BROWSER_CANDIDATES.get(reconciler.platform, ()))
            emit_error(ctx, message="no browser found", data={"candidates": candidates})
            return 2
        emit_result(ctx, message=path, data={"path": path, "platform": reconciler.platform.value})
        return 0
