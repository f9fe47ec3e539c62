"""URL resolution command."""

from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List

from .base import Command
from ..context import ReconcileContext
from ..output import emit_error, emit_result, render_candidates

LOGGER = logging.getLogger("wk_dbg.commands.resolve")


class ResolveCommand(Command):
    def __init__(self) -> None:
        super().__init__("resolve", "Map a target URL to a local file")
        parser = argparse.ArgumentParser(prog="resolve", add_help=False)
        parser.add_argument("url")
        parser.add_argument("--web-root", dest="web_root", help="Override the session web root")
        parser.add_argument("--candidates", action="store_true", help="Show every probed candidate")
        self._parser = parser

    def run(self, ctx: ReconcileContext, argv: List[str]) -> int:
        args = self.parse_args(self._parser, argv)
        if args is None:
            return 1
        reconciler = ctx.ensure_reconciler()
        web_root = ctx.effective_web_root(args.web_root)
        resolved = reconciler.webkit_url_to_client_path(web_root, args.url)
        data: Dict[str, Any] = {"url": args.url, "web_root": web_root, "path": resolved}
        if args.candidates:
            rows = [
                {"path": candidate, "exists": reconciler.exists(candidate)}
                for candidate in reconciler.candidate_paths(web_root, args.url)
            ]
            data["candidates"] = rows
            if not ctx.json_output:
                print(render_candidates(rows))
        if not resolved:
            LOGGER.debug("unresolved %s below %s", args.url, web_root)
            emit_error(ctx, message=f"could not map {args.url}", data=data)
            return 2
        emit_result(ctx, message=resolved, data=data)
        return 0
