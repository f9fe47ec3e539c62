"""Web root command."""

from __future__ import annotations

import argparse
from typing import List

from .base import Command
from ..context import ReconcileContext
from ..output import emit_result


class WebRootCommand(Command):
    def __init__(self) -> None:
        super().__init__("webroot", "Show or set the web root")
        parser = argparse.ArgumentParser(prog="webroot", add_help=False)
        parser.add_argument("path", nargs="?", help="Web root, absolute or relative to --cwd")
        parser.add_argument("--cwd", help="Directory relative web roots resolve against")
        parser.add_argument("--clear", action="store_true", help="Forget the configured web root")
        self._parser = parser

    def run(self, ctx: ReconcileContext, argv: List[str]) -> int:
        args = self.parse_args(self._parser, argv)
        if args is None:
            return 1
        if args.clear:
            ctx.set_web_root(None, cwd=args.cwd)
        elif args.path is not None or args.cwd is not None:
            ctx.set_web_root(args.path if args.path is not None else ctx.web_root, cwd=args.cwd)
        effective = ctx.effective_web_root()
        emit_result(
            ctx,
            message=f"webroot: {effective}",
            data={"web_root": effective, "configured": ctx.web_root, "cwd": ctx.cwd},
        )
        return 0
