"""Existence probe command."""

from __future__ import annotations

import argparse
from typing import List

from .base import Command
from ..context import ReconcileContext
from ..output import emit_result, render_pairs


class ExistsCommand(Command):
    def __init__(self) -> None:
        super().__init__("exists", "Probe whether local paths exist")
        self._parser = argparse.ArgumentParser(prog="exists", add_help=False)
        self._parser.add_argument("paths", nargs="+")

    def run(self, ctx: ReconcileContext, argv: List[str]) -> int:
        args = self.parse_args(self._parser, argv)
        if args is None:
            return 1
        reconciler = ctx.ensure_reconciler()
        results = {path: reconciler.exists(path) for path in args.paths}
        pairs = [(path, "yes" if found else "no") for path, found in results.items()]
        emit_result(ctx, message=render_pairs(pairs, arrow=":"), data={"exists": results})
        return 0
