"""Locator classification command."""

from __future__ import annotations

import argparse
from typing import Any, Dict, List

from .base import Command
from ..context import ReconcileContext
from ..output import emit_result, render_pairs


class ClassifyCommand(Command):
    def __init__(self) -> None:
        super().__init__("classify", "Tell URLs from local paths", aliases=("isurl",))
        self._parser = argparse.ArgumentParser(prog="classify", add_help=False)
        self._parser.add_argument("locators", nargs="+")

    def run(self, ctx: ReconcileContext, argv: List[str]) -> int:
        args = self.parse_args(self._parser, argv)
        if args is None:
            return 1
        reconciler = ctx.ensure_reconciler()
        entries: List[Dict[str, Any]] = []
        pairs = []
        for locator in args.locators:
            result = reconciler.classify(locator)
            entries.append(
                {"locator": locator, "kind": result.kind.value, "value": result.value, "is_url": result.is_url}
            )
            pairs.append((locator, result.describe()))
        emit_result(ctx, message=render_pairs(pairs), data={"locators": entries})
        return 0
