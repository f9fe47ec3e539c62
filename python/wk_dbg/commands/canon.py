"""Canonicalization commands."""

from __future__ import annotations

import argparse
from typing import Callable, List

from .base import Command
from ..context import ReconcileContext
from ..output import emit_result, render_pairs


class _MappingCommand(Command):
    """Applies one reconciler transform to every argument."""

    def _transform(self, ctx: ReconcileContext) -> Callable[[str], str]:
        raise NotImplementedError

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=self.name, add_help=False)
        parser.add_argument("values", nargs="+")
        return parser

    def run(self, ctx: ReconcileContext, argv: List[str]) -> int:
        args = self.parse_args(self._build_parser(), argv)
        if args is None:
            return 1
        transform = self._transform(ctx)
        pairs = [(value, transform(value)) for value in args.values]
        emit_result(ctx, message=render_pairs(pairs), data={"results": dict(pairs)})
        return 0


class CanonCommand(_MappingCommand):
    def __init__(self) -> None:
        super().__init__("canon", "Canonicalize URLs and local paths")

    def _transform(self, ctx: ReconcileContext) -> Callable[[str], str]:
        return ctx.ensure_reconciler().canonicalize_url


class FixDriveCommand(_MappingCommand):
    def __init__(self) -> None:
        super().__init__("fixdrive", "Lowercase drive letters and fix slashes")

    def _transform(self, ctx: ReconcileContext) -> Callable[[str], str]:
        return ctx.ensure_reconciler().fix_drive_letter_and_slashes
