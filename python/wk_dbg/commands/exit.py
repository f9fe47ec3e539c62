"""Exit command."""

from __future__ import annotations

from typing import List

from .base import Command
from ..context import ReconcileContext


class ExitCommand(Command):
    def __init__(self) -> None:
        super().__init__("exit", "Leave wk-dbg", aliases=("quit", "q"))

    def run(self, ctx: ReconcileContext, argv: List[str]) -> int:
        raise SystemExit(0)
