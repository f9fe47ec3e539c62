"""Help command."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import Command
from ..context import ReconcileContext
from ..output import emit_result

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry


class HelpCommand(Command):
    def __init__(self) -> None:
        super().__init__("help", "Show available commands", aliases=("?",))
        self._registry: CommandRegistry | None = None

    def bind(self, registry: "CommandRegistry") -> None:
        self._registry = registry

    def run(self, ctx: ReconcileContext, argv: List[str]) -> int:
        registry = self._registry
        if not registry:
            return 1
        commands = list(registry.list_commands())
        if ctx.json_output:
            emit_result(
                ctx,
                message="help",
                data={"commands": {command.name: command.description for command in commands}},
            )
            return 0
        for command in commands:
            print(command.format_help())
        return 0
