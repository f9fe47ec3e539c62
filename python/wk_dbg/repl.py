"""Interactive REPL for wk-dbg."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout

from .commands import CommandRegistry
from .completion import ReconcileCompleter
from .context import ReconcileContext
from .history import HistoryStore
from .parser import split_command

LOGGER = logging.getLogger("wk_dbg.repl")

PROMPT = "wk> "


class ReconcileREPL:
    """prompt_toolkit REPL; piped stdin is read line by line instead."""

    def __init__(
        self,
        ctx: ReconcileContext,
        registry: CommandRegistry,
        *,
        history_store: Optional[HistoryStore] = None,
    ) -> None:
        self.ctx = ctx
        self.registry = registry
        self.history_store = history_store

    def run(self) -> int:
        if not sys.stdin.isatty():
            return self._stream_loop()
        history = InMemoryHistory()
        if self.history_store:
            for entry in self.history_store.snapshot():
                history.append_string(entry)
        session = PromptSession(
            PROMPT,
            history=history,
            completer=ReconcileCompleter(self.ctx, self.registry),
            complete_while_typing=True,
        )
        buffer: list[str] = []
        while True:
            try:
                with patch_stdout():
                    line = session.prompt()
            except (EOFError, KeyboardInterrupt):
                print()
                return 0
            if self._handle_multiline(buffer, line):
                continue
            payload = " ".join(buffer) if buffer else line
            buffer.clear()
            self._record_history(payload)
            self.dispatch(payload)

    def _stream_loop(self) -> int:
        buffer: list[str] = []
        for line in sys.stdin:
            if self._handle_multiline(buffer, line):
                continue
            payload = " ".join(buffer) if buffer else line
            buffer.clear()
            self.dispatch(payload)
        return 0

    def dispatch(self, line: str) -> int:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            return 0
        argv = split_command(stripped)
        if not argv:
            return 0
        cmd_name, *cmd_args = argv
        if cmd_args and cmd_args[-1].startswith("#parse-error"):
            print(f"Parse error: {cmd_args[-1].split(':', 1)[-1]}")
            return 1
        cmd_name = self.ctx.resolve_alias(cmd_name)
        command = self.registry.get(cmd_name)
        if not command:
            print(f"Unknown command: {cmd_name}")
            return 1
        try:
            return command.run(self.ctx, cmd_args)
        except SystemExit:
            raise
        except Exception as exc:
            LOGGER.exception("command failed")
            print(f"Command '{cmd_name}' failed: {exc}")
            return 1

    @staticmethod
    def _handle_multiline(buffer: list[str], line: str) -> bool:
        stripped = line.rstrip()
        # "C:\" ends in a backslash too; continuation needs whitespace before it
        if stripped.endswith((" \\", "\t\\")):
            buffer.append(stripped[:-2])
            return True
        if buffer:
            buffer.append(stripped)
        return False

    def _record_history(self, entry: str) -> None:
        if self.history_store:
            self.history_store.append(entry)
