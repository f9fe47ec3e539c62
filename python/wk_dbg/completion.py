"""prompt_toolkit completer for wk-dbg."""

from __future__ import annotations

from typing import Iterable, List

from prompt_toolkit.completion import CompleteEvent, Completer, Completion, PathCompleter
from prompt_toolkit.document import Document

from wkdbg import Platform

from .commands import CommandRegistry
from .context import ReconcileContext
from .parser import split_command

PATH_COMMANDS = {"exists", "webroot", "fixdrive", "canon", "classify"}
PLATFORM_NAMES = [platform.value for platform in Platform] + ["host"]


def _normalise_tokens(text: str) -> List[str]:
    if not text:
        return []
    tokens = split_command(text)
    if any(token.startswith("#parse-error") for token in tokens):
        tokens = text.split()
    if text[-1].isspace():
        tokens.append("")
    return tokens


class ReconcileCompleter(Completer):
    """Completes command names, platform names and local paths."""

    def __init__(self, ctx: ReconcileContext, registry: CommandRegistry) -> None:
        self.ctx = ctx
        self.registry = registry
        self._path = PathCompleter(expanduser=True)

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        tokens = _normalise_tokens(document.text_before_cursor)
        if len(tokens) <= 1:
            prefix = tokens[0] if tokens else ""
            for name in self._matching(self._command_names(), prefix):
                yield Completion(name, start_position=-len(prefix))
            return
        command = self.ctx.resolve_alias(tokens[0])
        prefix = tokens[-1]
        if command == "platform" and len(tokens) == 2:
            for name in self._matching(PLATFORM_NAMES, prefix):
                yield Completion(name, start_position=-len(prefix))
            return
        if command in PATH_COMMANDS or self._looks_like_path(prefix):
            yield from self._path.get_completions(Document(prefix, len(prefix)), complete_event)

    def _command_names(self) -> List[str]:
        names: List[str] = []
        for command in self.registry.list_commands():
            names.append(command.name)
            names.extend(command.aliases)
        names.extend(self.ctx.list_aliases())
        return sorted(set(names))

    @staticmethod
    def _matching(candidates: Iterable[str], prefix: str) -> List[str]:
        needle = prefix.lower()
        return sorted(dict.fromkeys(c for c in candidates if c.lower().startswith(needle)))

    @staticmethod
    def _looks_like_path(prefix: str) -> bool:
        return prefix.startswith((".", "/", "~", "\\"))
