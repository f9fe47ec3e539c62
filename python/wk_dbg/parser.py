"""Lightweight command parsing helpers for wk-dbg."""

from __future__ import annotations

import shlex
from typing import List


def split_command(line: str) -> List[str]:
    """Split a command line into argv tokens using shlex rules."""
    if not line:
        return []
    # posix=False keeps Windows backslashes intact; quotes are stripped below.
    try:
        tokens = shlex.split(line, comments=False, posix=False)
    except ValueError as exc:
        return [line.strip(), f"#parse-error:{exc}"]
    return [_unquote(token) for token in tokens]


def _unquote(token: str) -> str:
    if len(token) >= 2 and token[0] == token[-1] and token[0] in {'"', "'"}:
        return token[1:-1]
    return token
