"""Output helpers for wk-dbg."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Sequence

from tabulate import tabulate

from .context import ReconcileContext


def _json_dump(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, indent=2, sort_keys=True)


def emit_result(ctx: ReconcileContext, *, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
    """Emit a successful command result."""
    if ctx.json_output:
        payload: Dict[str, Any] = {"status": "ok"}
        if data is not None:
            payload["result"] = data
        else:
            payload["message"] = message
        print(_json_dump(payload))
    else:
        print(message)


def emit_error(ctx: ReconcileContext, *, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
    """Emit an error message respecting JSON mode."""
    payload: Dict[str, Any] = {"status": "error", "error": message}
    if data:
        payload["details"] = dict(data)
    if ctx.json_output:
        print(_json_dump(payload))
    else:
        print(f"error: {message}")


def render_pairs(pairs: Sequence[Sequence[str]], *, arrow: str = "->") -> str:
    """Format ``(input, output)`` pairs one per line."""
    if not pairs:
        return ""
    width = max(len(str(left)) for left, _ in pairs)
    return "\n".join(f"{str(left):<{width}}  {arrow} {right}" for left, right in pairs)


def render_candidates(rows: Sequence[Mapping[str, Any]]) -> str:
    """Render probed resolution candidates as a table."""
    if not rows:
        return "  candidates: (none)"
    table = [
        (index, row.get("path", ""), "yes" if row.get("exists") else "no")
        for index, row in enumerate(rows, start=1)
    ]
    return tabulate(table, headers=["#", "candidate", "exists"], tablefmt="github")


__all__ = [
    "emit_result",
    "emit_error",
    "render_pairs",
    "render_candidates",
]
