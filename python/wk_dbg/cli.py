"""wk-dbg CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from wkdbg import Platform

from .commands import CommandRegistry, build_registry
from .context import PLATFORM_ENV, ReconcileContext, platform_from_env
from .history import HistoryStore
from .repl import ReconcileREPL

LOG = logging.getLogger("wk_dbg.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Map debug target URLs onto local source paths")
    parser.add_argument(
        "--platform",
        choices=[platform.value for platform in Platform],
        default=None,
        help=f"Path conventions to apply (default: ${PLATFORM_ENV} or the host)",
    )
    parser.add_argument("--web-root", dest="web_root", help="Local directory URLs map beneath")
    parser.add_argument("--cwd", help="Directory a relative --web-root resolves against")
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("WK_DBG_LOG", "WARNING"),
        help="Logging level (default WARNING)",
    )
    parser.add_argument(
        "-c",
        "--command",
        help="Execute a single command non-interactively (quote the command string)",
    )
    parser.add_argument("--script", type=Path, help="Execute commands from a file, one per line")
    parser.add_argument(
        "--history",
        type=Path,
        default=Path.home() / ".wk-dbg-history",
        help="Path to command history file",
    )
    return parser


def build_context(args: argparse.Namespace) -> ReconcileContext:
    platform = Platform.from_name(args.platform) if args.platform else platform_from_env()
    return ReconcileContext(
        json_output=args.json,
        platform_override=platform,
        web_root=args.web_root,
        cwd=args.cwd,
    )


def main(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    ctx = build_context(args)
    registry = build_registry()
    if args.command:
        return _run_single_command(ctx, registry, args.command)
    if args.script:
        return _run_script(ctx, registry, str(args.script))
    repl = ReconcileREPL(ctx, registry, history_store=HistoryStore(str(args.history)))
    try:
        return repl.run()
    except SystemExit as exc:
        return int(exc.code or 0)
    except KeyboardInterrupt:
        print()
        return 0


def _run_single_command(ctx: ReconcileContext, registry: CommandRegistry, command_line: str) -> int:
    repl = ReconcileREPL(ctx, registry)
    try:
        return repl.dispatch(command_line)
    except SystemExit as exc:
        return int(exc.code or 0)


def _run_script(ctx: ReconcileContext, registry: CommandRegistry, path: str) -> int:
    """Run each non-comment line of *path*; stop at the first failing command."""
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        print(f"Cannot read script {path}: {exc}")
        return 1
    repl = ReconcileREPL(ctx, registry)
    for lineno, line in enumerate(lines, start=1):
        try:
            rc = repl.dispatch(line)
        except SystemExit as exc:
            return int(exc.code or 0)
        if rc:
            LOG.debug("script %s stopped at line %d (rc=%d)", path, lineno, rc)
            return rc
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
