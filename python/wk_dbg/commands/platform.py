"""Platform command."""

from __future__ import annotations

import argparse
from typing import List

from wkdbg import Platform

from .base import Command
from ..context import ReconcileContext
from ..output import emit_result

_CHOICES = [platform.value for platform in Platform] + ["host"]


class PlatformCommand(Command):
    def __init__(self) -> None:
        super().__init__("platform", "Show or override the path platform")
        self._parser = argparse.ArgumentParser(prog="platform", add_help=False)
        self._parser.add_argument("name", nargs="?", choices=_CHOICES, help="Platform to emulate, or 'host'")

    def run(self, ctx: ReconcileContext, argv: List[str]) -> int:
        args = self.parse_args(self._parser, argv)
        if args is None:
            return 1
        if args.name == "host":
            ctx.set_platform(None)
        elif args.name:
            ctx.set_platform(Platform.from_name(args.name))
        platform = ctx.platform
        source = "override" if ctx.platform_override is not None else "host"
        emit_result(
            ctx,
            message=f"platform: {platform.value} ({source})  separator: {platform.sep}",
            data={"platform": platform.value, "source": source, "separator": platform.sep},
        )
        return 0
