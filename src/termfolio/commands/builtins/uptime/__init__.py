"""Uptime command - time since the terminal started."""
from __future__ import annotations

import time
from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.formatting import section

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

STARTED = time.monotonic()


def format_uptime(seconds: float) -> str:
    seconds = int(seconds)
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return f"{days}d {hours}h {minutes}m {seconds}s"


@command_registry.register("uptime", "Show how long the terminal has been up")
def cmd_uptime(ctx: "CommandContext", args: list[str]) -> CommandResult:
    return CommandResult.success(
        section("⏱️  System Uptime", [format_uptime(time.monotonic() - STARTED)])
    )
