"""Date command."""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.formatting import section

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext


@command_registry.register("date", "Show the current date and time")
def cmd_date(ctx: "CommandContext", args: list[str]) -> CommandResult:
    now = datetime.now().astimezone()
    stamp = now.strftime("%A, %B %d, %Y at %I:%M:%S %p %Z")
    return CommandResult.success(section("📅 Current Time", [stamp]))
