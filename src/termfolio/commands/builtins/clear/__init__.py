"""Clear command - clear the scrollback."""
from __future__ import annotations

from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext


@command_registry.register("clear", "Clear the terminal screen")
def cmd_clear(ctx: "CommandContext", args: list[str]) -> CommandResult:
    return CommandResult.clear()
