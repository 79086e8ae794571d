"""Echo command - print the arguments."""
from __future__ import annotations

from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext


@command_registry.register("echo", "Print arguments", usage="echo <text>")
def cmd_echo(ctx: "CommandContext", args: list[str]) -> CommandResult:
    return CommandResult.success(" ".join(args))
