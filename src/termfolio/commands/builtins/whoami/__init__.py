"""Whoami command."""
from __future__ import annotations

from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.formatting import section

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext


@command_registry.register("whoami", "Show the current user")
def cmd_whoami(ctx: "CommandContext", args: list[str]) -> CommandResult:
    return CommandResult.success(
        section("👤 Current User", [ctx.setting("owner_name"), ctx.setting("owner_title")])
    )
