"""Pwd command."""
from __future__ import annotations

from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.formatting import section

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext


@command_registry.register("pwd", "Print the working directory")
def cmd_pwd(ctx: "CommandContext", args: list[str]) -> CommandResult:
    home = f"/home/{ctx.setting('prompt_user')}"
    return CommandResult.success(section("📂 Current Directory", [home]))
