"""Update command - alias of edit with its own usage text (admin only)."""
from __future__ import annotations

from typing import TYPE_CHECKING

from termfolio.commands.builtins.edit import run_edit
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

USAGE = """🔄 Update Command Usage:

update bio "<new_content>"
update stats <field> <value>
update social <platform> <field> <value>
update project <id> <field> <value>
update ascii <id> content "<new art>"

This is an alias for the 'edit' command.
Use 'edit' for the same functionality."""


@command_registry.register(
    "update",
    "Update portfolio content (same as edit)",
    usage="update <type> ...",
    requires_admin=True,
)
async def cmd_update(ctx: "CommandContext", args: list[str]) -> CommandResult:
    return await run_edit(ctx, args, usage=USAGE)
