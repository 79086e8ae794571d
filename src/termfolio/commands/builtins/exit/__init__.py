"""Exit command - leave admin mode."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)


@command_registry.register("exit", "Exit admin mode", aliases=["logout"])
async def cmd_exit(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if not ctx.is_admin:
        return CommandResult.guidance("Nothing to exit.")
    try:
        await ctx.store.logout()
    except StoreError as e:
        # The local session still leaves admin mode
        logger.warning(f"exit: store logout failed: {e}")
    return CommandResult.success("✅ Exited admin mode.")
