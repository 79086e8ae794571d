"""About command - show the owner's bio."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import load_failed, nothing_yet
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError
from termfolio.core.formatting import section, short_date

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)


@command_registry.register("about", "Display bio and background")
async def cmd_about(ctx: "CommandContext", args: list[str]) -> CommandResult:
    try:
        bio = await ctx.store.bio.get()
    except StoreError as e:
        logger.warning(f"about: {e}")
        return load_failed("bio information")

    if bio is None or not bio.content.strip():
        return nothing_yet(
            "No bio information available. Use the admin panel to add bio content."
        )

    lines = bio.content.split("\n")
    lines += ["", f"Last updated: {short_date(bio.last_updated)}"]
    return CommandResult.success(section("👨‍💻 About Me", lines, close=False))
