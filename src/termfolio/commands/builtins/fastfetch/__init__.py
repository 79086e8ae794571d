"""Fastfetch command - ASCII system info."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)

# Name of the store ASCII art that replaces the builtin
ART_NAME = "fastfetch"

BUILTIN_ART = """                .--.         {user}@{host}
             .-"    "-.      -------------------------
            /          \\     OS: Portfolio Linux v1.0
           |            |    Shell: Python + prompt_toolkit
           |     📱     |    Host: {host}
            \\          /     RAM: ∞ Creativity
             '-.____..-'     CPU: Problem Solver
                            Uptime: Always Learning
                            Skills: Web, AI, Game Dev
                            Status: Available for Hire"""


async def find_art(ctx: "CommandContext") -> str | None:
    """Content of the stored ``fastfetch`` art, or None."""
    try:
        artworks = await ctx.store.ascii_art.list()
    except StoreError as e:
        logger.debug(f"fastfetch: using builtin art ({e})")
        return None
    for art in artworks:
        if art.name == ART_NAME:
            return art.content
    return None


@command_registry.register("fastfetch", "Display ASCII system info")
async def cmd_fastfetch(ctx: "CommandContext", args: list[str]) -> CommandResult:
    art = await find_art(ctx)
    if art is None:
        art = BUILTIN_ART.format(user=ctx.setting("prompt_user"), host=ctx.setting("prompt_host"))
    return CommandResult.success("\n".join(f"│ {line}" for line in art.split("\n")))
