"""Social command - list social links."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import load_failed, nothing_yet
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError
from termfolio.core.formatting import platform_icon

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)


@command_registry.register("social", "Show Gmail, GitHub, LinkedIn, Instagram")
async def cmd_social(ctx: "CommandContext", args: list[str]) -> CommandResult:
    try:
        links = await ctx.store.social_links.list()
    except StoreError as e:
        logger.warning(f"social: {e}")
        return load_failed("social links")

    if not links:
        return nothing_yet("No social links found. Use the admin panel to add social links first.")

    out = ["🔗 Social Links", "│"]
    for link in links:
        platform = link.platform[:1].upper() + link.platform[1:]
        out.append(f"│ {platform_icon(link.platform)} {platform:<16} {link.url}")
    out.append("│")
    return CommandResult.success("\n".join(out))
