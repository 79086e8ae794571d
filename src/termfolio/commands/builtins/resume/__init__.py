"""Resume command - resume link and GitHub statistics."""
from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import load_failed
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError
from termfolio.core.formatting import short_date

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)


@command_registry.register("resume", "Show GitHub stats and resume link")
async def cmd_resume(ctx: "CommandContext", args: list[str]) -> CommandResult:
    resume, stats = await asyncio.gather(
        ctx.store.resume.get(),
        ctx.store.github_stats.get(),
        return_exceptions=True,
    )
    if isinstance(resume, StoreError):
        logger.warning(f"resume: {resume}")
        return load_failed("resume information")
    if isinstance(resume, BaseException):
        raise resume
    if resume is None or not resume.url:
        return CommandResult.guidance("Resume information not found. Please try again later.")

    out = ["📄 Resume & Stats", "│"]
    if isinstance(stats, StoreError):
        # Stats are optional decoration
        logger.info(f"resume: GitHub stats unavailable: {stats}")
    elif isinstance(stats, BaseException):
        raise stats
    elif stats is not None:
        out += ["│ GitHub Statistics", "│"]
        out += [f"│ {key:<20} {value}" for key, value in stats.counters().items()]
        out.append("│")

    out += [
        "│ Resume",
        "│",
        f"│ 📎 View/Download: {resume.url}",
        f"│ Last updated: {short_date(resume.last_updated)}",
        "│",
    ]
    return CommandResult.success("\n".join(out))
