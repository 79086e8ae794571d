"""Projects command - numbered project list."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import load_failed, nothing_yet, with_progress
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)

NO_PROJECTS = "No projects found. Use the admin panel to add projects first."


@command_registry.register("projects", "List and view project details")
async def cmd_projects(ctx: "CommandContext", args: list[str]) -> CommandResult:
    try:
        projects = await ctx.store.projects.list()
    except StoreError as e:
        logger.warning(f"projects: {e}")
        return load_failed("projects information")

    if not projects:
        return nothing_yet(NO_PROJECTS)

    rows = [f"  {str(number).ljust(2)} │ {project.title}"
            for number, project in enumerate(projects, start=1)]
    body = "📂 Projects:\n\n" + "\n".join(rows)
    body += "\n\nType 'project [number]' to view details (e.g., 'project 1')"
    return with_progress("Loading projects...", body, 2000)
