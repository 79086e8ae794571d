"""Project command - detail view of one project by its list number."""
from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from termfolio.commands.common import load_failed, nothing_yet
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError
from termfolio.core.formatting import center, status_marker, wrap_bordered

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext
    from termfolio.store.models import Project

logger = logging.getLogger(__name__)

USAGE = "Usage: project <number>\nExample: project 1"

FEATURE_MARKERS = ("•", "✨", "📚")
BULLET = re.compile(r"^[•✨📚]\s*")
LABEL_PREFIX = re.compile(r"^[^:]+:\s*")


def render_project(project: "Project") -> str:
    """Full detail view: about, features, purpose, stack, links and status."""
    description = project.description
    out = [center(project.title.upper()), "", "📋 About", "│", f"│ 📁 {project.title}", "│"]

    out += ["│ ✨ Overview:", "│"]
    out += wrap_bordered(description)
    out.append("│")

    if "✨" in description or "•" in description:
        out += ["│ ✨ Key Features:", "│"]
        for raw in description.split("\n"):
            line = raw.strip()
            if line.startswith(FEATURE_MARKERS):
                out.append(f"│ ⭐ {BULLET.sub('', line).strip()}")
        out.append("│")

    if "purpose" in description.lower():
        out += ["│ 🎯 Purpose:", "│"]
        purpose = next(line for line in description.split("\n") if "purpose" in line.lower())
        out += [f"│ {LABEL_PREFIX.sub('', purpose)}", "│"]

    out += ["", "🛠️  Technologies", "│", f"│ {', '.join(project.tech_stack)}", "│", ""]

    if project.github or project.live_demo:
        out += ["🔗 Links", "│"]
        if project.github:
            out.append(f"│ 📦 Repository    {project.github}")
        if project.live_demo:
            out.append(f"│ 🌐 Live Demo     {project.live_demo}")
        out += ["│", ""]

    out += ["📊 Project Status", "│", f"│ {status_marker(project.status)}", "│"]
    return "\n".join(out)


@command_registry.register("project", "View one project", usage="project <number>")
async def cmd_project(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if not args:
        return CommandResult.guidance(USAGE)
    try:
        index = int(args[0]) - 1
    except ValueError:
        return CommandResult.guidance(USAGE)

    try:
        projects = await ctx.store.projects.list()
    except StoreError as e:
        logger.warning(f"project: {e}")
        return load_failed("project details")

    if not projects:
        return nothing_yet("No projects found. Use the admin panel to add projects first.")
    if index < 0 or index >= len(projects):
        return CommandResult.guidance(
            'Project not found. Use "projects" to see available projects.'
        )
    return CommandResult.success(render_project(projects[index]))
