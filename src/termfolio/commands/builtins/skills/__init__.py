"""Skills command - show the tech stack grouped by category."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import load_failed, nothing_yet
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError
from termfolio.core.formatting import (
    category_icon,
    proficiency_bar,
    proficiency_level,
)

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext
    from termfolio.store.models import Skill

logger = logging.getLogger(__name__)

WIDTH = 90

LEGEND = """│ Legend
│ {rule}
│
│ Proficiency Scale:
│ ██████████ Expert       (90-100%)
│ ████████░░ Advanced     (80-89%)
│ ██████░░░░ Intermediate (60-79%)
│ ████░░░░░░ Competent    (40-59%)
│ ██░░░░░░░░ Beginner     (0-39%)
│"""


def group_by_category(skills: list["Skill"]) -> dict[str, list["Skill"]]:
    """Group in first-seen category order, strongest skill first."""
    groups: dict[str, list["Skill"]] = {}
    for skill in skills:
        groups.setdefault(skill.category, []).append(skill)
    for members in groups.values():
        members.sort(key=lambda s: s.proficiency, reverse=True)
    return groups


def render_skills(groups: dict[str, list["Skill"]]) -> str:
    out = ["💻 Technical Skills", "│"]
    categories = list(groups)
    for index, category in enumerate(categories):
        corner = "└" if index == len(categories) - 1 else "├"
        out.append(f"│ {category_icon(category)} {category}")
        out.append(f"│ {corner}{'─' * (WIDTH - 4)}")
        out.append("│")
        for skill in groups[category]:
            name = skill.name
            if skill.years_of_experience:
                name = f"{skill.name} ({skill.years_of_experience}+ years)"
            level = f"{skill.proficiency}% - {proficiency_level(skill.proficiency)}"
            out.append(f"│ {name:<25} {proficiency_bar(skill.proficiency)} {level}".rstrip())
            if skill.description:
                for line in skill.description.split("\n"):
                    out.append(f"│ {' ' * 27}{line}")
        out.append("│")
    out.append(LEGEND.format(rule="─" * (WIDTH - 4)))
    return "\n".join(out)


@command_registry.register("skills", "List current tech stack")
async def cmd_skills(ctx: "CommandContext", args: list[str]) -> CommandResult:
    try:
        skills = await ctx.store.skills.list()
    except StoreError as e:
        logger.warning(f"skills: {e}")
        return load_failed("skills information")

    if not skills:
        return nothing_yet("No skills found. Use the admin panel to add skills first.")
    return CommandResult.success(render_skills(group_by_category(skills)))
