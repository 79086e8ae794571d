"""Add command - create portfolio content (admin only).

Every subcommand validates all of its input before touching the store,
so a rejected command performs no writes.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import (
    VALID_PLATFORMS,
    is_web_url,
    join_args,
    parse_date,
    with_progress,
)
from termfolio.commands.parser import strip_quotes
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError
from termfolio.core.formatting import progress_bar, project_banner

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)

USAGE = """🛠️  Add Command Usage:

add project <title> "<description>" <tech1,tech2,tech3> [github_url] [demo_url]
add skill <category> <name> <proficiency_1-100> <years_experience>
add social <platform> <username> <url> "<display_name>"
add certificate <title> <issuer> <YYYY-MM-DD> "<description>" [credential_url]
add ascii <name> "<content>" [description]

Examples:
  add project "My App" "A cool web app" "React,Node.js,MongoDB" "https://github.com/user/repo"
  add skill "Frontend" "React" 90 3
  add social "github" "username" "https://github.com/username" "GitHub Profile"
  add certificate "AWS Developer" "Amazon" 2024-01-15 "Associate level"
  add ascii banner "line one\\nline two" "Two line banner\""""

BAD_URL = "❌ Invalid URL format. Please provide a valid URL including http:// or https://"


async def add_project(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if len(args) < 3:
        return CommandResult.guidance(
            '❌ Usage: add project <title> "<description>" <tech1,tech2,tech3> [github_url] [demo_url]'
        )
    title = strip_quotes(args[0]).strip()
    description = strip_quotes(args[1]).strip()
    tech_stack = [tech.strip() for tech in strip_quotes(args[2]).split(",") if tech.strip()]
    github = strip_quotes(args[3]) if len(args) > 3 else ""
    live_demo = strip_quotes(args[4]) if len(args) > 4 else ""

    if not title or not description:
        return CommandResult.guidance("❌ Project title and description cannot be empty.")
    if not tech_stack:
        return CommandResult.guidance("❌ Provide at least one technology (comma separated).")
    for url in (github, live_demo):
        if url and not is_web_url(url):
            return CommandResult.guidance(BAD_URL)

    fields = {
        "title": title,
        "description": description,
        "tech_stack": tech_stack,
        "github": github or None,
        "live_demo": live_demo or None,
        "ascii_art": project_banner(title),
        "status": "development",
        "featured": False,
    }
    try:
        record = await ctx.store.projects.create(fields)
    except StoreError as e:
        logger.warning(f"add project: {e}")
        return CommandResult.failure(f"❌ Failed to create project: {e}")

    lines = [
        f'✅ Project "{title}" created successfully!',
        f"🆔 ID: {record.id}",
        f"📝 Description: {description}",
        f"🛠️  Tech Stack: {', '.join(tech_stack)}",
    ]
    if github:
        lines.append(f"🔗 GitHub: {github}")
    if live_demo:
        lines.append(f"🌐 Demo: {live_demo}")
    return with_progress("Creating project...", "\n".join(lines), 2000)


async def add_skill(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if len(args) < 4:
        return CommandResult.guidance(
            "❌ Usage: add skill <category> <name> <proficiency_1-100> <years_experience>"
        )
    category, name = strip_quotes(args[0]).strip(), strip_quotes(args[1]).strip()
    try:
        proficiency = int(args[2])
    except ValueError:
        proficiency = None
    if proficiency is None or not 1 <= proficiency <= 100:
        return CommandResult.guidance("❌ Proficiency must be a number between 1 and 100")
    try:
        years = int(args[3])
    except ValueError:
        years = None
    if years is None or years < 0:
        return CommandResult.guidance("❌ Years of experience must be a positive number")

    fields = {
        "category": category,
        "name": name,
        "proficiency": proficiency,
        "years_of_experience": years,
    }
    try:
        record = await ctx.store.skills.create(fields)
    except StoreError as e:
        logger.warning(f"add skill: {e}")
        return CommandResult.failure(f"❌ Failed to add skill: {e}")

    body = "\n".join([
        f'✅ Skill "{name}" added to {category} category!',
        f"🆔 ID: {record.id}",
        f"📊 Proficiency: [{progress_bar(proficiency)}] {proficiency}%",
        f"⏰ Experience: {years} years",
    ])
    return with_progress("Adding skill...", body, 1500)


async def add_social(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if len(args) < 4:
        return CommandResult.guidance(
            '❌ Usage: add social <platform> <username> <url> "<display_name>"'
        )
    platform = strip_quotes(args[0]).strip().lower()
    username = strip_quotes(args[1]).strip()
    url = strip_quotes(args[2]).strip()
    display_name = join_args(args[3:])

    if platform not in VALID_PLATFORMS:
        return CommandResult.guidance(
            f"❌ Invalid platform. Valid platforms are: {', '.join(VALID_PLATFORMS)}"
        )
    if not is_web_url(url):
        return CommandResult.guidance(BAD_URL)

    fields = {
        "platform": platform,
        "username": username,
        "url": url,
        "display_name": display_name,
    }
    try:
        record = await ctx.store.social_links.create(fields)
    except StoreError as e:
        logger.warning(f"add social: {e}")
        return CommandResult.failure(f"❌ Failed to add social link: {e}")

    body = "\n".join([
        f"✅ Social link for {platform} added successfully!",
        f"🆔 ID: {record.id}",
        f"👤 Username: {username}",
        f"🔗 URL: {url}",
        f"📛 Display Name: {display_name}",
    ])
    return with_progress("Adding social link...", body, 1500)


async def add_certificate(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if len(args) < 4:
        return CommandResult.guidance(
            '❌ Usage: add certificate <title> <issuer> <YYYY-MM-DD> "<description>" [credential_url]'
        )
    title = strip_quotes(args[0]).strip()
    issuer = strip_quotes(args[1]).strip()
    try:
        date_issued = parse_date(args[2])
    except ValueError as e:
        return CommandResult.guidance(f"❌ {e}")
    description = strip_quotes(args[3]).strip()
    credential_url = strip_quotes(args[4]).strip() if len(args) > 4 else ""
    if credential_url and not is_web_url(credential_url):
        return CommandResult.guidance(BAD_URL)

    fields = {
        "title": title,
        "issuer": issuer,
        "date_issued": date_issued,
        "description": description,
        "credential_url": credential_url or None,
    }
    try:
        record = await ctx.store.certificates.create(fields)
    except StoreError as e:
        logger.warning(f"add certificate: {e}")
        return CommandResult.failure(f"❌ Failed to add certificate: {e}")

    lines = [
        f'✅ Certificate "{title}" added successfully!',
        f"🆔 ID: {record.id}",
        f"🏢 Issuer: {issuer}",
        f"📅 Issued: {date_issued:%Y-%m-%d}",
    ]
    if credential_url:
        lines.append(f"🔗 Credential: {credential_url}")
    return with_progress("Adding certificate...", "\n".join(lines), 1500)


async def add_ascii(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if len(args) < 2:
        return CommandResult.guidance('❌ Usage: add ascii <name> "<content>" [description]')
    name = strip_quotes(args[0]).strip()
    # Multi-line art is typed with literal \n separators
    content = strip_quotes(args[1]).replace("\\n", "\n")
    description = join_args(args[2:])
    if not content.strip():
        return CommandResult.guidance("❌ ASCII art content cannot be empty.")

    fields = {"name": name, "content": content, "description": description or None}
    try:
        record = await ctx.store.ascii_art.create(fields)
    except StoreError as e:
        logger.warning(f"add ascii: {e}")
        return CommandResult.failure(f"❌ Failed to create ASCII art: {e}")

    body = f'✅ ASCII art "{name}" created successfully!\n🆔 ID: {record.id}\n\nPreview:\n{content}'
    return with_progress("Creating ASCII art...", body, 1500)


SUBCOMMANDS = {
    "project": add_project,
    "skill": add_skill,
    "social": add_social,
    "certificate": add_certificate,
    "ascii": add_ascii,
}


@command_registry.register(
    "add",
    "Add portfolio content",
    usage="add project|skill|social|certificate|ascii ...",
    requires_admin=True,
)
async def cmd_add(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if not args:
        return CommandResult.guidance(USAGE)
    kind = args[0].lower()
    handler = SUBCOMMANDS.get(kind)
    if handler is None:
        return CommandResult.guidance(f"❌ Unknown type: {args[0]}. Use 'add' without args to see usage.")
    return await handler(ctx, args[1:])
