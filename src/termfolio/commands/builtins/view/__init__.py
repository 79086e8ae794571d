"""View command - admin listings with record ids."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import admin_load_failed, with_progress
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError
from termfolio.core.formatting import platform_icon, progress_bar, short_date, truncate
from termfolio.store.models import GithubStats

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)

USAGE = """👁️  View Command Usage:

view messages       → List all contact messages
view projects       → List all projects with IDs
view skills         → List all skills with IDs
view social         → List all social links with IDs
view certificates   → List all certificates with IDs
view ascii          → List all ASCII art with IDs
view stats          → Show current GitHub statistics
view bio            → Show the raw bio text

Examples:
  view messages
  view projects"""


async def view_messages(ctx: "CommandContext") -> CommandResult:
    messages = await ctx.store.messages.list()
    if not messages:
        return CommandResult.success("📭 No messages found.")
    out = [f"📬 Contact Messages ({len(messages)} total):", ""]
    for message in messages:
        status = "✅" if message.read else "📩"
        out.append(f"{status} [{message.id}] {message.name} <{message.email}>")
        out.append(f"    Date: {short_date(message.timestamp)}")
        out.append(f"    Message: {truncate(message.message, 100)}")
        out.append("")
    out.append("Use 'delete message <id>' to remove messages.")
    return with_progress("Loading messages...", "\n".join(out), 1000)


async def view_projects(ctx: "CommandContext") -> CommandResult:
    projects = await ctx.store.projects.list()
    if not projects:
        return CommandResult.success('📂 No projects found. Use "add project" to create your first project.')
    out = [f"📂 Projects Database ({len(projects)} total):", ""]
    for project in projects:
        out.append(f"🔹 [{project.id}] {project.title}")
        out.append(f"   Status: {project.status} | Tech: {', '.join(project.tech_stack[:3])}")
        out.append(f"   Description: {truncate(project.description, 80)}")
        out.append("")
    return with_progress("Loading projects...", "\n".join(out).rstrip(), 1500)


async def view_skills(ctx: "CommandContext") -> CommandResult:
    skills = await ctx.store.skills.list()
    if not skills:
        return CommandResult.success('🛠️  No skills found. Use "add skill" to add your technical skills.')
    groups: dict[str, list] = {}
    for skill in skills:
        groups.setdefault(skill.category, []).append(skill)
    out = ["🛠️  Skills Database:", ""]
    for category, members in groups.items():
        out.append(f"📋 {category}:")
        for skill in members:
            out.append(
                f"   [{skill.id}] {skill.name} - {skill.proficiency}% "
                f"({skill.years_of_experience}y)"
            )
            out.append(f"   [{progress_bar(skill.proficiency)}]")
        out.append("")
    return with_progress("Loading skills database...", "\n".join(out).rstrip(), 1500)


async def view_social(ctx: "CommandContext") -> CommandResult:
    links = await ctx.store.social_links.list()
    if not links:
        return CommandResult.success('🔗 No social links found. Use "add social" to add your social media profiles.')
    out = [f"🔗 Social Links ({len(links)} total):", ""]
    for link in links:
        out.append(f"{platform_icon(link.platform)} [{link.id}] {link.display_name}")
        out.append(f"   Platform: {link.platform} | Username: {link.username}")
        out.append(f"   URL: {link.url}")
        out.append("")
    return with_progress("Loading social links...", "\n".join(out).rstrip(), 1000)


async def view_certificates(ctx: "CommandContext") -> CommandResult:
    certificates = await ctx.store.certificates.list()
    if not certificates:
        return CommandResult.success('🏆 No certificates found. Use "add certificate" to add one.')
    out = [f"🏆 Certificates ({len(certificates)} total):", ""]
    for cert in certificates:
        out.append(f"📜 [{cert.id}] {cert.title}")
        out.append(f"   Issuer: {cert.issuer} | Issued: {short_date(cert.date_issued)}")
        if cert.credential_url:
            out.append(f"   URL: {cert.credential_url}")
        out.append("")
    return with_progress("Loading certificates...", "\n".join(out).rstrip(), 1000)


async def view_ascii(ctx: "CommandContext") -> CommandResult:
    artworks = await ctx.store.ascii_art.list()
    if not artworks:
        return CommandResult.success('🎨 No ASCII art found. Use "add ascii" to create custom ASCII art.')
    out = [f"🎨 ASCII Art Gallery ({len(artworks)} pieces):", ""]
    for art in artworks:
        out.append(f"🖼️  [{art.id}] {art.name}")
        if art.description:
            out.append(f"   Description: {art.description}")
        out.append(f"   Preview: {truncate(art.content.split(chr(10))[0], 50)}")
        out.append("")
    return with_progress("Loading ASCII art gallery...", "\n".join(out).rstrip(), 1500)


async def view_stats(ctx: "CommandContext") -> CommandResult:
    stats = await ctx.store.github_stats.get() or GithubStats()
    body = "\n".join([
        "📊 Current GitHub Statistics:",
        "",
        f"⭐ Total Stars: {stats.stars}",
        f"🔧 Total Commits: {stats.commits}",
        f"📂 Public Repositories: {stats.repos}",
        f"👥 Followers: {stats.followers}",
        f"🧪 Pull Requests: {stats.pull_requests}",
        f"🐛 Issues Opened: {stats.issues}",
        "",
        'Use "edit stats <field> <value>" to update these statistics.',
    ])
    return with_progress("Loading GitHub statistics...", body, 1000)


async def view_bio(ctx: "CommandContext") -> CommandResult:
    bio = await ctx.store.bio.get()
    if bio is None or not bio.content.strip():
        return CommandResult.success('👤 No bio yet. Use "edit bio" to write one.')
    return CommandResult.success(
        f"👤 Bio (last updated {short_date(bio.last_updated)}):\n\n{bio.content}"
    )


# type -> (lister, what to call it when loading fails)
VIEWS = {
    "messages": (view_messages, "messages"),
    "projects": (view_projects, "projects"),
    "skills": (view_skills, "skills"),
    "social": (view_social, "social links"),
    "certificates": (view_certificates, "certificates"),
    "ascii": (view_ascii, "ASCII art"),
    "stats": (view_stats, "GitHub stats"),
    "bio": (view_bio, "bio"),
}


@command_registry.register(
    "view",
    "Admin listings with IDs",
    usage="view <type>",
    requires_admin=True,
)
async def cmd_view(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if not args:
        return CommandResult.guidance(USAGE)
    kind = args[0].lower()
    if kind not in VIEWS:
        return CommandResult.guidance(f"❌ Unknown view type: {args[0]}. Use 'view' without args to see usage.")

    lister, what = VIEWS[kind]
    try:
        return await lister(ctx)
    except StoreError as e:
        logger.warning(f"view {kind}: {e}")
        return admin_load_failed(what)
