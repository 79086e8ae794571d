"""Edit command - change existing portfolio content (admin only)."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from pydantic.alias_generators import to_camel

from termfolio.commands.common import EDITABLE_FIELDS, coerce_field, join_args, with_progress
from termfolio.commands.parser import strip_quotes
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError, StoreNotFoundError
from termfolio.core.formatting import truncate
from termfolio.store.models import STATS_FIELDS, GithubStats

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext
    from termfolio.store.base import Collection

logger = logging.getLogger(__name__)

USAGE = """🛠️  Edit Command Usage:

edit bio "<new_content>"
edit stats <field> <value>
edit project <id> <field> <value>
edit skill <id> <field> <value>
edit certificate <id> <field> <value>
edit ascii <id> <field> <value>
edit social <id|platform> <field> <value>
edit message <id> read|unread

Examples:
  edit project proj123 title "New Project Name"
  edit skill skill456 proficiency 95
  edit bio "Updated bio content with new information"
  edit stats stars 150"""

STATS_WIRE_FIELDS = [to_camel(name) for name in STATS_FIELDS]

# entity -> (store attribute, label, plural used by 'view')
ENTITIES = {
    "project": ("projects", "Project", "projects"),
    "skill": ("skills", "Skill", "skills"),
    "certificate": ("certificates", "Certificate", "certificates"),
    "ascii": ("ascii_art", "ASCII art", "ascii"),
    "social": ("social_links", "Social link", "social"),
}


def _display(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(value)
    if isinstance(value, datetime):
        return f"{value:%Y-%m-%d}"
    return str(value)


async def edit_bio(ctx: "CommandContext", args: list[str]) -> CommandResult:
    content = join_args(args)
    if not content:
        return CommandResult.guidance('❌ Usage: edit bio "<new_content>"')
    try:
        await ctx.store.bio.update({"content": content})
    except StoreError as e:
        logger.warning(f"edit bio: {e}")
        return CommandResult.failure(f"❌ Failed to update bio: {e}")

    body = f"✅ Bio updated successfully!\n\nNew content preview:\n{truncate(content, 200)}"
    return with_progress("Updating bio...", body, 1500)


async def edit_stats(ctx: "CommandContext", args: list[str]) -> CommandResult:
    """Read the current stats, merge one counter and write them back."""
    if len(args) < 2:
        return CommandResult.guidance(
            "❌ Usage: edit stats <field> <value>\n"
            f"Fields: {', '.join(STATS_WIRE_FIELDS)}"
        )
    field, raw = args[0], args[1]
    if field not in STATS_WIRE_FIELDS:
        return CommandResult.guidance(
            f"❌ Invalid field: {field}. Valid fields: {', '.join(STATS_WIRE_FIELDS)}"
        )
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        return CommandResult.guidance("❌ Value must be a positive number")

    try:
        current = await ctx.store.github_stats.get() or GithubStats()
        counters = {name: getattr(current, name) for name in STATS_FIELDS}
        counters[STATS_FIELDS[STATS_WIRE_FIELDS.index(field)]] = value
        stats = await ctx.store.github_stats.update(counters)
    except StoreError as e:
        logger.warning(f"edit stats: {e}")
        return CommandResult.failure(f"❌ Failed to update stats: {e}")

    body = "\n".join([
        "✅ GitHub stats updated successfully!",
        f"📊 {field}: {value}",
        "",
        "Current stats:",
        f"⭐ Stars: {stats.stars}        🔧 Commits: {stats.commits}",
        f"📂 Repos: {stats.repos}       👥 Followers: {stats.followers}",
        f"🧪 PRs: {stats.pull_requests}    🐛 Issues: {stats.issues}",
    ])
    return with_progress("Updating GitHub stats...", body, 1500)


async def edit_message(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if len(args) < 2 or args[1].lower() not in ("read", "unread"):
        return CommandResult.guidance("❌ Usage: edit message <id> read|unread")
    message_id, state = args[0], args[1].lower()
    try:
        await ctx.store.messages.update(message_id, {"read": state == "read"})
    except StoreNotFoundError:
        return CommandResult.guidance(
            f"❌ Message {message_id} not found. Use 'view messages' to get IDs."
        )
    except StoreError as e:
        logger.warning(f"edit message: {e}")
        return CommandResult.failure(f"❌ Failed to update message: {e}")
    return CommandResult.success(f"✅ Message {message_id} marked as {state}.")


async def find_social(collection: "Collection", key: str) -> Optional[Any]:
    """Social links are addressed by id or by platform name."""
    link = await collection.get(key)
    if link is not None:
        return link
    for candidate in await collection.list():
        if candidate.platform.lower() == key.lower():
            return candidate
    return None


async def edit_record(ctx: "CommandContext", kind: str, args: list[str]) -> CommandResult:
    """Edit one field of an id-addressed record."""
    attribute, label, plural = ENTITIES[kind]
    key_name = "id|platform" if kind == "social" else "id"
    fields = EDITABLE_FIELDS[kind]
    if len(args) < 3:
        return CommandResult.guidance(
            f"❌ Usage: edit {kind} <{key_name}> <field> <value>\n"
            f"Fields: {', '.join(fields)}"
        )

    key, field = args[0], args[1]
    if field not in fields:
        return CommandResult.guidance(
            f"❌ Invalid field: {field}. Valid fields: {', '.join(fields)}"
        )
    raw = strip_quotes(" ".join(args[2:])).strip()
    try:
        name, value = coerce_field(kind, field, raw)
    except ValueError as e:
        return CommandResult.guidance(f"❌ {e}")

    collection = getattr(ctx.store, attribute)
    try:
        if kind == "social":
            record = await find_social(collection, key)
        else:
            record = await collection.get(key)
        if record is None:
            return CommandResult.guidance(
                f"❌ {label} {key} not found. Use 'view {plural}' to get IDs."
            )
        await collection.update(record.id, {name: value})
    except StoreNotFoundError:
        return CommandResult.guidance(f"❌ {label} {key} not found. Use 'view {plural}' to get IDs.")
    except StoreError as e:
        logger.warning(f"edit {kind}: {e}")
        return CommandResult.failure(f"❌ Failed to update {label.lower()}: {e}")

    body = "\n".join([
        f"✅ {label} updated successfully!",
        f"🆔 ID: {record.id}",
        f"📝 {field}: {_display(value)}",
    ])
    return with_progress(f"Updating {label.lower()}...", body, 1500)


async def run_edit(ctx: "CommandContext", args: list[str], usage: str = USAGE) -> CommandResult:
    """Route to the edit subcommand; shared with ``update``."""
    if len(args) < 2:
        return CommandResult.guidance(usage)

    kind, rest = args[0].lower(), args[1:]
    if kind == "bio":
        return await edit_bio(ctx, rest)
    if kind == "stats":
        return await edit_stats(ctx, rest)
    if kind == "message":
        return await edit_message(ctx, rest)
    if kind in ENTITIES:
        return await edit_record(ctx, kind, rest)
    return CommandResult.guidance(f"❌ Unknown edit type: {args[0]}")


@command_registry.register(
    "edit",
    "Edit portfolio content",
    usage="edit <type> <id> <field> <value>",
    requires_admin=True,
)
async def cmd_edit(ctx: "CommandContext", args: list[str]) -> CommandResult:
    return await run_edit(ctx, args)
