"""Delete command - remove portfolio content (admin only). Irreversible."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import with_progress
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError, StoreNotFoundError

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)

USAGE = """🗑️  Delete Command Usage:

delete project <id>
delete skill <id>
delete social <id>
delete certificate <id>
delete message <id>
delete ascii <id>

⚠️  Warning: This action cannot be undone!

Use 'view messages' or 'view projects' to find IDs first."""

# type -> (store attribute, label)
TARGETS = {
    "project": ("projects", "project"),
    "skill": ("skills", "skill"),
    "social": ("social_links", "social link"),
    "certificate": ("certificates", "certificate"),
    "message": ("messages", "message"),
    "ascii": ("ascii_art", "ASCII art"),
}


@command_registry.register(
    "delete",
    "Remove portfolio content",
    usage="delete <type> <id>",
    requires_admin=True,
)
async def cmd_delete(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if len(args) < 2:
        return CommandResult.guidance(USAGE)

    kind, record_id = args[0].lower(), args[1]
    if kind not in TARGETS:
        return CommandResult.guidance(f"❌ Unknown delete type: {args[0]}")
    attribute, label = TARGETS[kind]

    try:
        await getattr(ctx.store, attribute).delete(record_id)
    except StoreNotFoundError:
        return CommandResult.guidance(f"❌ No {label} with ID {record_id}.")
    except StoreError as e:
        logger.warning(f"delete {kind} {record_id}: {e}")
        return CommandResult.failure(f"❌ Failed to delete {label}: {e}")

    logger.info(f"Deleted {label} {record_id}")
    body = f"✅ {label} deleted successfully!\n🗑️  Item ID: {record_id}"
    return with_progress(f"Deleting {label}...", body, 1000)
