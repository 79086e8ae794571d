"""Admin command - authenticate into admin mode.

The handler only verifies the secret and opens the store-side session.
The terminal session flips its own privilege when it sees a successful
``admin`` result.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import with_progress
from termfolio.commands.context import OPEN_ADMIN_GUI
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)

GUI_FLAG = "--gui"
AUTH_FAILED = "❌ Authentication failed. Please try again."


@command_registry.register("admin", "Enter admin mode", usage="admin <password> [--gui]")
async def cmd_admin(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if not args:
        return CommandResult.guidance("Usage: admin <password> [--gui]")

    password = args[0]
    if password != ctx.setting("admin_password"):
        logger.info("Rejected admin password")
        return CommandResult.failure("❌ Invalid password. Access denied.")

    try:
        accepted = await ctx.store.authenticate(password)
    except StoreError as e:
        logger.warning(f"admin: store authentication failed: {e}")
        return CommandResult.failure(AUTH_FAILED)
    if not accepted:
        return CommandResult.failure(AUTH_FAILED)

    if GUI_FLAG in args:
        ctx.emit(OPEN_ADMIN_GUI)
        return CommandResult.success("🖥️  Opening Admin GUI Panel...")

    body = (
        "✅ Admin mode enabled. Type 'help' to view admin-only commands.\n\n"
        'Pro tip: Use "admin <password> --gui" for graphical interface!'
    )
    return with_progress("Verifying credentials...", body, 2000)
