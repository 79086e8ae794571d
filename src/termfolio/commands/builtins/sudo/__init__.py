"""Sudo command - the hiring easter egg."""
from __future__ import annotations

from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.formatting import section

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

SECRET_TARGET = "hire-christopher"

GRANTED = [
    "🎉 Excellent choice! Here's what happens next:",
    "",
    "1. Your team gains a passionate developer",
    "2. Code quality improves dramatically",
    "3. Projects get shipped faster",
    "4. Everyone is happier",
    "",
    "To proceed with this upgrade, please:",
    '1. Check out my resume above (run "resume")',
    '2. Connect on LinkedIn (run "social")',
    '3. Send me a message (run "contact")',
    "",
    "I look forward to creating amazing things together! 🚀",
]


@command_registry.register("sudo", "Run a command as root", usage=f"sudo {SECRET_TARGET}")
def cmd_sudo(ctx: "CommandContext", args: list[str]) -> CommandResult:
    target = " ".join(args)
    if target == SECRET_TARGET:
        return CommandResult.success(section("🔑 Sudo Access Granted", GRANTED))
    if not args:
        return CommandResult.guidance(f"usage: sudo {SECRET_TARGET}")
    return CommandResult.failure(f"sudo: {target}: command not found")
