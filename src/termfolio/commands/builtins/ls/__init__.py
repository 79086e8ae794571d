"""Ls command."""
from __future__ import annotations

from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

LISTING = """📁 Directory Contents
│
│ Available Commands
│ ├─ help, about, skills
│ ├─ projects, certificates, contact, resume
│ ├─ social, fastfetch
│ └─ clear, exit
│
│ Files
│ └─ about.txt, skills.txt, contact.txt
│"""


@command_registry.register("ls", "List directory contents")
def cmd_ls(ctx: "CommandContext", args: list[str]) -> CommandResult:
    return CommandResult.success(LISTING)
