"""
Command system for the portfolio terminal.

Commands are loaded from:
1. Package builtins (one package per verb)
2. An optional user commands directory
"""

from __future__ import annotations

from termfolio.commands.context import OPEN_ADMIN_GUI, CommandContext
from termfolio.commands.loader import load_all_commands, load_user_commands
from termfolio.commands.parser import split_verb, tokenize
from termfolio.commands.registry import (
    CommandEntry,
    CommandRegistry,
    command_not_found,
    command_registry,
)

__all__ = [
    "OPEN_ADMIN_GUI",
    "CommandContext",
    "CommandEntry",
    "CommandRegistry",
    "command_not_found",
    "command_registry",
    "load_all_commands",
    "load_user_commands",
    "split_verb",
    "tokenize",
]
