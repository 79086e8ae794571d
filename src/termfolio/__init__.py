"""
termfolio - a developer portfolio presented as a terminal.

Visitors type shell-like commands to browse projects, skills and
certificates or to send a contact message; the owner authenticates
with ``admin <password>`` to manage content from the same prompt.
"""

__version__ = "0.1.0"

from termfolio.commands import CommandContext, CommandRegistry, command_registry
from termfolio.core import CommandResult, KeyPress, Line, PrivilegeMode
from termfolio.terminal import TerminalSession

__all__ = [
    "__version__",
    "CommandContext",
    "CommandRegistry",
    "CommandResult",
    "KeyPress",
    "Line",
    "PrivilegeMode",
    "TerminalSession",
    "command_registry",
]
