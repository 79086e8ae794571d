"""Help command - show the command reference for the current mode."""
from __future__ import annotations

from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

GUEST_HELP = """📋 Available Commands
│
│ Navigation
│ ├─ help         → Show this command list
│ ├─ clear        → Clear the terminal screen
│ └─ exit         → Exit the terminal
│
│ Portfolio
│ ├─ about        → Display bio and background
│ ├─ skills       → List current tech stack
│ ├─ projects     → List and view project details
│ ├─ certificates → Show certifications
│ ├─ contact      → Fill and submit contact message
│ ├─ resume       → Show GitHub stats and resume link
│ ├─ social       → Show Gmail, GitHub, LinkedIn, Instagram
│ └─ fastfetch    → Display ASCII system info
│
│ System
│ └─ echo, ping, cat, whoami, pwd, date, uptime, ls
│
│ Pro tip: Use ↑ ↓ for command history
│ Easter egg: Try 'sudo hire-christopher'"""

ADMIN_HELP = """🛠️  Admin Commands
│
│ Content Management
│ ├─ add project                 → Add new project with ASCII banner
│ ├─ add skill                   → Add new skill to tech stack
│ ├─ add social                  → Add social media link
│ ├─ add certificate             → Add new certification
│ ├─ add ascii                   → Add ASCII art
│ ├─ edit <type> <id> <f> <v>    → Edit project, skill, social, certificate, ascii
│ ├─ delete <type> <id>          → Remove an item from the database
│ ├─ update bio                  → Edit about section content
│ └─ update social <platform>    → Update social media links
│
│ System Management
│ ├─ view messages               → Read contact form submissions
│ ├─ view <type>                 → List projects, skills, social, certificates, ascii
│ ├─ edit message <id> read      → Mark a message as read
│ ├─ delete message <id>         → Remove contact message
│ ├─ update stats                → Refresh GitHub statistics
│ └─ update ascii                → Edit fastfetch ASCII art
│
│ Session
│ ├─ exit                        → Exit admin mode
│ └─ logout                      → End admin session
│
│ ⚠️  All changes are immediately saved to the content store."""


@command_registry.register("help", "Show available commands")
def cmd_help(ctx: "CommandContext", args: list[str]) -> CommandResult:
    """Show the guest or admin reference."""
    return CommandResult.success(ADMIN_HELP if ctx.is_admin else GUEST_HELP)
