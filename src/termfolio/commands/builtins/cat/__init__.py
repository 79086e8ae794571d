"""Cat command - print one of the fixed portfolio files."""
from __future__ import annotations

from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

FILES = {
    "about.txt": """{owner_name} - {owner_title}
==================================================
Passionate developer with 3+ years of experience
Specializes in React, Node.js, Python, and AI/ML
Always learning and building amazing things!""",
    "skills.txt": """Technical Skills:
• Frontend: React, TypeScript, Next.js
• Backend: Node.js, Python, Express
• Database: PostgreSQL, MongoDB, Firebase
• Cloud: AWS, Google Cloud, Vercel
• AI/ML: TensorFlow, OpenAI API, Langchain""",
    "contact.txt": """Contact Information:
📧 Email: {owner_email}
🔗 LinkedIn: linkedin.com/in/christopher-joshy-272a77290/
🐙 GitHub: github.com/christopherjoshy""",
}


@command_registry.register("cat", "Print a file", usage="cat <filename>")
def cmd_cat(ctx: "CommandContext", args: list[str]) -> CommandResult:
    if not args:
        return CommandResult.guidance("cat: missing file operand\nUsage: cat <filename>")
    filename = args[0]
    if filename not in FILES:
        return CommandResult.failure(f"cat: {filename}: No such file or directory")
    return CommandResult.success(FILES[filename].format(
        owner_name=ctx.setting("owner_name"),
        owner_title=ctx.setting("owner_title"),
        owner_email=ctx.setting("owner_email"),
    ))
