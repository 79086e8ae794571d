"""
Command registry for the terminal.

Commands are registered with a name, handler function, and metadata.
Admin-only commands are invisible to guests: dispatching one as a guest
reads exactly like an unknown command.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Awaitable, Callable, Union

from termfolio.commands.parser import split_verb
from termfolio.core.datamodels import CommandResult, PrivilegeMode
from termfolio.core.exceptions import CommandError

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)

Handler = Callable[
    ["CommandContext", list[str]],
    Union[CommandResult, Awaitable[CommandResult]],
]


def command_not_found(verb: str) -> CommandResult:
    return CommandResult.failure(
        f"Command not found: {verb}. Type 'help' for available commands."
    )


@dataclass
class CommandEntry:
    """Entry for a registered command."""

    name: str
    handler: Handler
    description: str
    usage: str | None = None
    requires_admin: bool = False
    aliases: list[str] = field(default_factory=list)

    def allowed(self, privilege: PrivilegeMode) -> bool:
        return not self.requires_admin or privilege == PrivilegeMode.ADMIN


class CommandRegistry:
    """Registry for terminal commands."""

    def __init__(self):
        self._commands: dict[str, CommandEntry] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        name: str,
        description: str,
        usage: str | None = None,
        requires_admin: bool = False,
        aliases: list[str] | None = None,
    ) -> Callable:
        """Decorator to register a command.

        Args:
            name: Verb as typed (e.g., "projects")
            description: Short description for listings
            usage: Usage string (e.g., "project <number>")
            requires_admin: Only dispatchable in admin mode
            aliases: Alternative verbs for the command

        Returns:
            Decorator function

        Example:
            @command_registry.register("echo", "Print arguments")
            def cmd_echo(ctx, args):
                return CommandResult.success(" ".join(args))
        """
        name = name.lower()
        if not name or any(ch.isspace() for ch in name):
            raise CommandError(f"Invalid command name: {name!r}")

        def decorator(func: Handler) -> Handler:
            entry = CommandEntry(
                name=name,
                handler=func,
                description=description,
                usage=usage or name,
                requires_admin=requires_admin,
                aliases=[alias.lower() for alias in aliases or []],
            )
            if name in self._commands:
                logger.debug(f"Replacing command: {name}")
            self._commands[name] = entry

            # Register aliases
            for alias in entry.aliases:
                self._aliases[alias] = name

            return func
        return decorator

    def get(self, name: str) -> CommandEntry | None:
        """Get a command by name or alias, regardless of privilege."""
        name = name.lower()
        if name in self._commands:
            return self._commands[name]
        if name in self._aliases:
            return self._commands.get(self._aliases[name])
        return None

    def resolve(self, verb: str, privilege: PrivilegeMode) -> CommandEntry | None:
        """Get a command visible at ``privilege``, or None."""
        entry = self.get(verb)
        if entry is None or not entry.allowed(privilege):
            return None
        return entry

    async def dispatch(self, raw: str, ctx: "CommandContext") -> CommandResult:
        """Tokenize ``raw``, resolve its verb and run the handler.

        Handler exceptions propagate; the terminal session turns them
        into error lines.
        """
        verb, args = split_verb(raw)
        entry = self.resolve(verb, ctx.privilege)
        if entry is None:
            logger.debug(f"Unresolved verb {verb!r} at {ctx.privilege.value}")
            return command_not_found(verb)

        logger.debug(f"Dispatching {entry.name} with {len(args)} args")
        result = entry.handler(ctx, args)
        if inspect.isawaitable(result):
            result = await result
        if not isinstance(result, CommandResult):
            raise CommandError(f"Command '{entry.name}' returned {type(result).__name__}")
        return result


# Global command registry
command_registry = CommandRegistry()
