"""Contact command - send a message to the owner."""
from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import EMAIL_PATTERN, with_progress
from termfolio.commands.parser import strip_quotes
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import MailRelayError, StoreError
from termfolio.core.formatting import truncate

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)

FORM = """📧 Contact Form
│
│ Send me a message using the following format:
│ contact "Your Name" "Your Email" "Your Message"
│
│ Example:
│ contact "John Doe" "john@example.com" "Hey, let's work together!\""""

USAGE = '❌ Usage: contact "<name>" "<email>" "<message>"'


def validate(name: str, email: str, message: str) -> str | None:
    """Return the first validation error, or None."""
    if len(name) < 2:
        return "❌ Please provide a valid name (at least 2 characters)."
    if not EMAIL_PATTERN.match(email):
        return "❌ Please provide a valid email address."
    if not message:
        return "❌ Please provide a message with at least 1 character."
    return None


@command_registry.register(
    "contact",
    "Fill and submit contact message",
    usage='contact "<name>" "<email>" "<message>"',
)
async def cmd_contact(ctx: "CommandContext", args: list[str]) -> CommandResult:
    """Store the message and relay it by mail; both must succeed."""
    if not args:
        return CommandResult.success(FORM)
    if len(args) < 3:
        return CommandResult.guidance(USAGE)

    name = strip_quotes(args[0]).strip()
    email = strip_quotes(args[1]).strip()
    # Unquoted messages arrive as several words
    message = strip_quotes(" ".join(args[2:])).strip()

    error = validate(name, email, message)
    if error:
        return CommandResult.guidance(error)

    writes = [ctx.store.messages.create({"name": name, "email": email, "message": message})]
    if ctx.mailer is not None:
        writes.append(ctx.mailer.send(name, email, message))

    outcomes = await asyncio.gather(*writes, return_exceptions=True)
    owner_email = ctx.setting("owner_email")
    for outcome in outcomes:
        if isinstance(outcome, (StoreError, MailRelayError)):
            logger.warning(f"contact: delivery failed: {outcome}")
            return CommandResult.failure(
                f"❌ Failed to send message: {outcome}\n"
                f"Please try again or email me directly at {owner_email}"
            )
        if isinstance(outcome, BaseException):
            raise outcome

    body = "\n".join([
        "✅ Message sent successfully!",
        "",
        f"📨 From: {name} <{email}>",
        f"📝 Message: {truncate(message, 100)}",
        "",
        "🕐 You can expect a response within 24 hours.",
        f"📧 Feel free to also email me directly: {owner_email}",
    ])
    return with_progress("Sending message...", body, 3000)
