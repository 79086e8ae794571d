"""
Line-mode REPL for the portfolio terminal.

Reads whole lines with ``input()`` and prints whatever the session
appended. No full-screen layout, no cursor blink, no loading animation
redraws; useful over dumb terminals and pipes.

Ctrl+C is taken from the event loop's SIGINT handler: during a command it
interrupts the command, at the prompt it discards the typed line.
"""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import TYPE_CHECKING, Callable

from termfolio.core.datamodels import Line, LineKind, Tone
from termfolio.terminal.session import INTERRUPT_MARK

if TYPE_CHECKING:
    from termfolio.terminal import TerminalSession

logger = logging.getLogger(__name__)


# ANSI escape codes
GREY = "\033[90m"
RED = "\033[91m"
YELLOW = "\033[93m"
RESET = "\033[0m"


def format_line(line: Line, color: bool = True) -> str:
    """Render one scrollback line as plain or ANSI-colored text."""
    if not color:
        return line.text
    if line.kind == LineKind.ERROR:
        code = YELLOW if line.tone == Tone.GUIDANCE else RED
        return f"{code}{line.text}{RESET}"
    if line.kind == LineKind.LOADING:
        return f"{GREY}{line.text}{RESET}"
    return line.text


def _install_sigint(loop: asyncio.AbstractEventLoop, handler: Callable[[], None]) -> bool:
    try:
        loop.add_signal_handler(signal.SIGINT, handler)
    except (NotImplementedError, RuntimeError, ValueError) as e:
        # Windows loops and non-main threads have no signal handlers
        logger.debug(f"Ctrl+C stays with the default handler: {e}")
        return False
    return True


async def repl(
    session: "TerminalSession",
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    color: bool = True,
) -> None:
    """Run the line-mode REPL until EOF.

    Args:
        session: The terminal session to drive.
        read_line: Blocking line reader, called with the prompt.
        write: Output sink for rendered lines.
        color: Whether to emit ANSI colors.
    """
    seen: set[str] = set()

    def flush() -> None:
        for line in session.scrollback:
            if line.id in seen:
                continue
            seen.add(line.id)
            # The user already sees what they typed
            if line.kind == LineKind.COMMAND or line.kind == LineKind.LOADING:
                continue
            write(format_line(line, color))

    def on_sigint() -> None:
        if session.processing:
            session.interrupt()
        else:
            # The tty driver has already dropped the partial line
            write(INTERRUPT_MARK)

    loop = asyncio.get_running_loop()
    handled = _install_sigint(loop, on_sigint)
    try:
        flush()
        while True:
            session.check_admin_expiry()
            flush()
            try:
                text = await asyncio.to_thread(read_line, session.prompt)
            except EOFError:
                write("Goodbye!")
                break

            if not text.strip():
                continue
            await session.submit(text)
            flush()
    finally:
        if handled:
            loop.remove_signal_handler(signal.SIGINT)
