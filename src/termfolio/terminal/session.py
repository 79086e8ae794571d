"""
Terminal session state machine.

A ``TerminalSession`` owns everything one visitor sees: the input
buffer, the scrollback, command history, privilege mode and the loading
animation. Front ends feed it key presses and redraw from its public
state whenever ``on_change`` fires.

Only one command runs at a time. While a command is processing, every
key except Ctrl+C is ignored.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional

from termfolio.commands.context import CommandContext
from termfolio.commands.parser import split_verb
from termfolio.commands.registry import CommandRegistry, command_registry
from termfolio.config import Config
from termfolio.core.datamodels import (
    CommandResult,
    KeyPress,
    Line,
    LineKind,
    LoadingSpec,
    PrivilegeMode,
    Tone,
)
from termfolio.core.exceptions import ClipboardUnavailable
from termfolio.core.formatting import loading_frame
from termfolio.logging import log_exception
from termfolio.terminal.audio import SilentAudio

if TYPE_CHECKING:
    from termfolio.store import ContentStore, MailRelay

logger = logging.getLogger(__name__)

LOADING_STEPS = 20
LOADING_SETTLE_SECONDS = 0.5

EXPIRED_NOTICE = "⏰ Admin session expired. Please authenticate again."
PASTE_NOTICE = "Paste with Ctrl+V (clipboard access required)"
INTERRUPT_MARK = "^C"

WELCOME_BANNER = """██████╗  ██████╗ ██████╗ ████████╗███████╗ ██████╗ ██╗     ██╗ ██████╗
██╔══██╗██╔═══██╗██╔══██╗╚══██╔══╝██╔════╝██╔═══██╗██║     ██║██╔═══██╗
██████╔╝██║   ██║██████╔╝   ██║   █████╗  ██║   ██║██║     ██║██║   ██║
██╔═══╝ ██║   ██║██╔══██╗   ██║   ██╔══╝  ██║   ██║██║     ██║██║   ██║
██║     ╚██████╔╝██║  ██║   ██║   ██║     ╚██████╔╝███████╗██║╚██████╔╝
╚═╝      ╚═════╝ ╚═╝  ╚═╝   ╚═╝   ╚═╝      ╚═════╝ ╚══════╝╚═╝ ╚═════╝

           Welcome to {owner}'s Developer Portfolio
                    Type 'help' to get started"""

ClipboardReader = Callable[[], Awaitable[str]]


class TerminalSession:
    """One interactive terminal.

    Args:
        store: Content store handed to command handlers.
        registry: Verb table (defaults to the global registry).
        mailer: Mail relay for the contact form.
        config: Settings; prompt, secret and timeouts come from here.
        audio: Object with ``keypress``/``enter``/``error`` cue methods.
        clipboard: Async reader for Ctrl+V; raises ClipboardUnavailable.
        clock: Wall clock in seconds, used for admin expiry.
        sleep: Awaitable sleep used by the loading animation.
        on_change: Called after every state mutation.
        on_event: Called with front-end signals such as ``open_admin_gui``.
    """

    def __init__(
        self,
        store: "ContentStore",
        registry: Optional[CommandRegistry] = None,
        mailer: Optional["MailRelay"] = None,
        config: Optional[Config] = None,
        audio: Any = None,
        clipboard: Optional[ClipboardReader] = None,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        on_change: Optional[Callable[[], Any]] = None,
        on_event: Optional[Callable[[str], Any]] = None,
    ):
        self.id = uuid.uuid4().hex
        self.store = store
        self.registry = registry or command_registry
        self.mailer = mailer
        self.config = config or Config()
        self.audio = audio or SilentAudio()
        self.clipboard = clipboard
        self.clock = clock
        self.sleep = sleep
        self.on_change = on_change
        self.on_event = on_event

        self.privilege = PrivilegeMode.GUEST
        self.input_buffer = ""
        self.scrollback: list[Line] = [
            Line(kind=LineKind.OUTPUT, text=WELCOME_BANNER.format(owner=self.config.get("owner_name")))
        ]
        self.history: list[str] = []
        self.history_cursor = 0
        self.processing = False
        self.admin_since: Optional[float] = None
        self.cursor_visible = True

        self._job: Optional[asyncio.Task] = None
        self._loading_line: Optional[Line] = None
        self._admin_timer: Optional[asyncio.TimerHandle] = None
        self._blink_task: Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Public state
    # ------------------------------------------------------------------

    @property
    def is_admin(self) -> bool:
        return self.privilege == PrivilegeMode.ADMIN

    @property
    def prompt(self) -> str:
        mark = "#" if self.is_admin else "$"
        return f"{self.config.get('prompt_user')}@{self.config.get('prompt_host')}:~{mark} "

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the cursor blink task. Needs a running event loop."""
        if self._blink_task is None:
            self._blink_task = asyncio.get_running_loop().create_task(self._blink())

    async def close(self) -> None:
        """Cancel timers and any running command."""
        self._cancel_admin_timer()
        for task in (self._blink_task, self._job):
            if task is not None and not task.done():
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass
        self._blink_task = None

    async def _blink(self) -> None:
        interval = float(self.config.get("cursor_blink_interval"))
        while True:
            await asyncio.sleep(interval)
            self.toggle_cursor()

    def toggle_cursor(self) -> None:
        self.cursor_visible = not self.cursor_visible
        self._changed()

    # ------------------------------------------------------------------
    # Keyboard input
    # ------------------------------------------------------------------

    async def handle_key(self, key: KeyPress) -> None:
        """Apply one key press."""
        if key.ctrl and key.key.lower() == "c":
            self.interrupt()
            return
        if self.processing:
            return
        if key.ctrl and key.key.lower() == "v":
            await self.paste_from_clipboard()
            return

        name = key.key
        if name == "Enter":
            if self.input_buffer.strip():
                self._cue("enter")
                await self.submit(self.input_buffer)
        elif name == "Backspace":
            if self.input_buffer:
                self._cue("keypress")
                self.input_buffer = self.input_buffer[:-1]
                self._changed()
        elif name == "ArrowUp":
            self.history_up()
        elif name == "ArrowDown":
            self.history_down()
        elif name == "Tab":
            pass
        elif key.is_printable:
            self._cue("keypress")
            self.input_buffer += name
            self._changed()

    def history_up(self) -> None:
        if self.history_cursor > 0:
            self.history_cursor -= 1
            self.input_buffer = self.history[self.history_cursor]
            self._changed()

    def history_down(self) -> None:
        if self.history_cursor < len(self.history) - 1:
            self.history_cursor += 1
            self.input_buffer = self.history[self.history_cursor]
        else:
            self.history_cursor = len(self.history)
            self.input_buffer = ""
        self._changed()

    def interrupt(self) -> None:
        """Ctrl+C: abandon the running command, or clear the input."""
        if self.processing:
            if self._job is not None and not self._job.done():
                self._job.cancel()
            self._remove_loading_line()
            self._append(Line(kind=LineKind.ERROR, text=INTERRUPT_MARK, tone=Tone.ALARM))
            self.processing = False
            self._changed()
        elif self.input_buffer:
            self.input_buffer = ""
            self._append(Line(kind=LineKind.OUTPUT, text=INTERRUPT_MARK))

    async def paste_from_clipboard(self) -> None:
        if self.clipboard is None:
            self._append(Line(kind=LineKind.OUTPUT, text=PASTE_NOTICE))
            return
        try:
            text = await self.clipboard()
        except ClipboardUnavailable as e:
            logger.debug(f"Clipboard unavailable: {e}")
            self._append(Line(kind=LineKind.OUTPUT, text=PASTE_NOTICE))
            return
        self.paste(text)

    def paste(self, text: str) -> None:
        """Append pasted text to the input, newlines folded to spaces."""
        if self.processing or not text:
            return
        self.input_buffer += " ".join(text.splitlines())
        self._changed()

    # ------------------------------------------------------------------
    # Command execution
    # ------------------------------------------------------------------

    async def submit(self, text: str) -> Optional[CommandResult]:
        """Run one command line to completion.

        Returns:
            The handler's result, or None if nothing ran or the command
            was interrupted.
        """
        if self.processing or not text.strip():
            return None

        self.processing = True
        self.check_admin_expiry()

        prompt = self.prompt
        self._append(Line(kind=LineKind.COMMAND, text=prompt + text, prompt=prompt))
        self.history.append(text)
        self.history_cursor = len(self.history)
        self.input_buffer = ""
        self._changed()

        job = asyncio.ensure_future(self._execute(text))
        self._job = job
        try:
            await asyncio.wait({job})
        except asyncio.CancelledError:
            job.cancel()
            raise
        finally:
            if self._job is job:
                self._job = None
                if self.processing:
                    self.processing = False
                    self._changed()

        if job.cancelled():
            logger.info(f"Interrupted: {text!r}")
            return None
        return job.result()

    async def _execute(self, text: str) -> CommandResult:
        verb, args = split_verb(text)
        result = await self._dispatch(text, verb)

        if result.clear_requested:
            self.scrollback = []
            self._changed()
        elif result.loading is not None:
            await self._play_loading(result.loading)

        self._apply_privilege(verb, args, result)
        if result.text:
            self._append(Line.from_result(result))
        if not result.ok:
            self._cue("error")
        return result

    async def _dispatch(self, text: str, verb: str) -> CommandResult:
        """Run the handler, shielded so Ctrl+C cannot abort store calls midway."""
        ctx = CommandContext(
            privilege=self.privilege,
            store=self.store,
            mailer=self.mailer,
            config=self.config,
            emit_event=self._emit,
        )
        inner = asyncio.ensure_future(self.registry.dispatch(text, ctx))
        inner.add_done_callback(self._reap_abandoned)
        try:
            return await asyncio.shield(inner)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            message = log_exception(e, f"Error executing command '{verb}'")
            return CommandResult.failure(message)

    @staticmethod
    def _reap_abandoned(task: asyncio.Future) -> None:
        # A handler whose caller was interrupted still finishes; log its error
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.debug(f"Handler finished with {type(error).__name__}: {error}")

    async def _play_loading(self, spec: LoadingSpec) -> None:
        """Animate a progress line, then remove it."""
        line = Line(kind=LineKind.LOADING, text=loading_frame(spec.label, 0))
        self._loading_line = line
        self._append(line)
        step = spec.duration_ms / LOADING_STEPS / 1000
        try:
            for index in range(1, LOADING_STEPS + 1):
                await self.sleep(step)
                line.text = loading_frame(spec.label, index * 100 / LOADING_STEPS)
                self._changed()
            await self.sleep(LOADING_SETTLE_SECONDS)
        finally:
            self._remove_loading_line()

    def _remove_loading_line(self) -> None:
        line = self._loading_line
        if line is None:
            return
        self._loading_line = None
        self.scrollback = [existing for existing in self.scrollback if existing.id != line.id]
        self._changed()

    # ------------------------------------------------------------------
    # Privilege
    # ------------------------------------------------------------------

    def _apply_privilege(self, verb: str, args: list[str], result: CommandResult) -> None:
        entry = self.registry.get(verb) if verb else None
        if entry is None:
            return
        if entry.name == "admin" and result.ok and self.config.get("admin_password") in args:
            self._enter_admin()
        elif entry.name == "exit" and self.is_admin:
            self._leave_admin()

    def _enter_admin(self) -> None:
        self.privilege = PrivilegeMode.ADMIN
        self.admin_since = self.clock()
        self._cancel_admin_timer()
        timeout = float(self.config.get("admin_session_timeout"))
        self._admin_timer = asyncio.get_running_loop().call_later(timeout, self._admin_timer_fired)
        logger.info("Entered admin mode")
        self._changed()

    def _leave_admin(self) -> None:
        self.privilege = PrivilegeMode.GUEST
        self.admin_since = None
        self._cancel_admin_timer()
        logger.info("Left admin mode")
        self._changed()

    def _cancel_admin_timer(self) -> None:
        if self._admin_timer is not None:
            self._admin_timer.cancel()
            self._admin_timer = None

    def _admin_timer_fired(self) -> None:
        self._admin_timer = None
        if self.is_admin:
            self._expire_admin()

    def _expire_admin(self) -> None:
        self._leave_admin()
        self._append(Line(kind=LineKind.OUTPUT, text=EXPIRED_NOTICE))

    def check_admin_expiry(self) -> bool:
        """Drop to guest if the admin window has passed. Returns True if it did."""
        if not self.is_admin or self.admin_since is None:
            return False
        timeout = float(self.config.get("admin_session_timeout"))
        if self.clock() - self.admin_since < timeout:
            return False
        self._expire_admin()
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _append(self, line: Line) -> None:
        self.scrollback.append(line)
        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _emit(self, name: str) -> None:
        logger.info(f"Event: {name}")
        if self.on_event is not None:
            self.on_event(name)

    def _cue(self, name: str) -> None:
        try:
            getattr(self.audio, name)()
        except Exception as e:
            logger.debug(f"Audio cue '{name}' failed: {e}")
