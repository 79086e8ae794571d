"""
Data models shared by the dispatcher, handlers and terminal session.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PrivilegeMode(str, Enum):
    """Which command set a session may dispatch."""

    GUEST = "guest"
    ADMIN = "admin"


class LineKind(str, Enum):
    """Kind of a scrollback line."""

    COMMAND = "command"
    OUTPUT = "output"
    ERROR = "error"
    LOADING = "loading"


class Tone(str, Enum):
    """How alarming a line or result is meant to look.

    Domain guidance ("no projects yet, add some") and real failures
    ("store unreachable") are both ok=False, but renderers color them
    differently.
    """

    NORMAL = "normal"
    GUIDANCE = "guidance"
    ALARM = "alarm"


class LoadingSpec(BaseModel):
    """A cosmetic progress animation played before a result is shown."""

    label: str
    duration_ms: int = Field(default=1500, ge=0)


class CommandResult(BaseModel):
    """Outcome of exactly one handler invocation."""

    text: str = ""
    ok: bool = True
    clear_requested: bool = False
    loading: Optional[LoadingSpec] = None
    tone: Tone = Tone.NORMAL

    @classmethod
    def success(cls, text: str, loading: Optional[LoadingSpec] = None) -> "CommandResult":
        return cls(text=text, ok=True, loading=loading)

    @classmethod
    def guidance(cls, text: str) -> "CommandResult":
        """Usage text or empty-data help: not ok, but not an alarm either."""
        return cls(text=text, ok=False, tone=Tone.GUIDANCE)

    @classmethod
    def failure(cls, text: str) -> "CommandResult":
        """Store, network or auth failure."""
        return cls(text=text, ok=False, tone=Tone.ALARM)

    @classmethod
    def clear(cls) -> "CommandResult":
        return cls(text="", ok=True, clear_requested=True)


class Line(BaseModel):
    """A single scrollback line."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    kind: LineKind
    text: str
    created_at: datetime = Field(default_factory=datetime.now)
    prompt: Optional[str] = None  # Only set on command lines
    tone: Tone = Tone.NORMAL

    @classmethod
    def from_result(cls, result: CommandResult) -> "Line":
        """Convert a handler result into an output or error line."""
        return cls(
            kind=LineKind.OUTPUT if result.ok else LineKind.ERROR,
            text=result.text,
            tone=result.tone if not result.ok else Tone.NORMAL,
        )


class KeyPress(BaseModel):
    """A keyboard event fed to the terminal session.

    ``key`` is either a single printable character or one of the named
    keys ``Enter``, ``Backspace``, ``ArrowUp``, ``ArrowDown``, ``Tab``.
    """

    key: str
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    @property
    def is_printable(self) -> bool:
        return len(self.key) == 1 and not (self.ctrl or self.alt or self.meta)
