"""Audio cues for the terminal session.

The session calls these fire-and-forget; failures are logged by the
session and never reach the user.
"""
from __future__ import annotations

import sys
from typing import TextIO


class SilentAudio:
    """No sound at all."""

    def keypress(self) -> None:
        pass

    def enter(self) -> None:
        pass

    def error(self) -> None:
        pass


class TerminalBell(SilentAudio):
    """Rings the terminal bell on errors."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def error(self) -> None:
        self.stream.write("\a")
        self.stream.flush()
