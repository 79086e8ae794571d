"""
Terminal session state machine and its audio cues.
"""

from termfolio.terminal.audio import SilentAudio, TerminalBell
from termfolio.terminal.session import TerminalSession

__all__ = ["SilentAudio", "TerminalBell", "TerminalSession"]
