"""
Core module for the termfolio package.

Provides the result/line data models, exceptions and output formatting
helpers used by commands and the terminal session.
"""

from termfolio.core.datamodels import (
    CommandResult,
    KeyPress,
    Line,
    LineKind,
    LoadingSpec,
    PrivilegeMode,
    Tone,
)
from termfolio.core.exceptions import (
    ClipboardUnavailable,
    CommandError,
    MailRelayError,
    StoreError,
    StoreNotFoundError,
    TermfolioError,
)

__all__ = [
    # Models
    "CommandResult",
    "KeyPress",
    "Line",
    "LineKind",
    "LoadingSpec",
    "PrivilegeMode",
    "Tone",
    # Exceptions
    "TermfolioError",
    "CommandError",
    "StoreError",
    "StoreNotFoundError",
    "MailRelayError",
    "ClipboardUnavailable",
]
