"""
Exception classes for the terminal core and its collaborators.
"""


class TermfolioError(Exception):
    """Base exception for termfolio errors."""


class CommandError(TermfolioError):
    """Command registration or lookup misuse."""


class StoreError(TermfolioError):
    """A content store operation failed (network, server or validation)."""


class StoreNotFoundError(StoreError):
    """The addressed record does not exist in the store."""


class MailRelayError(TermfolioError):
    """The contact mail relay rejected or could not receive a message."""


class ClipboardUnavailable(TermfolioError):
    """The system clipboard could not be read."""
