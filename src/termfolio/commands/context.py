"""Context handed to every command handler."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

from termfolio.core.datamodels import PrivilegeMode

if TYPE_CHECKING:
    from termfolio.config import Config
    from termfolio.store import ContentStore, MailRelay


# Event names handlers may emit to the front end
OPEN_ADMIN_GUI = "open_admin_gui"


def _ignore_event(name: str) -> None:
    pass


@dataclass
class CommandContext:
    """What a handler may read or call.

    Handlers never mutate the session. They report through their
    ``CommandResult`` and, for signals to the front end, ``emit``.
    """

    privilege: PrivilegeMode
    store: "ContentStore"
    mailer: Optional["MailRelay"] = None
    config: Optional["Config"] = None
    emit_event: Callable[[str], Any] = _ignore_event

    @property
    def is_admin(self) -> bool:
        return self.privilege == PrivilegeMode.ADMIN

    def setting(self, key: str) -> Any:
        """Config value with DEFAULTS fallback, usable without a Config."""
        if self.config is None:
            from termfolio.config import Config

            return Config().get(key)
        return self.config.get(key)

    def emit(self, name: str) -> None:
        self.emit_event(name)
