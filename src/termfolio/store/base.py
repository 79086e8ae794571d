"""
Content store contract consumed by the command handlers.

A store exposes one ``Collection`` per list-shaped entity and one
``Document`` per singleton entity, plus the admin session endpoints.
Every operation is async and raises ``StoreError`` on failure; callers
do not distinguish failures by cause.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, TypeVar

from termfolio.store.models import (
    AsciiArt,
    Bio,
    Certificate,
    GithubStats,
    Message,
    Project,
    Record,
    Resume,
    SocialLink,
    Skill,
)

T = TypeVar("T", bound=Record)


class Collection(Protocol[T]):
    """CRUD over one list-shaped entity type."""

    model: type[T]

    async def list(self) -> list[T]:
        """All records, in the store's natural order."""

    async def get(self, record_id: str) -> Optional[T]:
        """One record, or None if absent."""

    async def create(self, fields: dict[str, Any]) -> T:
        """Create a record from snake_case fields."""

    async def update(self, record_id: str, fields: dict[str, Any]) -> T:
        """Apply a partial update and return the new record."""

    async def delete(self, record_id: str) -> None:
        """Delete a record. Irreversible."""


class Document(Protocol[T]):
    """A singleton entity (bio, GitHub stats, resume)."""

    model: type[T]

    async def get(self) -> Optional[T]:
        """The current document, or None if never written."""

    async def update(self, fields: dict[str, Any]) -> T:
        """Replace the document's fields."""


class ContentStore(Protocol):
    """Everything the terminal reads and writes."""

    projects: Collection[Project]
    skills: Collection[Skill]
    certificates: Collection[Certificate]
    social_links: Collection[SocialLink]
    messages: Collection[Message]
    ascii_art: Collection[AsciiArt]
    bio: Document[Bio]
    github_stats: Document[GithubStats]
    resume: Document[Resume]

    async def authenticate(self, secret: str) -> bool:
        """Open an admin session on the store side.

        Returns:
            True if the store accepted the secret, False if it rejected it.
        """

    async def logout(self) -> None:
        """Close the store-side admin session."""

    async def aclose(self) -> None:
        """Release network resources, if any."""
