"""
In-memory content store.

Used for ``--offline`` mode and as the store in tests. Records are kept
in insertion order and ids are generated per collection.
"""

from __future__ import annotations

import copy
import logging
import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import ValidationError

from termfolio.core.exceptions import StoreError, StoreNotFoundError
from termfolio.store.base import Collection, ContentStore, Document, T
from termfolio.store.models import (
    AsciiArt,
    Bio,
    Certificate,
    GithubStats,
    Message,
    Project,
    Resume,
    SocialLink,
    Skill,
)

logger = logging.getLogger(__name__)


def _build(model: type[T], data: dict[str, Any]) -> T:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise StoreError(f"Invalid {model.__name__}: {e}") from e


class MemoryCollection(Collection[T]):
    """A list-shaped entity held in a dict keyed by id."""

    def __init__(self, model: type[T], prefix: str):
        self.model = model
        self.prefix = prefix
        self._records: dict[str, T] = {}

    def _new_id(self) -> str:
        return f"{self.prefix}_{uuid.uuid4().hex[:8]}"

    async def list(self) -> list[T]:
        return [record.model_copy(deep=True) for record in self._records.values()]

    async def get(self, record_id: str) -> Optional[T]:
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record else None

    async def create(self, fields: dict[str, Any]) -> T:
        data = {key: value for key, value in fields.items() if key != "id"}
        record = _build(self.model, {**data, "id": self._new_id()})
        self._records[record.id] = record
        logger.debug(f"Created {self.model.__name__} {record.id}")
        return record.model_copy(deep=True)

    async def update(self, record_id: str, fields: dict[str, Any]) -> T:
        current = self._records.get(record_id)
        if current is None:
            raise StoreNotFoundError(f"{self.model.__name__} {record_id} not found")
        merged = {**current.model_dump(), **fields, "id": record_id}
        record = _build(self.model, merged)
        self._records[record_id] = record
        return record.model_copy(deep=True)

    async def delete(self, record_id: str) -> None:
        if self._records.pop(record_id, None) is None:
            raise StoreNotFoundError(f"{self.model.__name__} {record_id} not found")
        logger.debug(f"Deleted {self.model.__name__} {record_id}")


class MemoryDocument(Document[T]):
    """A singleton entity; updates merge into the current value."""

    def __init__(self, model: type[T], key: str = "current"):
        self.model = model
        self.key = key
        self._value: Optional[T] = None

    async def get(self) -> Optional[T]:
        return self._value.model_copy(deep=True) if self._value else None

    async def update(self, fields: dict[str, Any]) -> T:
        current = self._value.model_dump() if self._value else {}
        merged = {**current, **fields, "id": self.key, "last_updated": datetime.now()}
        self._value = _build(self.model, merged)
        return self._value.model_copy(deep=True)


class InMemoryContentStore(ContentStore):
    """Content store held in process memory.

    Args:
        admin_password: Secret ``authenticate`` accepts. None accepts anything.
        seed: Populate with the sample portfolio content.
    """

    def __init__(self, admin_password: Optional[str] = None, seed: bool = False):
        self.admin_password = admin_password
        self.admin_active = False

        self.projects = MemoryCollection(Project, "proj")
        self.skills = MemoryCollection(Skill, "skill")
        self.certificates = MemoryCollection(Certificate, "cert")
        self.social_links = MemoryCollection(SocialLink, "social")
        self.messages = MemoryCollection(Message, "msg")
        self.ascii_art = MemoryCollection(AsciiArt, "ascii")
        self.bio = MemoryDocument(Bio)
        self.github_stats = MemoryDocument(GithubStats)
        self.resume = MemoryDocument(Resume)

        if seed:
            self._seed()

    async def authenticate(self, secret: str) -> bool:
        if self.admin_password is not None and secret != self.admin_password:
            return False
        self.admin_active = True
        return True

    async def logout(self) -> None:
        self.admin_active = False

    def _seed(self) -> None:
        """Load SAMPLE_CONTENT synchronously (no awaits are needed in memory)."""
        for collection, records in (
            (self.projects, SAMPLE_CONTENT["projects"]),
            (self.skills, SAMPLE_CONTENT["skills"]),
            (self.social_links, SAMPLE_CONTENT["social_links"]),
            (self.certificates, SAMPLE_CONTENT["certificates"]),
            (self.ascii_art, SAMPLE_CONTENT["ascii_art"]),
        ):
            for fields in records:
                record = _build(collection.model, {**copy.deepcopy(fields), "id": collection._new_id()})
                collection._records[record.id] = record

        for document, fields in (
            (self.bio, SAMPLE_CONTENT["bio"]),
            (self.github_stats, SAMPLE_CONTENT["github_stats"]),
            (self.resume, SAMPLE_CONTENT["resume"]),
        ):
            document._value = _build(document.model, {**fields, "id": document.key})


# Sample portfolio content for offline mode
SAMPLE_CONTENT: dict[str, Any] = {
    "projects": [
        {
            "title": "Terminal Portfolio",
            "description": (
                "Interactive Linux terminal emulator portfolio with ASCII "
                "animations and a document store backend"
            ),
            "tech_stack": ["React", "TypeScript", "Firebase", "Tailwind CSS", "Express.js"],
            "live_demo": "https://portfolio.christopher-joshy.dev",
            "github": "https://github.com/christopher-joshy/terminal-portfolio",
            "status": "production",
            "featured": True,
        },
        {
            "title": "E-commerce Platform",
            "description": (
                "Full-stack e-commerce solution with payment integration and "
                "inventory management"
            ),
            "tech_stack": ["React", "Node.js", "MongoDB", "Stripe", "Redux"],
            "github": "https://github.com/christopher-joshy/ecommerce-app",
            "status": "development",
        },
        {
            "title": "Weather Dashboard",
            "description": "Real-time weather monitoring dashboard with location-based forecasts",
            "tech_stack": ["React", "Chart.js", "OpenWeatherMap API", "CSS3"],
            "live_demo": "https://weather.christopher-joshy.dev",
            "github": "https://github.com/christopher-joshy/weather-dashboard",
            "status": "production",
            "featured": True,
        },
    ],
    "skills": [
        {"name": "React", "category": "Frontend", "proficiency": 90, "years_of_experience": 3},
        {"name": "TypeScript", "category": "Frontend", "proficiency": 85, "years_of_experience": 2},
        {"name": "JavaScript", "category": "Frontend", "proficiency": 95, "years_of_experience": 4},
        {"name": "HTML/CSS", "category": "Frontend", "proficiency": 90, "years_of_experience": 5},
        {"name": "Tailwind CSS", "category": "Frontend", "proficiency": 80, "years_of_experience": 2},
        {"name": "Node.js", "category": "Backend", "proficiency": 85, "years_of_experience": 3},
        {"name": "Express.js", "category": "Backend", "proficiency": 80, "years_of_experience": 3},
        {"name": "Python", "category": "Backend", "proficiency": 75, "years_of_experience": 2},
        {"name": "PostgreSQL", "category": "Backend", "proficiency": 70, "years_of_experience": 2},
        {"name": "MongoDB", "category": "Backend", "proficiency": 75, "years_of_experience": 2},
        {"name": "Firebase", "category": "Cloud & DevOps", "proficiency": 80, "years_of_experience": 2},
        {"name": "AWS", "category": "Cloud & DevOps", "proficiency": 70, "years_of_experience": 1},
        {"name": "Docker", "category": "Cloud & DevOps", "proficiency": 65, "years_of_experience": 1},
        {"name": "Git", "category": "Cloud & DevOps", "proficiency": 90, "years_of_experience": 4},
    ],
    "social_links": [
        {
            "platform": "github",
            "username": "christopher-joshy",
            "display_name": "Christopher Joshy",
            "url": "https://github.com/christopher-joshy",
        },
        {
            "platform": "linkedin",
            "username": "christopher-joshy",
            "display_name": "Christopher Joshy",
            "url": "https://linkedin.com/in/christopher-joshy",
        },
        {
            "platform": "twitter",
            "username": "christopher_dev",
            "display_name": "@christopher_dev",
            "url": "https://twitter.com/christopher_dev",
        },
        {
            "platform": "email",
            "username": "hello@christopher-joshy.dev",
            "display_name": "Email Me",
            "url": "mailto:hello@christopher-joshy.dev",
        },
    ],
    "certificates": [
        {
            "title": "AWS Certified Developer Associate",
            "description": (
                "AWS certification for developing and maintaining applications "
                "on the AWS platform"
            ),
            "issuer": "Amazon Web Services",
            "date_issued": datetime(2024, 1, 15),
            "credential_url": "https://aws.amazon.com/verification/christopher-joshy",
        },
        {
            "title": "Google Cloud Professional Developer",
            "description": (
                "Google Cloud certification for designing, building, and "
                "deploying cloud applications"
            ),
            "issuer": "Google Cloud",
            "date_issued": datetime(2023, 9, 20),
            "credential_url": "https://cloud.google.com/certification/verify/christopher-joshy",
        },
    ],
    "ascii_art": [
        {
            "name": "welcome",
            "content": (
                "██╗    ██╗███████╗██╗      ██████╗ ██████╗ ███╗   ███╗███████╗\n"
                "██║    ██║██╔════╝██║     ██╔════╝██╔═══██╗████╗ ████║██╔════╝\n"
                "██║ █╗ ██║█████╗  ██║     ██║     ██║   ██║██╔████╔██║█████╗  \n"
                "██║███╗██║██╔══╝  ██║     ██║     ██║   ██║██║╚██╔╝██║██╔══╝  \n"
                "╚███╔███╔╝███████╗███████╗╚██████╗╚██████╔╝██║ ╚═╝ ██║███████╗\n"
                " ╚══╝╚══╝ ╚══════╝╚══════╝ ╚═════╝ ╚═════╝ ╚═╝     ╚═╝╚══════╝"
            ),
        },
    ],
    "bio": {
        "content": (
            "Christopher Joshy is a passionate full-stack developer with expertise "
            "in modern web technologies. Experienced in building scalable "
            "applications using React, Node.js, and cloud platforms.\n\n"
            "When I'm not coding, you can find me exploring new technologies, "
            "contributing to open-source projects, or sharing knowledge with the "
            "developer community."
        ),
    },
    "github_stats": {
        "stars": 127,
        "commits": 1542,
        "repos": 23,
        "followers": 89,
        "pull_requests": 156,
        "issues": 45,
    },
    "resume": {
        "url": "https://christopher-joshy.dev/resume.pdf",
    },
}
