"""
Content store record models.

Records travel over the wire with camelCase keys (``techStack``,
``yearsOfExperience``) and are used in Python with snake_case attributes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

ProjectStatus = Literal["development", "production", "archived"]

PROJECT_STATUSES = ("development", "production", "archived")
STATS_FIELDS = ("stars", "commits", "repos", "followers", "pull_requests", "issues")


def _from_timestamp(value: Any) -> Any:
    # The API serializes stored timestamps as {"_seconds": ..., "_nanoseconds": ...}
    if isinstance(value, dict):
        seconds = value.get("_seconds", value.get("seconds"))
        if seconds is not None:
            nanos = value.get("_nanoseconds", value.get("nanoseconds", 0))
            return datetime.fromtimestamp(seconds + nanos / 1e9)
    return value


WireDatetime = Annotated[datetime, BeforeValidator(_from_timestamp)]


class Record(BaseModel):
    """Base for all store records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str = ""


class Project(Record):
    title: str
    description: str
    tech_stack: list[str] = Field(default_factory=list)
    live_demo: Optional[str] = None
    github: Optional[str] = None
    ascii_art: str = ""
    status: ProjectStatus = "development"
    featured: bool = False
    created_at: WireDatetime = Field(default_factory=datetime.now)


class Skill(Record):
    category: str
    name: str
    proficiency: int = Field(ge=1, le=100)
    years_of_experience: int = Field(default=0, ge=0)
    description: Optional[str] = None


class Certificate(Record):
    title: str
    description: str = ""
    issuer: str
    date_issued: WireDatetime
    credential_url: Optional[str] = None


class SocialLink(Record):
    platform: str
    username: str
    display_name: str
    url: str


class Message(Record):
    name: str
    email: str
    message: str
    timestamp: WireDatetime = Field(default_factory=datetime.now)
    read: bool = False


class Bio(Record):
    content: str
    last_updated: WireDatetime = Field(default_factory=datetime.now)


class GithubStats(Record):
    stars: int = 0
    commits: int = 0
    repos: int = 0
    followers: int = 0
    pull_requests: int = 0
    issues: int = 0
    last_updated: WireDatetime = Field(default_factory=datetime.now)

    def counters(self) -> dict[str, int]:
        """The numeric fields keyed by their wire names."""
        return {to_camel(name): getattr(self, name) for name in STATS_FIELDS}


class AsciiArt(Record):
    name: str
    content: str
    description: Optional[str] = None


class Resume(Record):
    url: str
    last_updated: WireDatetime = Field(default_factory=datetime.now)


def wire_fields(fields: dict) -> dict:
    """Rename snake_case field names to their camelCase wire names."""
    out = {}
    for key, value in fields.items():
        if isinstance(value, datetime):
            value = value.isoformat()
        out[to_camel(key)] = value
    return out
