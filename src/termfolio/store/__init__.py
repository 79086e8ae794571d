"""
Content store contract and adapters.
"""

from termfolio.store.base import Collection, ContentStore, Document
from termfolio.store.http import HttpContentStore
from termfolio.store.mail import MailRelay
from termfolio.store.memory import InMemoryContentStore
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

__all__ = [
    "Collection",
    "ContentStore",
    "Document",
    "HttpContentStore",
    "InMemoryContentStore",
    "MailRelay",
    "AsciiArt",
    "Bio",
    "Certificate",
    "GithubStats",
    "Message",
    "Project",
    "Record",
    "Resume",
    "SocialLink",
    "Skill",
]
