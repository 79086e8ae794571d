"""
Helpers shared by the builtin command handlers.

Result builders keep the wording of recurring messages in one place;
the field tables drive ``edit``/``update`` value coercion and the
``add`` validators.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Callable
from urllib.parse import urlparse

from termfolio.commands.parser import strip_quotes
from termfolio.core.datamodels import CommandResult, LoadingSpec
from termfolio.core.formatting import completed_progress
from termfolio.store.models import PROJECT_STATUSES

ADMIN_HINT = 'Run "admin <password>" to access admin mode.'

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

VALID_PLATFORMS = (
    "github",
    "linkedin",
    "twitter",
    "instagram",
    "gmail",
    "email",
    "youtube",
    "portfolio",
)


def load_failed(what: str) -> CommandResult:
    return CommandResult.failure(f"Failed to load {what}. Please try again later.")


def admin_load_failed(what: str) -> CommandResult:
    return CommandResult.failure(f"❌ Failed to load {what}. Please try again later.")


def nothing_yet(text: str) -> CommandResult:
    """Empty-data guidance pointing guests at admin mode."""
    return CommandResult.guidance(f"{text}\n{ADMIN_HINT}")


def with_progress(label: str, body: str, duration_ms: int) -> CommandResult:
    """Successful result played behind a loading animation.

    The text starts with the completed bar so the scrollback keeps a
    record of the animation after its line is removed.
    """
    return CommandResult.success(
        f"{completed_progress(label)}\n{body}",
        loading=LoadingSpec(label=label, duration_ms=duration_ms),
    )


def is_web_url(value: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def join_args(args: list[str]) -> str:
    return strip_quotes(" ".join(args)).strip()


# Value coercion for edit/update
def _text(value: str) -> str:
    if not value:
        raise ValueError("Value cannot be empty")
    return value


def _optional_text(value: str) -> str | None:
    return value or None


def _int_range(low: int, high: int | None = None) -> Callable[[str], int]:
    def coerce(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            raise ValueError(f"'{value}' is not a whole number") from None
        if number < low or (high is not None and number > high):
            bounds = f"between {low} and {high}" if high is not None else f"at least {low}"
            raise ValueError(f"Value must be {bounds}")
        return number
    return coerce


def _bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("true", "yes", "1", "on"):
        return True
    if lowered in ("false", "no", "0", "off"):
        return False
    raise ValueError(f"'{value}' is not true or false")


def _list(value: str) -> list[str]:
    items = [item.strip() for item in value.split(",") if item.strip()]
    if not items:
        raise ValueError("Provide a comma separated list")
    return items


def _status(value: str) -> str:
    if value not in PROJECT_STATUSES:
        raise ValueError(f"Status must be one of: {', '.join(PROJECT_STATUSES)}")
    return value


def _url(value: str) -> str:
    if not is_web_url(value):
        raise ValueError("Invalid URL format. Please provide a valid URL including http:// or https://")
    return value


def _optional_url(value: str) -> str | None:
    return _url(value) if value else None


def _platform(value: str) -> str:
    if value.lower() not in VALID_PLATFORMS:
        raise ValueError(f"Invalid platform. Valid platforms are: {', '.join(VALID_PLATFORMS)}")
    return value.lower()


def parse_date(value: str) -> datetime:
    try:
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValueError("Date must be in YYYY-MM-DD format") from None


# Editable fields per entity: wire name -> (attribute name, coercer)
EDITABLE_FIELDS: dict[str, dict[str, tuple[str, Callable[[str], Any]]]] = {
    "project": {
        "title": ("title", _text),
        "description": ("description", _text),
        "techStack": ("tech_stack", _list),
        "liveDemo": ("live_demo", _optional_url),
        "github": ("github", _optional_url),
        "asciiArt": ("ascii_art", str),
        "status": ("status", _status),
        "featured": ("featured", _bool),
    },
    "skill": {
        "category": ("category", _text),
        "name": ("name", _text),
        "proficiency": ("proficiency", _int_range(1, 100)),
        "yearsOfExperience": ("years_of_experience", _int_range(0)),
        "description": ("description", _optional_text),
    },
    "certificate": {
        "title": ("title", _text),
        "description": ("description", str),
        "issuer": ("issuer", _text),
        "dateIssued": ("date_issued", parse_date),
        "credentialUrl": ("credential_url", _optional_url),
    },
    "social": {
        "platform": ("platform", _platform),
        "username": ("username", _text),
        "displayName": ("display_name", _text),
        "url": ("url", _url),
    },
    "ascii": {
        "name": ("name", _text),
        "content": ("content", lambda value: _text(value).replace("\\n", "\n")),
        "description": ("description", _optional_text),
    },
}


def coerce_field(entity: str, field: str, raw: str) -> tuple[str, Any]:
    """Map a wire field name and typed value to ``(attribute, value)``.

    Raises:
        KeyError: Unknown field for the entity.
        ValueError: The value does not fit the field.
    """
    attribute, coerce = EDITABLE_FIELDS[entity][field]
    return attribute, coerce(raw)
