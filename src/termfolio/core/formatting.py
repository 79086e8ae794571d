"""
Text formatting helpers shared by command handlers.

All terminal output is plain text built from box-drawing and block
characters, so these helpers are pure string functions.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Iterable, Optional

# Width used by bordered sections and centered titles
SECTION_WIDTH = 90

# Cells in the loading/progress bar
PROGRESS_WIDTH = 50

FILLED = "█"
EMPTY = "░"
HALF = "▌"
BORDER = "│"

CATEGORY_ICONS = {
    "Frontend": "🎨",
    "Backend": "⚙️",
    "Database": "🗄️",
    "DevOps": "🚀",
    "Mobile": "📱",
    "Languages": "📝",
    "Tools": "🛠️",
    "Testing": "🧪",
    "Cloud": "☁️",
    "Other": "🔧",
}
DEFAULT_CATEGORY_ICON = "📌"

PLATFORM_ICONS = {
    "github": "🔗",
    "linkedin": "🔗",
    "twitter": "🐦",
    "instagram": "📸",
    "gmail": "📧",
    "email": "📧",
    "youtube": "📹",
    "portfolio": "🌐",
}
DEFAULT_PLATFORM_ICON = "🔗"

STATUS_MARKERS = {
    "production": ("✅", "Production Ready"),
    "development": ("🚧", "In Development"),
    "archived": ("📦", "Archived"),
}


def progress_bar(progress: float, width: int = PROGRESS_WIDTH) -> str:
    """Render a 0-100 value as filled/empty block cells."""
    progress = max(0.0, min(100.0, float(progress)))
    filled = math.floor(progress / 100 * width)
    return FILLED * filled + EMPTY * (width - filled)


def loading_frame(label: str, progress: float) -> str:
    """Text of a loading line at the given percentage."""
    return f"{label}\n[{progress_bar(progress)}] {math.floor(progress)}%"


def completed_progress(label: str) -> str:
    """Header prepended to results that played a loading animation."""
    return f"{label}\n[{progress_bar(100)}] 100%\n"


def proficiency_bar(proficiency: int) -> str:
    """10-segment skill bar, with a half block when the remainder is >= 5."""
    proficiency = max(0, min(100, int(proficiency)))
    full = proficiency // 10
    half = 1 if proficiency % 10 >= 5 else 0
    empty = 10 - full - half
    return FILLED * full + (HALF if half else "") + EMPTY * empty


def proficiency_level(proficiency: int) -> str:
    if proficiency >= 90:
        return "Expert"
    if proficiency >= 80:
        return "Advanced"
    if proficiency >= 60:
        return "Intermediate"
    if proficiency >= 40:
        return "Competent"
    return "Beginner"


def category_icon(category: str) -> str:
    return CATEGORY_ICONS.get(category, DEFAULT_CATEGORY_ICON)


def platform_icon(platform: str) -> str:
    return PLATFORM_ICONS.get(platform.lower(), DEFAULT_PLATFORM_ICON)


def status_marker(status: str) -> str:
    """E.g. ``✅ Production Ready``; unknown statuses read as archived."""
    emoji, text = STATUS_MARKERS.get(status, STATUS_MARKERS["archived"])
    return f"{emoji} {text}"


def section(title: str, lines: Iterable[str], close: bool = True) -> str:
    """Build a ``│``-bordered section.

    Empty strings in ``lines`` become bare ``│`` spacer rows.

    Example:
        >>> print(section("👤 Current User", ["Jane Doe"]))
        👤 Current User
        │
        │ Jane Doe
        │
    """
    out = [title, BORDER]
    for line in lines:
        out.append(f"{BORDER} {line}" if line else BORDER)
    if close:
        out.append(BORDER)
    return "\n".join(out)


def center(text: str, width: int = SECTION_WIDTH) -> str:
    """Pad text on both sides so it is centered in ``width`` columns."""
    left = max(0, math.floor((width - len(text)) / 2))
    right = max(0, math.ceil((width - len(text)) / 2))
    return " " * left + text + " " * right


def wrap_bordered(text: str, width: int = SECTION_WIDTH) -> list[str]:
    """Greedy word wrap, each row prefixed with the section border."""
    rows: list[str] = []
    line = f"{BORDER} "
    for word in text.split(" "):
        if len(line + word) > width - 2 and line != f"{BORDER} ":
            rows.append(line)
            line = f"{BORDER} {word} "
        else:
            line += word + " "
    if line != f"{BORDER} ":
        rows.append(line)
    return rows


def project_banner(title: str, width: int = 60) -> str:
    """Double-line box around an upper-cased title, used as project art."""
    border = "═" * (width - 2)
    upper = title.upper()
    padded = upper.rjust((width + len(upper)) // 2).ljust(width - 2)
    return f"╔{border}╗\n║{padded}║\n╚{border}╝"


def short_date(value: Optional[datetime]) -> str:
    """US-style M/D/YYYY, or ``Unknown``."""
    if value is None:
        return "Unknown"
    return f"{value.month}/{value.day}/{value.year}"


def truncate(text: str, limit: int) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")
