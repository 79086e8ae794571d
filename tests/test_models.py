"""
Tests for the result, line and store record models.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from termfolio.core import CommandResult, KeyPress, Line, LineKind, LoadingSpec, Tone
from termfolio.store.models import (
    Certificate,
    GithubStats,
    Message,
    Project,
    Skill,
    wire_fields,
)


# ============================================================================
# CommandResult / Line
# ============================================================================

class TestCommandResult:
    """Tests for the CommandResult constructors."""

    def test_success(self):
        result = CommandResult.success("hi")
        assert result.ok
        assert result.tone == Tone.NORMAL
        assert result.loading is None

    def test_success_with_loading(self):
        result = CommandResult.success("hi", loading=LoadingSpec(label="Wait", duration_ms=500))
        assert result.loading.duration_ms == 500

    def test_guidance_is_not_ok(self):
        result = CommandResult.guidance("usage: x")
        assert not result.ok
        assert result.tone == Tone.GUIDANCE

    def test_failure_is_alarm(self):
        result = CommandResult.failure("boom")
        assert not result.ok
        assert result.tone == Tone.ALARM

    def test_clear(self):
        result = CommandResult.clear()
        assert result.ok
        assert result.clear_requested
        assert result.text == ""

    def test_negative_loading_duration_rejected(self):
        with pytest.raises(ValidationError):
            LoadingSpec(label="x", duration_ms=-1)


class TestLine:
    """Tests for scrollback lines."""

    def test_ids_are_unique(self):
        assert Line(kind=LineKind.OUTPUT, text="a").id != Line(kind=LineKind.OUTPUT, text="a").id

    def test_from_ok_result(self):
        line = Line.from_result(CommandResult.success("fine"))
        assert line.kind == LineKind.OUTPUT
        assert line.tone == Tone.NORMAL

    def test_from_failed_result_keeps_tone(self):
        line = Line.from_result(CommandResult.guidance("try again"))
        assert line.kind == LineKind.ERROR
        assert line.tone == Tone.GUIDANCE


class TestKeyPress:
    """Tests for KeyPress.is_printable."""

    def test_single_char_printable(self):
        assert KeyPress(key="a").is_printable

    def test_named_key_not_printable(self):
        assert not KeyPress(key="Enter").is_printable

    def test_modified_char_not_printable(self):
        assert not KeyPress(key="c", ctrl=True).is_printable
        assert not KeyPress(key="x", meta=True).is_printable


# ============================================================================
# Store records
# ============================================================================

class TestRecords:
    """Tests for camelCase wire mapping and field constraints."""

    def test_project_from_wire(self):
        project = Project.model_validate({
            "id": "p1",
            "title": "Demo",
            "description": "A demo",
            "techStack": ["Python"],
            "liveDemo": "https://demo.example.com",
            "status": "production",
        })
        assert project.tech_stack == ["Python"]
        assert project.live_demo == "https://demo.example.com"

    def test_timestamp_dict_accepted(self):
        cert = Certificate.model_validate({
            "title": "CKA",
            "issuer": "CNCF",
            "dateIssued": {"_seconds": 1700000000, "_nanoseconds": 500000000},
        })
        assert cert.date_issued == datetime.fromtimestamp(1700000000.5)

    def test_iso_date_still_accepted(self):
        cert = Certificate(title="CKA", issuer="CNCF", date_issued="2024-01-15T00:00:00")
        assert cert.date_issued == datetime(2024, 1, 15)

    def test_project_status_restricted(self):
        with pytest.raises(ValidationError):
            Project(title="Demo", description="x", status="shipped")

    @pytest.mark.parametrize("proficiency", [0, 101])
    def test_skill_proficiency_range(self, proficiency):
        with pytest.raises(ValidationError):
            Skill(category="Frontend", name="React", proficiency=proficiency)

    def test_skill_by_wire_name(self):
        skill = Skill.model_validate(
            {"category": "Backend", "name": "Go", "proficiency": 70, "yearsOfExperience": 2}
        )
        assert skill.years_of_experience == 2

    def test_certificate_date_parsed(self):
        cert = Certificate.model_validate(
            {"title": "X", "issuer": "Y", "dateIssued": "2024-01-15T00:00:00"}
        )
        assert cert.date_issued == datetime(2024, 1, 15)

    def test_message_defaults(self):
        message = Message(name="Jane", email="jane@example.com", message="Hi")
        assert message.read is False
        assert isinstance(message.timestamp, datetime)

    def test_extra_fields_ignored(self):
        message = Message.model_validate(
            {"name": "Jane", "email": "j@example.com", "message": "Hi", "spam": 1}
        )
        assert not hasattr(message, "spam")

    def test_stats_counters(self):
        stats = GithubStats(stars=1, commits=2, repos=3, followers=4, pull_requests=5, issues=6)
        assert stats.counters() == {
            "stars": 1,
            "commits": 2,
            "repos": 3,
            "followers": 4,
            "pullRequests": 5,
            "issues": 6,
        }

    def test_wire_fields(self):
        fields = wire_fields({"tech_stack": ["Go"], "date_issued": datetime(2024, 1, 15)})
        assert fields == {"techStack": ["Go"], "dateIssued": "2024-01-15T00:00:00"}
