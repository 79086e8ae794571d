"""
Tests for the REST-backed content store, using httpx.MockTransport.
"""

import asyncio
import json
from datetime import datetime

import httpx
import pytest

from termfolio.commands import CommandContext
from termfolio.core import PrivilegeMode, StoreError
from termfolio.store import HttpContentStore


class FakeApi:
    """Routes (method, path) to canned responses and records requests."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404)
        if callable(route):
            return route(request)
        status, body = route
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, content=body or b"")

    def sent_json(self, index=-1):
        return json.loads(self.requests[index].content)


def make_store(routes):
    api = FakeApi(routes)
    client = httpx.AsyncClient(base_url="http://test", transport=httpx.MockTransport(api))
    return HttpContentStore("http://test", client=client), api


def run(coro):
    return asyncio.run(coro)


PROJECT = {
    "id": "p1",
    "title": "Demo",
    "description": "A demo",
    "techStack": ["Python", "httpx"],
    "liveDemo": "https://demo.example.com",
    "status": "production",
}


# ============================================================================
# Reads
# ============================================================================

class TestReads:
    """GET routes and camelCase parsing."""

    def test_list_projects(self):
        store, api = make_store({("GET", "/api/projects"): (200, [PROJECT])})
        projects = run(store.projects.list())
        assert projects[0].tech_stack == ["Python", "httpx"]
        assert projects[0].live_demo == "https://demo.example.com"

    def test_empty_body_is_empty_list(self):
        store, api = make_store({("GET", "/api/certificates"): (200, b"")})
        assert run(store.certificates.list()) == []

    def test_grouped_skills_flattened(self):
        grouped = {
            "Frontend": [{"id": "s1", "category": "Frontend", "name": "React", "proficiency": 90}],
            "Backend": [
                {"id": "s2", "category": "Backend", "name": "Go", "proficiency": 70, "yearsOfExperience": 2},
            ],
        }
        store, api = make_store({("GET", "/api/skills"): (200, grouped)})
        skills = run(store.skills.list())
        assert [s.name for s in skills] == ["React", "Go"]
        assert skills[1].years_of_experience == 2

    def test_project_item_route(self):
        store, api = make_store({("GET", "/api/projects/p1"): (200, PROJECT)})
        assert run(store.projects.get("p1")).title == "Demo"
        assert api.requests[-1].url.path == "/api/projects/p1"

    def test_project_missing(self):
        store, api = make_store({})
        assert run(store.projects.get("nope")) is None

    def test_social_get_scans_list(self):
        links = [
            {"id": "a", "platform": "github", "username": "u", "displayName": "U", "url": "https://github.com/u"},
            {"id": "b", "platform": "twitter", "username": "t", "displayName": "T", "url": "https://twitter.com/t"},
        ]
        store, api = make_store({("GET", "/api/social"): (200, links)})
        assert run(store.social_links.get("b")).platform == "twitter"
        assert run(store.social_links.get("zzz")) is None
        assert all(r.url.path == "/api/social" for r in api.requests)

    def test_document_missing(self):
        store, api = make_store({})
        assert run(store.bio.get()) is None

    def test_document(self):
        store, api = make_store({
            ("GET", "/api/github-stats"): (200, {"stars": 5, "pullRequests": 7}),
        })
        stats = run(store.github_stats.get())
        assert stats.pull_requests == 7
        assert stats.counters()["stars"] == 5

    def test_stored_timestamps(self):
        stamp = {"_seconds": 1700000000, "_nanoseconds": 0}
        store, api = make_store({
            ("GET", "/api/bio"): (200, {"content": "Hello there", "lastUpdated": stamp}),
            ("GET", "/api/certificates"): (200, [
                {"id": "c1", "title": "CKA", "issuer": "CNCF", "dateIssued": stamp},
            ]),
        })
        assert run(store.bio.get()).last_updated == datetime.fromtimestamp(1700000000)
        assert run(store.certificates.list())[0].date_issued.year == 2023

    def test_about_with_stored_timestamp(self, config, run_command):
        stamp = {"_seconds": 1700000000, "_nanoseconds": 0}
        store, api = make_store({
            ("GET", "/api/bio"): (200, {"content": "Hello there", "lastUpdated": stamp}),
        })
        ctx = CommandContext(privilege=PrivilegeMode.GUEST, store=store, config=config)
        result = run_command(ctx, "about")
        assert result.ok
        assert "Hello there" in result.text


# ============================================================================
# Writes
# ============================================================================

class TestWrites:
    """POST, PUT and DELETE routes."""

    def test_create_sends_camel_case(self):
        store, api = make_store({("POST", "/api/projects"): (201, PROJECT)})
        project = run(store.projects.create(
            {"title": "Demo", "description": "A demo", "tech_stack": ["Python"]}
        ))
        assert project.id == "p1"
        assert api.sent_json() == {"title": "Demo", "description": "A demo", "techStack": ["Python"]}

    def test_update_fills_missing_id(self):
        body = {"title": "Demo", "description": "New"}
        store, api = make_store({("PUT", "/api/projects/p1"): (200, body)})
        project = run(store.projects.update("p1", {"description": "New"}))
        assert project.id == "p1"
        assert api.sent_json() == {"description": "New"}

    def test_delete(self):
        store, api = make_store({("DELETE", "/api/certificates/c1"): (204, b"")})
        run(store.certificates.delete("c1"))
        assert api.requests[-1].method == "DELETE"

    def test_delete_missing_raises(self):
        store, api = make_store({})
        with pytest.raises(StoreError):
            run(store.certificates.delete("c1"))

    def test_mark_read_uses_read_route(self):
        message = {"id": "m1", "name": "Jane", "email": "j@example.com", "message": "Hi", "read": True}
        store, api = make_store({
            ("PUT", "/api/messages/m1/read"): (200, b""),
            ("GET", "/api/messages"): (200, [message]),
        })
        updated = run(store.messages.update("m1", {"read": True}))
        assert updated.read is True
        assert [r.url.path for r in api.requests] == ["/api/messages/m1/read", "/api/messages"]

    def test_document_update(self):
        store, api = make_store({("PUT", "/api/resume"): (200, {"url": "https://example.com/cv.pdf"})})
        resume = run(store.resume.update({"url": "https://example.com/cv.pdf"}))
        assert resume.url == "https://example.com/cv.pdf"


# ============================================================================
# Failures
# ============================================================================

class TestFailures:
    """Every failure surfaces as StoreError."""

    def test_server_error(self):
        store, api = make_store({("GET", "/api/projects"): (500, b"oops")})
        with pytest.raises(StoreError):
            run(store.projects.list())

    def test_transport_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        store, api = make_store({("GET", "/api/projects"): refuse})
        with pytest.raises(StoreError):
            run(store.projects.list())

    def test_invalid_json(self):
        store, api = make_store({("GET", "/api/projects"): (200, b"not json")})
        with pytest.raises(StoreError):
            run(store.projects.list())

    def test_invalid_record(self):
        store, api = make_store({("GET", "/api/projects"): (200, [{"id": "x"}])})
        with pytest.raises(StoreError):
            run(store.projects.list())


# ============================================================================
# Admin Session
# ============================================================================

class TestAdminSession:
    """Authentication endpoints."""

    def test_authenticate_accepted(self):
        store, api = make_store({("POST", "/api/admin/auth"): (200, {"ok": True})})
        assert run(store.authenticate("secret")) is True
        assert api.sent_json() == {"password": "secret"}

    def test_authenticate_rejected(self):
        store, api = make_store({("POST", "/api/admin/auth"): (401, {"error": "no"})})
        assert run(store.authenticate("wrong")) is False

    def test_authenticate_server_error(self):
        store, api = make_store({("POST", "/api/admin/auth"): (503, b"")})
        with pytest.raises(StoreError):
            run(store.authenticate("secret"))

    def test_logout(self):
        store, api = make_store({("POST", "/api/admin/logout"): (200, b"")})
        run(store.logout())
        assert api.requests[-1].url.path == "/api/admin/logout"

    def test_base_url_trailing_slash(self):
        store = HttpContentStore("http://example.com/")
        assert store.base_url == "http://example.com"
        run(store.aclose())
