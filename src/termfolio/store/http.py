"""HTTP content store backed by the portfolio REST API."""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from termfolio.core.exceptions import StoreError
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
    wire_fields,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class _Api:
    """Thin wrapper that turns every failure into StoreError."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        allow: tuple[int, ...] = (),
    ) -> httpx.Response:
        """Send a request; statuses in ``allow`` are returned, not raised."""
        try:
            response = await self.client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise StoreError(f"{method} {path}: {e}") from e

        if response.status_code in allow:
            return response
        if response.is_error:
            logger.warning(f"{method} {path} returned {response.status_code}")
            raise StoreError(f"{method} {path}: HTTP {response.status_code}")
        return response

    @staticmethod
    def body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise StoreError(f"Invalid JSON from {response.request.url}") from e


def _parse(model: type[T], data: Any) -> T:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise StoreError(f"Invalid {model.__name__} record: {e}") from e


class HttpCollection(Collection[T]):
    """REST collection at ``path`` (GET/POST on it, PUT/DELETE on ``path/id``).

    Only some resources have a single-record GET route; for the others
    ``get`` scans the list.
    """

    def __init__(self, api: _Api, path: str, model: type[T], item_route: bool = False):
        self.api = api
        self.path = path
        self.model = model
        self.item_route = item_route

    def _records(self, data: Any) -> list[Any]:
        return data or []

    async def list(self) -> list[T]:
        data = _Api.body(await self.api.request("GET", self.path))
        return [_parse(self.model, item) for item in self._records(data)]

    async def get(self, record_id: str) -> Optional[T]:
        if not self.item_route:
            for record in await self.list():
                if record.id == record_id:
                    return record
            return None
        response = await self.api.request("GET", f"{self.path}/{record_id}", allow=(404,))
        if response.status_code == 404:
            return None
        data = _Api.body(response)
        return _parse(self.model, data) if data else None

    async def create(self, fields: dict[str, Any]) -> T:
        response = await self.api.request("POST", self.path, json=wire_fields(fields))
        return _parse(self.model, _Api.body(response))

    async def update(self, record_id: str, fields: dict[str, Any]) -> T:
        response = await self.api.request(
            "PUT", f"{self.path}/{record_id}", json=wire_fields(fields)
        )
        data = _Api.body(response)
        if isinstance(data, dict) and "id" not in data:
            data = {**data, "id": record_id}
        return _parse(self.model, data)

    async def delete(self, record_id: str) -> None:
        await self.api.request("DELETE", f"{self.path}/{record_id}")


class HttpSkillCollection(HttpCollection[Skill]):
    """GET /api/skills returns skills grouped by category; flatten them."""

    def _records(self, data: Any) -> list[Any]:
        if isinstance(data, dict):
            return [skill for skills in data.values() for skill in skills]
        return data or []


class HttpMessageCollection(HttpCollection[Message]):
    """Read state has its own endpoint on the API."""

    async def update(self, record_id: str, fields: dict[str, Any]) -> Message:
        if set(fields) == {"read"} and fields["read"]:
            await self.api.request("PUT", f"{self.path}/{record_id}/read")
            record = await self.get(record_id)
            if record is None:
                raise StoreError(f"Message {record_id} disappeared after update")
            return record
        return await super().update(record_id, fields)


class HttpDocument(Document[T]):
    """Singleton resource: GET and PUT on ``path``."""

    def __init__(self, api: _Api, path: str, model: type[T]):
        self.api = api
        self.path = path
        self.model = model

    async def get(self) -> Optional[T]:
        response = await self.api.request("GET", self.path, allow=(404,))
        if response.status_code == 404:
            return None
        data = _Api.body(response)
        return _parse(self.model, data) if data else None

    async def update(self, fields: dict[str, Any]) -> T:
        response = await self.api.request("PUT", self.path, json=wire_fields(fields))
        return _parse(self.model, _Api.body(response))


class HttpContentStore(ContentStore):
    """Content store that talks to the portfolio REST API.

    Example:
        store = HttpContentStore("http://localhost:5000")
        projects = await store.projects.list()
        await store.aclose()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )
        api = _Api(self._client)
        self._api = api

        self.projects = HttpCollection(api, "/api/projects", Project, item_route=True)
        self.skills = HttpSkillCollection(api, "/api/skills", Skill)
        self.certificates = HttpCollection(api, "/api/certificates", Certificate)
        self.social_links = HttpCollection(api, "/api/social", SocialLink)
        self.messages = HttpMessageCollection(api, "/api/messages", Message)
        self.ascii_art = HttpCollection(api, "/api/ascii-art", AsciiArt)
        self.bio = HttpDocument(api, "/api/bio", Bio)
        self.github_stats = HttpDocument(api, "/api/github-stats", GithubStats)
        self.resume = HttpDocument(api, "/api/resume", Resume)

    async def authenticate(self, secret: str) -> bool:
        response = await self._api.request(
            "POST", "/api/admin/auth", json={"password": secret}, allow=(401,)
        )
        if response.status_code == 401:
            logger.info("Store rejected admin credentials")
            return False
        return True

    async def logout(self) -> None:
        await self._api.request("POST", "/api/admin/logout")

    async def aclose(self) -> None:
        await self._client.aclose()
