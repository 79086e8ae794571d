"""Mail relay used by the contact form."""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from termfolio.core.exceptions import MailRelayError

logger = logging.getLogger(__name__)


class MailRelay:
    """Posts contact messages to a form webhook.

    A relay constructed without a URL is disabled: ``send`` succeeds
    without any network traffic.
    """

    def __init__(
        self,
        url: Optional[str],
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url or None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def enabled(self) -> bool:
        return self.url is not None

    async def send(self, name: str, email: str, message: str) -> None:
        """Deliver one message.

        Raises:
            MailRelayError: On transport failure or a non-2xx response.
        """
        if not self.enabled:
            logger.debug("Mail relay disabled, skipping send")
            return

        try:
            response = await self._client.post(
                self.url,
                json={"name": name, "email": email, "message": message},
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            raise MailRelayError(f"Mail relay unreachable: {e}") from e

        if response.is_error:
            raise MailRelayError(f"Mail relay returned HTTP {response.status_code}")
        logger.info(f"Relayed contact message from {email}")

    async def aclose(self) -> None:
        await self._client.aclose()
