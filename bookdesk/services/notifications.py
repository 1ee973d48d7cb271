"""Outbound email — a fire-and-forget sink over an HTTP email API."""

import logging

import httpx
from fastapi import Request

logger = logging.getLogger(__name__)


class EmailNotifier:
    """Sends transactional email. ``send`` never raises.

    Built once at startup with its own ``httpx.AsyncClient``; ``aclose`` must
    be called on shutdown. Without an API key it only logs what it would send.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        sender: str,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_url = api_url
        self.api_key = api_key
        self.sender = sender
        self._client = client or httpx.AsyncClient(timeout=10)

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def send(
        self,
        to: str,
        subject: str,
        text: str,
        html: str | None = None,
    ) -> None:
        if not self.enabled:
            logger.info("Email delivery disabled; would send %r to %s", subject, to)
            return

        body: dict = {
            "from": self.sender,
            "to": [to],
            "subject": subject,
            "text": text,
        }
        if html:
            body["html"] = html

        try:
            resp = await self._client.post(
                self.api_url,
                json=body,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
            resp.raise_for_status()
        except Exception:
            logger.warning("Email delivery failed for %r to %s", subject, to, exc_info=True)

    async def aclose(self) -> None:
        await self._client.aclose()


def get_notifier(request: Request) -> EmailNotifier:
    """FastAPI dependency returning the notifier built at startup."""
    return request.app.state.notifier
