"""EmailNotifier — delivery, log-only mode, and swallowing failures."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from bookdesk.services.notifications import EmailNotifier


def _client(post: AsyncMock) -> AsyncMock:
    client = AsyncMock(spec=httpx.AsyncClient)
    client.post = post
    return client


@pytest.mark.asyncio
async def test_send_posts_to_email_api():
    response = MagicMock()
    post = AsyncMock(return_value=response)
    notifier = EmailNotifier(
        api_url="https://mail.test/emails",
        api_key="key-123",
        sender="desk@shop.com",
        client=_client(post),
    )

    await notifier.send("client@shop.com", "Hello", "Body text", html="<p>Body</p>")

    post.assert_awaited_once()
    args, kwargs = post.call_args
    assert args[0] == "https://mail.test/emails"
    assert kwargs["headers"]["Authorization"] == "Bearer key-123"
    assert kwargs["json"] == {
        "from": "desk@shop.com",
        "to": ["client@shop.com"],
        "subject": "Hello",
        "text": "Body text",
        "html": "<p>Body</p>",
    }
    response.raise_for_status.assert_called_once()


@pytest.mark.asyncio
async def test_without_api_key_nothing_is_posted():
    post = AsyncMock()
    notifier = EmailNotifier(
        api_url="https://mail.test/emails",
        api_key="",
        sender="desk@shop.com",
        client=_client(post),
    )
    assert notifier.enabled is False

    await notifier.send("client@shop.com", "Hello", "Body")
    post.assert_not_awaited()


@pytest.mark.asyncio
async def test_delivery_errors_do_not_propagate():
    post = AsyncMock(side_effect=httpx.ConnectError("Connection refused"))
    notifier = EmailNotifier(
        api_url="https://mail.test/emails",
        api_key="key-123",
        sender="desk@shop.com",
        client=_client(post),
    )

    # Must not raise
    await notifier.send("client@shop.com", "Hello", "Body")
    post.assert_awaited_once()


@pytest.mark.asyncio
async def test_http_error_status_is_swallowed():
    response = MagicMock()
    response.raise_for_status.side_effect = httpx.HTTPStatusError(
        "422", request=MagicMock(), response=MagicMock()
    )
    notifier = EmailNotifier(
        api_url="https://mail.test/emails",
        api_key="key-123",
        sender="desk@shop.com",
        client=_client(AsyncMock(return_value=response)),
    )
    await notifier.send("client@shop.com", "Hello", "Body")
