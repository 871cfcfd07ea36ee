from unittest.mock import AsyncMock, MagicMock, patch

import anthropic
import httpx
import pytest

from app.exceptions.custom import ClaudeError, RateLimitError
from app.services.claude import ClaudeService

MESSAGES_URL = "https://api.anthropic.com/v1/messages"


def _make_response(*texts: str):
    """Build a mock Anthropic response."""
    blocks = []
    for text in texts:
        block = MagicMock()
        block.text = text
        blocks.append(block)
    resp = MagicMock()
    resp.content = blocks
    return resp


def _status_error(cls, status: int):
    request = httpx.Request("POST", MESSAGES_URL)
    response = httpx.Response(status, request=request)
    return cls("upstream said no", response=response, body=None)


@pytest.fixture
def service():
    return ClaudeService(api_key="test-key")


async def test_generate_text_success(service):
    mock_resp = _make_response("Day 1: Shibuya", "ignored")
    with patch.object(service._client.messages, "create", new_callable=AsyncMock, return_value=mock_resp) as create:
        text = await service.generate_text("plan a trip")

    assert text == "Day 1: Shibuya"
    kwargs = create.call_args.kwargs
    assert kwargs["messages"] == [{"role": "user", "content": "plan a trip"}]


async def test_generate_text_no_content(service):
    with patch.object(service._client.messages, "create", new_callable=AsyncMock, return_value=_make_response()):
        assert await service.generate_text("p") is None


async def test_generate_text_status_error(service):
    error = _status_error(anthropic.InternalServerError, 500)
    with patch.object(service._client.messages, "create", new_callable=AsyncMock, side_effect=error):
        with pytest.raises(ClaudeError) as exc_info:
            await service.generate_text("p")

    assert exc_info.value.status_code == 500


async def test_generate_text_rate_limit(service):
    error = _status_error(anthropic.RateLimitError, 429)
    with patch.object(service._client.messages, "create", new_callable=AsyncMock, side_effect=error):
        with pytest.raises(RateLimitError):
            await service.generate_text("p")


async def test_generate_text_connection_error(service):
    error = anthropic.APIConnectionError(request=httpx.Request("POST", MESSAGES_URL))
    with patch.object(service._client.messages, "create", new_callable=AsyncMock, side_effect=error):
        with pytest.raises(ClaudeError) as exc_info:
            await service.generate_text("p")

    assert exc_info.value.status_code is None
