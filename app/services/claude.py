import logging

import anthropic
from anthropic import AsyncAnthropic

from app.exceptions.custom import ClaudeError, RateLimitError

logger = logging.getLogger(__name__)

MODEL = "claude-sonnet-4-20250514"
MAX_TOKENS = 4096


class ClaudeService:
    def __init__(self, api_key: str, model: str = MODEL, max_tokens: int = MAX_TOKENS):
        self._client = AsyncAnthropic(api_key=api_key)
        self._model = model
        self._max_tokens = max_tokens

    async def generate_text(self, prompt: str) -> str | None:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.RateLimitError as exc:
            raise RateLimitError("Claude") from exc
        except anthropic.APIStatusError as exc:
            raise ClaudeError(exc.message, status_code=exc.status_code) from exc
        except anthropic.APIError as exc:
            raise ClaudeError(f"Claude request failed: {exc.message}") from exc

        if not response.content:
            logger.warning("Claude returned no content blocks")
            return None
        return getattr(response.content[0], "text", None) or None
