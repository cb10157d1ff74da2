"""Anthropic adapter for mood classification."""

import logging
import time

from moodtunes.domain.errors import TextGenerationError
from moodtunes.domain.ports import TextGenerationPort

logger = logging.getLogger("moodtunes.classifier.anthropic")


class AnthropicTextAdapter(TextGenerationPort):

    def __init__(self, api_key: str, model: str = "claude-3-haiku-20240307", timeout: float = 10.0, client=None):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client = client

    def generate(self, prompt: str) -> str:
        import anthropic

        client = self._client or anthropic.Anthropic(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        started_at = time.perf_counter()
        logger.info("Anthropic request started (model=%s, timeout=%.0fs)", self.model, self.timeout)
        try:
            response = client.messages.create(
                model=self.model,
                max_tokens=8,
                messages=[{"role": "user", "content": prompt}],
            )
            text = response.content[0].text
        except anthropic.AnthropicError as exc:
            raise TextGenerationError(f"Anthropic request failed: {exc}") from exc
        except (AttributeError, IndexError) as exc:
            raise TextGenerationError("Unexpected Anthropic response structure") from exc

        logger.info("Anthropic request completed (duration=%.1fs)", time.perf_counter() - started_at)
        if not isinstance(text, str) or not text:
            raise TextGenerationError("Anthropic returned an empty completion")
        return text
