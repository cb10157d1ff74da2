"""Google Gemini adapter (Generative Language REST API)."""

import logging
import time

import requests

from moodtunes.domain.errors import TextGenerationError
from moodtunes.domain.ports import TextGenerationPort

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

logger = logging.getLogger("moodtunes.classifier.gemini")


class GeminiTextAdapter(TextGenerationPort):

    def __init__(self, api_key: str, model: str = "gemini-1.5-flash-latest", timeout: float = 10.0,
                 session: requests.Session | None = None):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._http = session or requests

    def generate(self, prompt: str) -> str:
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        started_at = time.perf_counter()
        logger.info("Gemini request started (model=%s, timeout=%.0fs)", self.model, self.timeout)
        try:
            response = self._http.post(
                GEMINI_URL.format(model=self.model),
                params={"key": self.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise TextGenerationError(f"Gemini request failed: {exc}") from exc
        except ValueError as exc:
            raise TextGenerationError("Gemini returned a non-JSON body") from exc

        text = extract_candidate_text(data)
        if not text:
            raise TextGenerationError("Unexpected Gemini response structure")

        logger.info("Gemini request completed (duration=%.1fs)", time.perf_counter() - started_at)
        return text


def extract_candidate_text(data) -> str | None:
    """Read candidates[0].content.parts[0].text, or the legacy candidates[0].output."""
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return None
    first = candidates[0]

    content = first.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if isinstance(parts, list) and parts and isinstance(parts[0], dict):
        text = parts[0].get("text")
        if isinstance(text, str) and text:
            return text

    output = first.get("output")
    if isinstance(output, str) and output:
        return output
    return None
