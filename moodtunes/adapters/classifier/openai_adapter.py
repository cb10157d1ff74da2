"""OpenAI adapter for mood classification."""

from moodtunes.domain.errors import TextGenerationError
from moodtunes.domain.ports import TextGenerationPort


class OpenAITextAdapter(TextGenerationPort):

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", timeout: float = 10.0, client=None):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client = client

    def generate(self, prompt: str) -> str:
        import openai

        client = self._client or openai.OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=8,
            )
            text = response.choices[0].message.content
        except openai.OpenAIError as exc:
            raise TextGenerationError(f"OpenAI request failed: {exc}") from exc
        except (AttributeError, IndexError) as exc:
            raise TextGenerationError("Unexpected OpenAI response structure") from exc

        if not isinstance(text, str) or not text:
            raise TextGenerationError("OpenAI returned an empty completion")
        return text
