"""Text-generation adapters used for mood classification, and the provider registry."""

from moodtunes.domain.errors import ConfigurationError

PROVIDERS = {
    "gemini": {
        "name": "Google Gemini",
        "default_model": "gemini-1.5-flash-latest",
        "label": "Google (Gemini)",
        "url": "https://aistudio.google.com/app/apikey",
    },
    "openai": {
        "name": "OpenAI",
        "default_model": "gpt-4o-mini",
        "label": "OpenAI (GPT)",
        "url": "https://platform.openai.com/api-keys",
    },
    "anthropic": {
        "name": "Anthropic",
        "default_model": "claude-3-haiku-20240307",
        "label": "Anthropic",
        "url": "https://console.anthropic.com",
    },
}

DEFAULT_PROVIDER = "gemini"


def create_text_generator(provider: str, api_key: str, model: str = "", timeout: float = 10.0):
    """Build the adapter for ``provider``."""
    if provider not in PROVIDERS:
        raise ConfigurationError(f"Unknown LLM provider: {provider}")
    model = model or PROVIDERS[provider]["default_model"]

    if provider == "gemini":
        from moodtunes.adapters.classifier.gemini_adapter import GeminiTextAdapter
        return GeminiTextAdapter(api_key=api_key, model=model, timeout=timeout)
    if provider == "openai":
        from moodtunes.adapters.classifier.openai_adapter import OpenAITextAdapter
        return OpenAITextAdapter(api_key=api_key, model=model, timeout=timeout)

    from moodtunes.adapters.classifier.anthropic_adapter import AnthropicTextAdapter
    return AnthropicTextAdapter(api_key=api_key, model=model, timeout=timeout)
