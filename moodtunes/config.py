"""Application settings, resolved once at start-up and passed to every component."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from moodtunes.adapters.classifier import DEFAULT_PROVIDER, PROVIDERS
from moodtunes.domain.errors import ConfigurationError
from moodtunes.domain.ports import ConfigPort

# Provider-specific key variables, checked after the generic LLM_API_KEY.
_PROVIDER_KEY_VARS = {
    "gemini": "GOOGLE_API_KEY",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


@dataclass(frozen=True)
class AppConfig:
    use_fallback_only: bool = False
    llm_provider: str = DEFAULT_PROVIDER
    llm_api_key: str = ""
    llm_model: str = ""
    spotify_client_id: str = ""
    spotify_client_secret: str = ""
    host: str = "0.0.0.0"
    port: int = 3001
    request_timeout: float = 10.0
    playlist_track_limit: int = 100
    cors_origins: tuple[str, ...] = ("*",)

    @property
    def has_api_key(self) -> bool:
        return bool(self.llm_api_key)

    @property
    def has_spotify_credentials(self) -> bool:
        return bool(self.spotify_client_id and self.spotify_client_secret)

    @property
    def model(self) -> str:
        return self.llm_model or PROVIDERS[self.llm_provider]["default_model"]


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    config_port: Optional[ConfigPort] = None,
    dotenv: bool = True,
) -> AppConfig:
    """Merge config file values with environment overrides.

    The environment wins over config.json. When ``environ`` is omitted the
    process environment is used, after loading a ``.env`` file if present.
    """
    if environ is None:
        if dotenv:
            load_dotenv(override=False)
        environ = os.environ

    cfg = config_port.load() if config_port is not None else {}

    provider = _pick(environ, cfg, "MOODTUNES_LLM_PROVIDER", "llm_provider", DEFAULT_PROVIDER).lower()
    if provider not in PROVIDERS:
        raise ConfigurationError(f"Unknown LLM provider: {provider}")

    api_key = (
        environ.get("LLM_API_KEY")
        or environ.get(_PROVIDER_KEY_VARS[provider])
        or cfg.get("llm_api_key")
        or ""
    )

    return AppConfig(
        use_fallback_only=_as_bool(_pick(environ, cfg, "USE_FALLBACK", "use_fallback_only", False)),
        llm_provider=provider,
        llm_api_key=str(api_key).strip(),
        llm_model=str(_pick(environ, cfg, "MOODTUNES_LLM_MODEL", "llm_model", "")),
        spotify_client_id=str(_pick(environ, cfg, "SPOTIFY_CLIENT_ID", "spotify_client_id", "")).strip(),
        spotify_client_secret=str(
            _pick(environ, cfg, "SPOTIFY_CLIENT_SECRET", "spotify_client_secret", "")
        ).strip(),
        host=str(_pick(environ, cfg, "HOST", "host", "0.0.0.0")),
        port=_as_int("PORT", _pick(environ, cfg, "PORT", "port", 3001)),
        request_timeout=_as_positive_float(
            "MOODTUNES_REQUEST_TIMEOUT",
            _pick(environ, cfg, "MOODTUNES_REQUEST_TIMEOUT", "request_timeout", 10.0),
        ),
        playlist_track_limit=_as_int(
            "MOODTUNES_PLAYLIST_TRACK_LIMIT",
            _pick(environ, cfg, "MOODTUNES_PLAYLIST_TRACK_LIMIT", "playlist_track_limit", 100),
        ),
        cors_origins=_as_origins(_pick(environ, cfg, "MOODTUNES_CORS_ORIGINS", "cors_origins", ["*"])),
    )


def _pick(environ: Mapping[str, str], cfg: dict, env_name: str, cfg_name: str, default):
    value = environ.get(env_name)
    if value is not None and value != "":
        return value
    if cfg.get(cfg_name) not in (None, ""):
        return cfg[cfg_name]
    return default


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _as_int(name: str, value) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc
    if number <= 0:
        raise ConfigurationError(f"{name} must be positive, got {number}")
    return number


def _as_positive_float(name: str, value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc
    if number <= 0:
        raise ConfigurationError(f"{name} must be positive, got {number}")
    return number


def _as_origins(value) -> tuple[str, ...]:
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = list(value)
    origins = tuple(str(o).strip() for o in items if str(o).strip())
    return origins or ("*",)
