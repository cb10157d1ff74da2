"""Settings persisted in config.json, with credentials kept in the OS keychain."""

import json
import logging
import os

from moodtunes.adapters.config.secret_store import KeyringSecretStore
from moodtunes.domain.errors import ConfigurationError
from moodtunes.domain.ports import ConfigPort

CONFIG_FILENAME = "config.json"
CONFIG_PATH_ENV = "MOODTUNES_CONFIG"

# Every setting the file may hold; anything else found on disk is ignored.
SETTINGS = {
    "use_fallback_only": False,
    "llm_provider": "gemini",
    "llm_api_key": "",
    "llm_model": "",
    "spotify_client_id": "",
    "spotify_client_secret": "",
    "host": "0.0.0.0",
    "port": 3001,
    "request_timeout": 10.0,
    "playlist_track_limit": 100,
    "cors_origins": ["*"],
}
CREDENTIAL_SETTINGS = ("spotify_client_secret", "llm_api_key")

logger = logging.getLogger("moodtunes.config")


def default_config_path() -> str:
    return os.environ.get(CONFIG_PATH_ENV) or os.path.join(os.getcwd(), CONFIG_FILENAME)


class JsonConfigAdapter(ConfigPort):

    def __init__(self, path: str | None = None, secret_store: KeyringSecretStore | None = None):
        self.path = path or default_config_path()
        self.secret_store = secret_store or KeyringSecretStore()

    def load(self) -> dict:
        settings = dict(SETTINGS)
        stored = self._read_file()
        settings.update({k: v for k, v in stored.items() if k in SETTINGS})

        for name in CREDENTIAL_SETTINGS:
            credential = self.secret_store.get(name)
            if credential:
                settings[name] = credential
        return settings

    def save(self, cfg: dict) -> None:
        on_disk = {k: cfg.get(k, default) for k, default in SETTINGS.items()}
        for name in CREDENTIAL_SETTINGS:
            on_disk[name] = self._stash_credential(name, cfg.get(name))

        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(on_disk, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Could not write {self.path}: {e}") from e
        logger.info("Settings written to %s", self.path)

    def is_configured(self) -> bool:
        """Spotify credentials are the only hard requirement; the LLM key is optional."""
        settings = self.load()
        return bool(settings["spotify_client_id"] and settings["spotify_client_secret"])

    def _read_file(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Could not read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.path} must hold a JSON object")
        return data

    def _stash_credential(self, name: str, value) -> str:
        """Hand a credential to the keychain; return what the file should keep for it."""
        value = str(value or "")
        if self.secret_store.set(name, value):
            return ""
        # No keychain backend: the file is the only place left.
        return value
