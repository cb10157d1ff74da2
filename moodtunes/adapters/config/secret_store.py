"""Secret storage helpers for local credentials."""

from __future__ import annotations

import logging
from typing import Optional

import keyring
from keyring.errors import KeyringError

DEFAULT_SERVICE_NAME = "moodtunes"

logger = logging.getLogger("moodtunes.config.secrets")


class KeyringSecretStore:
    """Store and retrieve API credentials from the OS keychain."""

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME):
        self.service_name = service_name

    def get(self, key: str) -> Optional[str]:
        try:
            return keyring.get_password(self.service_name, key)
        except KeyringError:
            logger.debug("Keychain unavailable while reading %s", key)
            return None

    def set(self, key: str, value: str) -> bool:
        try:
            if value:
                keyring.set_password(self.service_name, key, value)
            else:
                self.delete(key)
            return True
        except KeyringError:
            logger.warning("Keychain unavailable, %s will be stored in plaintext", key)
            return False

    def delete(self, key: str) -> bool:
        try:
            keyring.delete_password(self.service_name, key)
            return True
        except KeyringError:
            return False
