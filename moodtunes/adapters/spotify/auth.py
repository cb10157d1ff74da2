"""Spotify client-credentials exchange using spotipy."""

import logging

import requests
from spotipy.cache_handler import MemoryCacheHandler
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from moodtunes.domain.errors import CatalogAuthError
from moodtunes.domain.ports import CatalogAuthPort

logger = logging.getLogger("moodtunes.spotify.auth")


class SpotifyClientCredentialsAuth(CatalogAuthPort):
    """Exchanges the app's client id/secret for an access token.

    Each exchange uses its own in-memory cache, so tokens never outlive the
    resolution that requested them.
    """

    def __init__(self, client_id: str, client_secret: str, timeout: float = 10.0,
                 credentials_factory=SpotifyClientCredentials):
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout
        self._credentials_factory = credentials_factory

    def exchange_client_credentials(self) -> str:
        if not self.client_id or not self.client_secret:
            raise CatalogAuthError("Missing Spotify client ID/secret in configuration")

        manager = self._credentials_factory(
            client_id=self.client_id,
            client_secret=self.client_secret,
            requests_timeout=self.timeout,
            cache_handler=MemoryCacheHandler(),
        )
        try:
            token = manager.get_access_token(as_dict=False)
        except SpotifyOauthError as exc:
            raise CatalogAuthError(f"Spotify rejected client credentials: {exc}") from exc
        except requests.RequestException as exc:
            raise CatalogAuthError(f"Spotify token endpoint unreachable: {exc}") from exc

        if not token:
            raise CatalogAuthError("Spotify token response had no access_token")
        logger.debug("Spotify access token acquired")
        return token
