"""Ports (interfaces) for the hexagonal architecture."""

from abc import ABC, abstractmethod

from moodtunes.domain.model import PlaylistRef, Track


class TextGenerationPort(ABC):
    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Single-shot completion. Raises TextGenerationError on any failure."""
        ...


class CatalogAuthPort(ABC):
    @abstractmethod
    def exchange_client_credentials(self) -> str:
        """Return a short-lived access token. Raises CatalogAuthError."""
        ...


class CatalogPort(ABC):
    @abstractmethod
    def find_playlists(self, token: str, query: str, limit: int) -> list[PlaylistRef]:
        ...

    @abstractmethod
    def list_tracks(self, token: str, playlist_id: str, limit: int) -> list[Track]:
        ...


class ConfigPort(ABC):
    @abstractmethod
    def load(self) -> dict:
        ...

    @abstractmethod
    def save(self, cfg: dict) -> None:
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        ...
