"""Shared in-memory adapters and fixtures for all bounded contexts."""

from typing import Optional

import pytest

from moodtunes.config import AppConfig
from moodtunes.domain.errors import CatalogAuthError, CatalogError, TextGenerationError
from moodtunes.domain.model import PlaylistRef, Track
from moodtunes.domain.ports import CatalogAuthPort, CatalogPort, TextGenerationPort


# ── In-memory adapters ──────────────────────────────────────────────


class ScriptedTextGenerator(TextGenerationPort):
    """Answers every prompt with a fixed reply, or raises when reply is an exception."""

    def __init__(self, reply="happy"):
        self.reply = reply
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


class InMemoryAuth(CatalogAuthPort):
    def __init__(self, token: str = "token-123", error: Optional[Exception] = None):
        self.token = token
        self.error = error
        self.exchanges = 0

    def exchange_client_credentials(self) -> str:
        self.exchanges += 1
        if self.error:
            raise self.error
        return self.token


class InMemoryCatalog(CatalogPort):
    def __init__(self, playlists: Optional[dict[str, list[Track]]] = None, search_error=None, listing_error=None):
        self.playlists = playlists or {}
        self.search_error = search_error
        self.listing_error = listing_error
        self.searches: list[tuple[str, str, int]] = []
        self.listings: list[tuple[str, str, int]] = []

    def find_playlists(self, token: str, query: str, limit: int) -> list[PlaylistRef]:
        self.searches.append((token, query, limit))
        if self.search_error:
            raise self.search_error
        return [PlaylistRef(id=pid, name=pid) for pid in list(self.playlists)[:limit]]

    def list_tracks(self, token: str, playlist_id: str, limit: int) -> list[Track]:
        self.listings.append((token, playlist_id, limit))
        if self.listing_error:
            raise self.listing_error
        return list(self.playlists[playlist_id])[:limit]


# ── Shared fixtures ─────────────────────────────────────────────────


@pytest.fixture
def fallback_config():
    return AppConfig(use_fallback_only=True)


@pytest.fixture
def provider_config():
    return AppConfig(llm_provider="gemini", llm_api_key="test-key")


@pytest.fixture
def track_a():
    return Track(
        name="Walking on Sunshine",
        artist="Katrina & The Waves",
        image="https://cdn.example/sunshine.jpg",
        play_url="https://open.spotify.com/track/a",
    )


@pytest.fixture
def track_b():
    return Track(
        name="Happy",
        artist="Pharrell Williams",
        image="https://cdn.example/happy.jpg",
        play_url="https://open.spotify.com/track/b",
    )


@pytest.fixture
def auth():
    return InMemoryAuth()


@pytest.fixture
def happy_catalog(track_a, track_b):
    return InMemoryCatalog({"pl-happy": [track_a, track_b]})


@pytest.fixture
def empty_catalog():
    return InMemoryCatalog({})


@pytest.fixture
def unreachable_generator():
    return ScriptedTextGenerator(TextGenerationError("connection refused"))


@pytest.fixture
def rejected_auth():
    return InMemoryAuth(error=CatalogAuthError("invalid_client"))


@pytest.fixture
def failing_catalog():
    return InMemoryCatalog({"pl-x": []}, listing_error=CatalogError("502 Bad Gateway"))


@pytest.fixture
def scripted_generator():
    return ScriptedTextGenerator


@pytest.fixture
def search_failing_catalog():
    return InMemoryCatalog(search_error=CatalogError("503 Service Unavailable"))
