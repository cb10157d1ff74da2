"""Wire adapters and use cases together from a single AppConfig."""

import logging

from fastapi import FastAPI

from moodtunes.adapters.classifier import create_text_generator
from moodtunes.adapters.spotify.auth import SpotifyClientCredentialsAuth
from moodtunes.adapters.spotify.catalog_adapter import SpotifyCatalogAdapter
from moodtunes.api.app import create_app
from moodtunes.config import AppConfig
from moodtunes.usecases.classify_mood import MoodClassifier
from moodtunes.usecases.resolve_playlist import PlaylistResolver

logger = logging.getLogger("moodtunes.bootstrap")


def build_classifier(config: AppConfig) -> MoodClassifier:
    generator = None
    if config.has_api_key and not config.use_fallback_only:
        generator = create_text_generator(
            config.llm_provider,
            api_key=config.llm_api_key,
            model=config.model,
            timeout=config.request_timeout,
        )
    logger.info(
        "Mood classifier ready (provider=%s, fallback_only=%s)",
        config.llm_provider if generator else "keywords",
        generator is None,
    )
    return MoodClassifier(config, generator)


def build_resolver(config: AppConfig) -> PlaylistResolver:
    if not config.has_spotify_credentials:
        logger.warning("Spotify client ID/secret not configured; playlist lookups will fail")
    auth = SpotifyClientCredentialsAuth(
        config.spotify_client_id,
        config.spotify_client_secret,
        timeout=config.request_timeout,
    )
    catalog = SpotifyCatalogAdapter(timeout=config.request_timeout)
    return PlaylistResolver(auth, catalog, track_limit=config.playlist_track_limit)


def build_app(config: AppConfig) -> FastAPI:
    return create_app(config, build_classifier(config), build_resolver(config))
