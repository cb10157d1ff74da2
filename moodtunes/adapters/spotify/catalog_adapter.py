"""Spotify adapter for playlist search and track listing."""

import logging

import requests
import spotipy

from moodtunes.domain.errors import CatalogError
from moodtunes.domain.model import UNKNOWN_TRACK_NAME, PlaylistRef, Track
from moodtunes.domain.ports import CatalogPort

PAGE_SIZE = 100

logger = logging.getLogger("moodtunes.spotify.catalog")


def _default_client_factory(token: str, timeout: float) -> spotipy.Spotify:
    return spotipy.Spotify(auth=token, requests_timeout=timeout, retries=0)


class SpotifyCatalogAdapter(CatalogPort):

    def __init__(self, timeout: float = 10.0, client_factory=_default_client_factory):
        self.timeout = timeout
        self._client_factory = client_factory

    def find_playlists(self, token: str, query: str, limit: int) -> list[PlaylistRef]:
        sp = self._client_factory(token, self.timeout)
        try:
            results = sp.search(q=query, type="playlist", limit=limit)
        except (spotipy.SpotifyException, requests.RequestException) as exc:
            raise CatalogError(f"Spotify playlist search failed: {exc}") from exc

        playlists = results.get("playlists") if isinstance(results, dict) else None
        items = playlists.get("items") if isinstance(playlists, dict) else None
        refs = []
        for item in items if isinstance(items, list) else []:
            # Spotify returns null entries for playlists hidden from the search index.
            if not isinstance(item, dict) or not _text(item.get("id")):
                continue
            refs.append(PlaylistRef(id=item["id"], name=_text(item.get("name")) or ""))
        return refs

    def list_tracks(self, token: str, playlist_id: str, limit: int) -> list[Track]:
        sp = self._client_factory(token, self.timeout)
        tracks: list[Track] = []
        offset = 0

        while len(tracks) < limit:
            page_size = min(PAGE_SIZE, limit - len(tracks))
            try:
                results = sp.playlist_items(playlist_id, limit=page_size, offset=offset)
            except (spotipy.SpotifyException, requests.RequestException) as exc:
                raise CatalogError(f"Spotify track listing failed for {playlist_id}: {exc}") from exc
            if not isinstance(results, dict):
                break

            items = results.get("items")
            if not isinstance(items, list) or not items:
                break
            tracks.extend(track_from_playlist_item(item) for item in items)

            offset += len(items)
            # A page without a numeric total is treated as the last one.
            total = results.get("total")
            if not isinstance(total, int) or offset >= total:
                break

        return tracks[:limit]


def _text(value) -> str | None:
    return value if isinstance(value, str) and value else None


def track_from_playlist_item(item) -> Track:
    """Map one playlist item; every missing or mistyped field falls back to its own default."""
    t = item.get("track") if isinstance(item, dict) else None
    if not isinstance(t, dict):
        t = {}

    artists = t.get("artists")
    if not isinstance(artists, list):
        artists = []
    artist = ", ".join(a["name"] for a in artists if isinstance(a, dict) and _text(a.get("name")))

    album = t.get("album")
    images = album.get("images") if isinstance(album, dict) else None
    cover_url = None
    if isinstance(images, list) and images and isinstance(images[0], dict):
        cover_url = _text(images[0].get("url"))

    external_urls = t.get("external_urls")
    play_url = None
    if isinstance(external_urls, dict):
        play_url = _text(external_urls.get("spotify"))

    return Track(
        name=_text(t.get("name")) or UNKNOWN_TRACK_NAME,
        artist=artist,
        image=cover_url,
        play_url=play_url,
    )
