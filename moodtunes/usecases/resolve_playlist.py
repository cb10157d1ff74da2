"""Use case: resolve a mood label into a playlist of catalog tracks."""

import logging
import time

from moodtunes.domain.errors import CatalogError, PlaylistResolutionError
from moodtunes.domain.model import Playlist
from moodtunes.domain.moods import MoodLabel
from moodtunes.domain.ports import CatalogAuthPort, CatalogPort

SEARCH_LIMIT = 1

logger = logging.getLogger("moodtunes.resolver")


def build_search_query(mood: MoodLabel) -> str:
    return f"{mood.value} playlist"


class PlaylistResolver:

    def __init__(self, auth: CatalogAuthPort, catalog: CatalogPort, track_limit: int = 100):
        self.auth = auth
        self.catalog = catalog
        self.track_limit = track_limit

    def resolve(self, mood: MoodLabel) -> Playlist:
        """Search the catalog for "<mood> playlist" and list the top hit's tracks.

        Zero search hits is a successful, empty playlist. Any auth or catalog
        failure raises PlaylistResolutionError; partial results are discarded.
        """
        started_at = time.perf_counter()
        try:
            token = self.auth.exchange_client_credentials()
            candidates = self.catalog.find_playlists(token, build_search_query(mood), SEARCH_LIMIT)
            if not candidates:
                logger.info("No playlist found (mood=%s)", mood)
                return Playlist(mood=mood)

            source = candidates[0]
            tracks = self.catalog.list_tracks(token, source.id, self.track_limit)
        except CatalogError as exc:
            logger.error("Playlist resolution failed (mood=%s): %s", mood, exc)
            raise PlaylistResolutionError("Failed to fetch playlist") from exc

        logger.info(
            "Playlist resolved (mood=%s, playlist=%s, tracks=%s, duration=%.1fs)",
            mood,
            source.id,
            len(tracks),
            time.perf_counter() - started_at,
        )
        return Playlist(mood=mood, tracks=tuple(tracks), source=source)
