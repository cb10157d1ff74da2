"""Bounded context: Playlist resolution

Business rules for turning a mood label into an ordered track list.
"""

import pytest

from moodtunes.domain.errors import CatalogError, PlaylistResolutionError
from moodtunes.domain.moods import MoodLabel
from moodtunes.usecases.resolve_playlist import PlaylistResolver, build_search_query


class TestSuccessfulResolution:
    def test_happy_mood_returns_both_tracks_in_catalog_order(self, auth, happy_catalog, track_a, track_b):
        resolver = PlaylistResolver(auth, happy_catalog)

        playlist = resolver.resolve(MoodLabel.HAPPY)

        assert list(playlist) == [track_a, track_b]
        assert len(playlist) == 2
        assert playlist.mood == MoodLabel.HAPPY
        assert playlist.source.id == "pl-happy"

    def test_search_asks_for_a_single_mood_playlist(self, auth, happy_catalog):
        PlaylistResolver(auth, happy_catalog).resolve(MoodLabel.HAPPY)

        assert happy_catalog.searches == [("token-123", "happy playlist", 1)]

    def test_track_listing_uses_the_same_token_and_limit(self, auth, happy_catalog):
        PlaylistResolver(auth, happy_catalog, track_limit=25).resolve(MoodLabel.HAPPY)

        assert happy_catalog.listings == [("token-123", "pl-happy", 25)]

    def test_every_resolution_exchanges_credentials(self, auth, happy_catalog):
        resolver = PlaylistResolver(auth, happy_catalog)

        resolver.resolve(MoodLabel.HAPPY)
        resolver.resolve(MoodLabel.HAPPY)

        assert auth.exchanges == 2


class TestZeroResults:
    def test_no_candidates_is_an_empty_playlist(self, auth, empty_catalog):
        playlist = PlaylistResolver(auth, empty_catalog).resolve(MoodLabel.WISTFUL)

        assert playlist.is_empty
        assert list(playlist) == []
        assert playlist.source is None
        assert empty_catalog.listings == []


class TestFailures:
    def test_credential_failure_is_a_resolution_error(self, rejected_auth, happy_catalog):
        resolver = PlaylistResolver(rejected_auth, happy_catalog)

        with pytest.raises(PlaylistResolutionError, match="Failed to fetch playlist"):
            resolver.resolve(MoodLabel.HAPPY)
        assert happy_catalog.searches == []

    def test_search_failure_is_a_resolution_error(self, auth, search_failing_catalog):
        with pytest.raises(PlaylistResolutionError):
            PlaylistResolver(auth, search_failing_catalog).resolve(MoodLabel.SAD)

    def test_listing_failure_returns_no_partial_playlist(self, auth, failing_catalog):
        with pytest.raises(PlaylistResolutionError) as excinfo:
            PlaylistResolver(auth, failing_catalog).resolve(MoodLabel.SAD)

        assert isinstance(excinfo.value.__cause__, CatalogError)

    def test_failure_is_distinguishable_from_zero_results(self, rejected_auth, auth, empty_catalog):
        assert PlaylistResolver(auth, empty_catalog).resolve(MoodLabel.CALM).is_empty

        with pytest.raises(PlaylistResolutionError):
            PlaylistResolver(rejected_auth, empty_catalog).resolve(MoodLabel.CALM)


@pytest.mark.parametrize(
    "mood, query",
    [(MoodLabel.HAPPY, "happy playlist"), (MoodLabel.HEARTBROKEN, "heartbroken playlist")],
)
def test_search_query(mood, query):
    assert build_search_query(mood) == query
