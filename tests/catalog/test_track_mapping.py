"""Spotify playlist items map to Track records field by field."""

import pytest

from moodtunes.adapters.spotify.catalog_adapter import track_from_playlist_item
from moodtunes.domain.model import Track


def test_complete_item_maps_every_field():
    item = {
        "track": {
            "name": "Risk It All",
            "artists": [{"name": "Bruno Mars"}, {"name": "Anderson .Paak"}],
            "album": {"images": [{"url": "https://cdn.example/cover.jpg"}, {"url": "https://cdn.example/small.jpg"}]},
            "external_urls": {"spotify": "https://open.spotify.com/track/1"},
        }
    }

    track = track_from_playlist_item(item)

    assert track == Track(
        name="Risk It All",
        artist="Bruno Mars, Anderson .Paak",
        image="https://cdn.example/cover.jpg",
        play_url="https://open.spotify.com/track/1",
    )


def test_missing_cover_artists_and_link_keep_the_entry():
    track = track_from_playlist_item({"track": {"name": "Bare"}})

    assert track.name == "Bare"
    assert track.image is None
    assert track.artist == ""
    assert track.play_url is None


def test_missing_name_becomes_unknown():
    track = track_from_playlist_item({"track": {"artists": [{"name": "Someone"}]}})

    assert track.name == "Unknown"
    assert track.artist == "Someone"


@pytest.mark.parametrize("item", [None, {}, {"track": None}, {"track": "local-file"}, "garbage"])
def test_unusable_items_map_to_defaults(item):
    assert track_from_playlist_item(item) == Track()


@pytest.mark.parametrize(
    "track_payload",
    [
        {"name": "X", "artists": None, "album": None, "external_urls": None},
        {"name": "X", "artists": "nope", "album": {"images": "nope"}, "external_urls": []},
        {"name": "X", "artists": [None, {"id": "a1"}], "album": {"images": [None]}, "external_urls": {}},
        {"name": "X", "album": {"images": []}, "external_urls": {"spotify": ""}},
        {"name": "X", "artists": [{"name": 5}, {"name": ["A"]}], "album": {"images": [{"url": 7}]}, "external_urls": {"spotify": {"href": "x"}}},
    ],
)
def test_malformed_fields_degrade_independently(track_payload):
    track = track_from_playlist_item({"track": track_payload})

    assert track == Track(name="X", artist="", image=None, play_url=None)


def test_non_text_artist_names_are_skipped():
    track = track_from_playlist_item({"track": {"name": "X", "artists": [{"name": 5}, {"name": "B"}, {"name": None}]}})

    assert track == Track(name="X", artist="B")


@pytest.mark.parametrize("name", [5, ["Song"], {"title": "Song"}, ""])
def test_non_text_name_becomes_unknown(name):
    assert track_from_playlist_item({"track": {"name": name}}).name == "Unknown"


def test_wire_format_uses_url_key():
    track = Track(name="Song", artist="Band", image=None, play_url="https://open.spotify.com/track/9")

    assert track.to_dict() == {
        "name": "Song",
        "artist": "Band",
        "image": None,
        "url": "https://open.spotify.com/track/9",
    }
