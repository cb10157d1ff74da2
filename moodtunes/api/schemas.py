from typing import List, Optional

from pydantic import BaseModel

from moodtunes.domain.model import Playlist, Track
from moodtunes.domain.moods import MoodLabel


class AnalyzeMoodIn(BaseModel):
    moodText: Optional[str] = None


class AnalyzeMoodOut(BaseModel):
    mood: MoodLabel


class TrackOut(BaseModel):
    name: str
    artist: str
    image: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_track(cls, track: Track) -> "TrackOut":
        return cls(**track.to_dict())


class PlaylistOut(BaseModel):
    tracks: List[TrackOut]

    @classmethod
    def from_playlist(cls, playlist: Playlist) -> "PlaylistOut":
        return cls(tracks=[TrackOut.from_track(t) for t in playlist])


class ErrorOut(BaseModel):
    error: str
