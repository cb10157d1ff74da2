"""Pure domain objects — no framework dependency."""

from dataclasses import dataclass
from typing import Iterator, Optional

from moodtunes.domain.errors import ValidationError
from moodtunes.domain.moods import MoodLabel

UNKNOWN_TRACK_NAME = "Unknown"


@dataclass(frozen=True)
class ClassificationRequest:
    mood_text: str

    @classmethod
    def from_text(cls, value: Optional[str]) -> "ClassificationRequest":
        if value is None or not str(value).strip():
            raise ValidationError("Mood text is required")
        return cls(mood_text=str(value))


@dataclass(frozen=True)
class ClassificationOutcome:
    """Result of asking the external provider; label is None when we must degrade."""

    label: Optional[MoodLabel]
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.label is not None

    @classmethod
    def success(cls, label: MoodLabel) -> "ClassificationOutcome":
        return cls(label=label)

    @classmethod
    def degraded(cls, reason: str) -> "ClassificationOutcome":
        return cls(label=None, reason=reason)


@dataclass(frozen=True)
class Track:
    name: str = UNKNOWN_TRACK_NAME
    artist: str = ""
    image: Optional[str] = None
    play_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "artist": self.artist,
            "image": self.image,
            "url": self.play_url,
        }


@dataclass(frozen=True)
class PlaylistRef:
    id: str
    name: str = ""


@dataclass(frozen=True)
class Playlist:
    mood: MoodLabel
    tracks: tuple[Track, ...] = ()
    source: Optional[PlaylistRef] = None

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)

    def __len__(self) -> int:
        return len(self.tracks)

    @property
    def is_empty(self) -> bool:
        return not self.tracks
