"""Error types shared across the pipelines and the HTTP boundary."""


class MoodTunesError(Exception):
    """Base class for every error raised by moodtunes."""


class ValidationError(MoodTunesError):
    """Caller input rejected before it reaches a pipeline."""


class ConfigurationError(MoodTunesError):
    """Start-up configuration is missing or invalid."""


class TextGenerationError(MoodTunesError):
    """The text-generation provider failed or answered with an unusable body."""


class CatalogError(MoodTunesError):
    """A catalog search or track listing call failed."""


class CatalogAuthError(CatalogError):
    """The client-credentials exchange failed or credentials are missing."""


class PlaylistResolutionError(MoodTunesError):
    """A mood could not be resolved into a playlist."""
