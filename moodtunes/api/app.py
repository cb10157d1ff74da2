"""HTTP boundary consumed by the front end: mood analysis and playlist lookup."""

import logging
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from moodtunes.api.schemas import AnalyzeMoodIn, AnalyzeMoodOut, ErrorOut, PlaylistOut
from moodtunes.config import AppConfig
from moodtunes.domain.errors import PlaylistResolutionError, ValidationError
from moodtunes.domain.model import ClassificationRequest
from moodtunes.domain.moods import MoodLabel
from moodtunes.usecases.classify_mood import MoodClassifier
from moodtunes.usecases.resolve_playlist import PlaylistResolver

logger = logging.getLogger("moodtunes.api")

ERROR_RESPONSES = {400: {"model": ErrorOut}, 500: {"model": ErrorOut}}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(config: AppConfig, classifier: MoodClassifier, resolver: PlaylistResolver) -> FastAPI:
    app = FastAPI(
        title="moodtunes",
        version="1.0.0",
        description="Classify a mood description and fetch a matching Spotify playlist.",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        logger.info("Rejected malformed request to %s", request.url.path)
        return _error(400, "Mood text is required")

    @app.get("/", response_class=PlainTextResponse)
    def index():
        return "API server is running"

    @app.post("/api/analyze-mood", response_model=AnalyzeMoodOut, responses=ERROR_RESPONSES)
    def analyze_mood(body: Optional[AnalyzeMoodIn] = None):
        try:
            request = ClassificationRequest.from_text(body.moodText if body else None)
        except ValidationError as exc:
            return _error(400, str(exc))

        mood = classifier.classify(request.mood_text)
        return AnalyzeMoodOut(mood=mood)

    @app.get("/api/spotify-playlist", response_model=PlaylistOut, responses=ERROR_RESPONSES)
    def spotify_playlist(mood: Optional[str] = Query(default=None)):
        if not mood or not mood.strip():
            return _error(400, "Mood query is required")
        label = MoodLabel.parse(mood)
        if label is None:
            return _error(400, "Unrecognized mood")

        try:
            playlist = resolver.resolve(label)
        except PlaylistResolutionError:
            return _error(500, "Failed to fetch Spotify playlist")
        return PlaylistOut.from_playlist(playlist)

    return app
