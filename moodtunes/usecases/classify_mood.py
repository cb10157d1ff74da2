"""Use case: classify free-form mood text into the closed mood vocabulary."""

import logging

from moodtunes.config import AppConfig
from moodtunes.domain.errors import TextGenerationError
from moodtunes.domain.model import ClassificationOutcome
from moodtunes.domain.moods import MoodLabel, build_mood_prompt, classify_by_keywords, parse_mood_label
from moodtunes.domain.ports import TextGenerationPort

logger = logging.getLogger("moodtunes.classifier")


class MoodClassifier:
    """Turns arbitrary text into a MoodLabel. Never raises for string input.

    The external provider is consulted only when an API key is configured and
    fallback-only mode is off. Any provider failure or out-of-vocabulary answer
    degrades to keyword matching on the same text.
    """

    def __init__(self, config: AppConfig, generator: TextGenerationPort | None = None):
        self.config = config
        self.generator = generator

    @property
    def uses_fallback_only(self) -> bool:
        return self.config.use_fallback_only or not self.config.has_api_key or self.generator is None

    def classify(self, mood_text: str) -> MoodLabel:
        if self.uses_fallback_only:
            label = classify_by_keywords(mood_text)
            logger.info("Fallback classification (mood=%s)", label)
            return label

        outcome = self.classify_externally(mood_text)
        if outcome.ok:
            logger.info("Provider classification (mood=%s)", outcome.label)
            return outcome.label

        label = classify_by_keywords(mood_text)
        logger.warning("Classification degraded to keywords (reason=%s, mood=%s)", outcome.reason, label)
        return label

    def classify_externally(self, mood_text: str) -> ClassificationOutcome:
        try:
            answer = self.generator.generate(build_mood_prompt(mood_text))
        except TextGenerationError as exc:
            return ClassificationOutcome.degraded(str(exc))

        label = parse_mood_label(answer)
        if label is None:
            return ClassificationOutcome.degraded(f"unrecognized mood from provider: {answer!r}")
        return ClassificationOutcome.success(label)
