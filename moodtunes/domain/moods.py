"""Closed mood vocabulary and the keyword fallback used when no provider answers."""

from enum import Enum
from typing import Optional


class MoodLabel(str, Enum):
    # Core emotions
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    FEARFUL = "fearful"
    DISGUSTED = "disgusted"
    SURPRISED = "surprised"

    # Positive moods
    ENERGETIC = "energetic"
    CHILL = "chill"
    ROMANTIC = "romantic"
    EXCITED = "excited"
    JOYFUL = "joyful"
    OPTIMISTIC = "optimistic"
    CONFIDENT = "confident"
    PEACEFUL = "peaceful"
    GRATEFUL = "grateful"
    PLAYFUL = "playful"
    HOPEFUL = "hopeful"
    CURIOUS = "curious"
    RELAXED = "relaxed"
    PROUD = "proud"
    SILLY = "silly"
    CONTENT = "content"
    INSPIRED = "inspired"
    MOTIVATED = "motivated"
    AMUSED = "amused"
    DREAMY = "dreamy"
    NOSTALGIC = "nostalgic"
    ECSTATIC = "ecstatic"
    BLISSFUL = "blissful"

    # Negative moods
    JEALOUS = "jealous"
    ANXIOUS = "anxious"
    LONELY = "lonely"
    BORED = "bored"
    FRUSTRATED = "frustrated"
    TIRED = "tired"
    GUILTY = "guilty"
    ASHAMED = "ashamed"
    RESENTFUL = "resentful"
    HEARTBROKEN = "heartbroken"
    OVERWHELMED = "overwhelmed"
    INSECURE = "insecure"
    PESSIMISTIC = "pessimistic"
    IRRITATED = "irritated"
    RESTLESS = "restless"
    MELANCHOLY = "melancholy"
    CONFUSED = "confused"
    HOPELESS = "hopeless"
    STRESSED = "stressed"
    REGRETFUL = "regretful"
    MOODY = "moody"

    # Intense states
    FURIOUS = "furious"
    PANICKED = "panicked"
    DESPERATE = "desperate"
    VENGEFUL = "vengeful"
    SHOCKED = "shocked"
    BETRAYED = "betrayed"
    GRIEVING = "grieving"
    DEVASTATED = "devastated"
    OBSESSED = "obsessed"

    # Gentle / neutral states
    CALM = "calm"
    SERENE = "serene"
    THOUGHTFUL = "thoughtful"
    FOCUSED = "focused"
    INDIFFERENT = "indifferent"
    APATHETIC = "apathetic"
    NEUTRAL = "neutral"
    DAZED = "dazed"
    WISTFUL = "wistful"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["MoodLabel"]:
        """Normalize free text into a label, or None when it is not in the vocabulary."""
        if not isinstance(value, str) or not value:
            return None
        cleaned = value.strip().strip("`\"'.!").strip().lower()
        try:
            return cls(cleaned)
        except ValueError:
            return None


NEUTRAL_MOOD = MoodLabel.NEUTRAL

# Order matters: the first label with a matching substring wins.
MOOD_KEYWORDS: tuple[tuple[MoodLabel, tuple[str, ...]], ...] = (
    (MoodLabel.HAPPY, ("happy", "joy", "cheer", "delight", "ecstatic", "bliss")),
    (MoodLabel.SAD, ("sad", "down", "blue", "mourn", "melancholy", "heartbroken")),
    (MoodLabel.ANGRY, ("angry", "mad", "furious", "irritated", "resent")),
    (MoodLabel.FEARFUL, ("fear", "scared", "panicked", "terrified", "anxious")),
    (MoodLabel.DISGUSTED, ("disgust", "gross", "nausea")),
    (MoodLabel.SURPRISED, ("surprise", "shocked", "astonished")),
    (MoodLabel.ENERGETIC, ("energy", "energetic", "excited", "vigorous", "lively")),
    (MoodLabel.CHILL, ("relax", "chill", "calm", "serene", "peaceful")),
    (MoodLabel.ROMANTIC, ("love", "romant", "affection", "enchanted")),
    (MoodLabel.JEALOUS, ("jeal", "envy", "envious")),
    (MoodLabel.ANXIOUS, ("anxi", "nervous", "worried")),
    (MoodLabel.CALM, ("calm", "serene", "tranquil")),
    (MoodLabel.NOSTALGIC, ("nostalg", "memory", "reminisc")),
    (MoodLabel.HOPEFUL, ("hopeful", "optimistic")),
    (MoodLabel.PLAYFUL, ("playful", "silly", "amused")),
    (MoodLabel.FOCUSED, ("focus", "concentrate", "determined")),
    (MoodLabel.TIRED, ("tired", "sleepy", "exhausted")),
)


def classify_by_keywords(text: Optional[str]) -> MoodLabel:
    """Deterministic, network-free classification.

    Lower-cases the input and walks MOOD_KEYWORDS in declaration order. The
    first label whose substrings appear anywhere in the text is returned;
    otherwise the neutral label.
    """
    lowered = (text or "").lower()
    for label, keywords in MOOD_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return label
    return NEUTRAL_MOOD


# ── Provider prompt ────────────────────────────────────────────────

EXAMPLE_MOODS = (
    MoodLabel.HAPPY,
    MoodLabel.SAD,
    MoodLabel.ENERGETIC,
    MoodLabel.CHILL,
    MoodLabel.ROMANTIC,
    MoodLabel.JEALOUS,
    MoodLabel.ANXIOUS,
    MoodLabel.CALM,
)

MOOD_PROMPT = (
    "Analyze this mood description and respond with one word only describing the mood "
    "(e.g., {examples}, etc.). Text: \"{text}\""
)


def build_mood_prompt(mood_text: str) -> str:
    examples = ", ".join(m.value for m in EXAMPLE_MOODS)
    return MOOD_PROMPT.format(examples=examples, text=mood_text)


def parse_mood_label(text) -> Optional[MoodLabel]:
    """Map a provider answer onto the vocabulary, or None when it is not a known mood."""
    if not isinstance(text, str):
        return None
    cleaned = text.strip()
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines).strip()
    return MoodLabel.parse(cleaned)
