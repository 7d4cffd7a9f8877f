"""Keyword classifier: prompt text -> theme, mood, elements and complexity.

Every category is an ordered list of (tag, keywords) groups matched by
case-insensitive substring tests. Theme and mood take the first matching
group; elements record every matching group.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class Theme(str, enum.Enum):
    FOREST = "forest"
    CYBERPUNK = "cyberpunk"
    MYSTICAL = "mystical"
    AQUATIC = "aquatic"
    VOLCANIC = "volcanic"
    GENERIC = "generic"


class Mood(str, enum.Enum):
    NEUTRAL = "neutral"
    DARK = "dark"
    BRIGHT = "bright"
    MYSTERIOUS = "mysterious"


class Complexity(enum.IntEnum):
    SIMPLE = 0
    MEDIUM = 1
    COMPLEX = 2

    @property
    def label(self) -> str:
        return self.name.lower()


KeywordGroups = tuple[tuple[str, tuple[str, ...]], ...]

# Priority order matters: first match wins.
THEME_KEYWORDS: KeywordGroups = (
    (Theme.FOREST.value, ("forest", "nature", "tree")),
    (Theme.CYBERPUNK.value, ("cyber", "neon", "futuristic")),
    (Theme.MYSTICAL.value, ("mystical", "magic", "floating", "sky", "crystal")),
    (Theme.AQUATIC.value, ("water", "ocean", "sea", "lake")),
    (Theme.VOLCANIC.value, ("fire", "lava", "volcano")),
)

# Independent: every matching group is recorded, in this order.
ELEMENT_KEYWORDS: KeywordGroups = (
    ("tree", ("tree", "forest", "woodland")),
    ("crystal", ("crystal", "gem", "magical", "glowing")),
    ("portal", ("portal", "gateway", "teleport", "entrance")),
    ("house", ("house", "building", "structure", "home")),
    ("tower", ("tower", "skyscraper", "tall", "spire")),
    ("rock", ("rock", "stone", "boulder", "mountain")),
)

MOOD_KEYWORDS: KeywordGroups = (
    (Mood.DARK.value, ("dark", "scary", "evil", "night")),
    (Mood.BRIGHT.value, ("bright", "happy", "peaceful")),
    (Mood.MYSTERIOUS.value, ("mysterious", "mystical")),
)

MEDIUM_WORD_COUNT = 10
COMPLEX_WORD_COUNT = 20
COMPLEX_ELEMENT_COUNT = 3


@dataclass(frozen=True)
class PromptAnalysis:
    """Classification of a single prompt. Created and discarded per request."""

    theme: Theme = Theme.GENERIC
    mood: Mood = Mood.NEUTRAL
    elements: tuple[str, ...] = ()
    complexity: Complexity = Complexity.SIMPLE
    word_count: int = 0

    def to_dict(self) -> dict:
        return {
            "theme": self.theme.value,
            "mood": self.mood.value,
            "elements": list(self.elements),
            "complexity": self.complexity.label,
            "word_count": self.word_count,
        }


def _first_match(text: str, groups: KeywordGroups) -> str | None:
    for tag, keywords in groups:
        if any(keyword in text for keyword in keywords):
            return tag
    return None


def _all_matches(text: str, groups: KeywordGroups) -> tuple[str, ...]:
    return tuple(tag for tag, keywords in groups if any(keyword in text for keyword in keywords))


def _complexity(word_count: int, element_count: int) -> Complexity:
    if word_count > COMPLEX_WORD_COUNT or element_count > COMPLEX_ELEMENT_COUNT:
        return Complexity.COMPLEX
    if word_count > MEDIUM_WORD_COUNT:
        return Complexity.MEDIUM
    return Complexity.SIMPLE


def classify(prompt: str) -> PromptAnalysis:
    """Classify a free-text prompt. Pure and deterministic; empty input is valid."""
    text = (prompt or "").lower()
    word_count = len(text.split())

    theme = _first_match(text, THEME_KEYWORDS)
    mood = _first_match(text, MOOD_KEYWORDS)
    elements = _all_matches(text, ELEMENT_KEYWORDS)

    analysis = PromptAnalysis(
        theme=Theme(theme) if theme else Theme.GENERIC,
        mood=Mood(mood) if mood else Mood.NEUTRAL,
        elements=elements,
        complexity=_complexity(word_count, len(elements)),
        word_count=word_count,
    )
    logger.debug("Classified prompt: %s", analysis.to_dict())
    return analysis
