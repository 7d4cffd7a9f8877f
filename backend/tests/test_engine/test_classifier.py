"""Tests for the keyword classifier."""

import dataclasses

import pytest

from realmsketch.engine.classifier import Complexity, Mood, PromptAnalysis, Theme, classify
from tests.conftest import COMPLEX_GENERIC_PROMPT, FOREST_PROMPT, MYSTICAL_PROMPT


@pytest.mark.parametrize("prompt", ["", "   ", "\n\t"])
def test_blank_prompt_is_generic(prompt):
    analysis = classify(prompt)
    assert analysis == PromptAnalysis()
    assert analysis.theme == Theme.GENERIC
    assert analysis.mood == Mood.NEUTRAL
    assert analysis.elements == ()
    assert analysis.complexity == Complexity.SIMPLE
    assert analysis.word_count == 0


def test_forest_outranks_mystical():
    """Fixed priority: a forest keyword wins even when mystical keywords are present."""
    analysis = classify(FOREST_PROMPT)
    assert analysis.theme == Theme.FOREST
    assert analysis.mood == Mood.BRIGHT  # "peaceful" outranks "mystical"
    assert analysis.elements == ("tree", "crystal")
    assert analysis.complexity == Complexity.SIMPLE


def test_mystical_prompt():
    analysis = classify(MYSTICAL_PROMPT)
    assert analysis.theme == Theme.MYSTICAL
    assert analysis.mood == Mood.MYSTERIOUS
    assert set(analysis.elements) == {"crystal", "portal"}


@pytest.mark.parametrize(
    "prompt,theme",
    [
        ("A NEON alley", Theme.CYBERPUNK),
        ("futuristic plaza", Theme.CYBERPUNK),
        ("floating islands", Theme.MYSTICAL),
        ("a calm lake", Theme.AQUATIC),
        ("lava fields", Theme.VOLCANIC),
        ("Deep FOREST", Theme.FOREST),
        ("an empty plain", Theme.GENERIC),
    ],
)
def test_theme_detection(prompt, theme):
    assert classify(prompt).theme == theme


def test_mood_priority():
    assert classify("dark and bright").mood == Mood.DARK
    assert classify("happy mysterious grove").mood == Mood.BRIGHT
    assert classify("a mysterious cave").mood == Mood.MYSTERIOUS
    assert classify("a cave").mood == Mood.NEUTRAL


def test_all_elements_recorded_and_deduplicated():
    analysis = classify("tree forest woodland with a stone tower and a gateway")
    assert analysis.elements == ("tree", "portal", "tower", "rock")


def test_complexity_by_word_count():
    ten = " ".join(["quiet"] * 10)
    eleven = " ".join(["quiet"] * 11)
    twenty_one = " ".join(["quiet"] * 21)
    assert classify(ten).complexity == Complexity.SIMPLE
    assert classify(eleven).complexity == Complexity.MEDIUM
    assert classify(twenty_one).complexity == Complexity.COMPLEX


def test_complexity_by_element_count():
    analysis = classify("tree crystal portal house")
    assert analysis.word_count == 4
    assert len(analysis.elements) == 4
    assert analysis.complexity == Complexity.COMPLEX


def test_complex_generic_prompt():
    analysis = classify(COMPLEX_GENERIC_PROMPT)
    assert analysis.word_count == 25
    assert analysis.theme == Theme.GENERIC
    assert analysis.elements == ("portal", "house", "tower", "rock")
    assert analysis.complexity == Complexity.COMPLEX


def test_classification_is_deterministic():
    prompt = "A dark neon city with tall towers and a glowing portal entrance"
    assert classify(prompt) == classify(prompt)
    assert classify(prompt).to_dict() == classify(prompt).to_dict()


def test_analysis_is_frozen():
    analysis = classify("forest")
    with pytest.raises(dataclasses.FrozenInstanceError):
        analysis.theme = Theme.GENERIC  # type: ignore[misc]


def test_to_dict():
    data = classify(MYSTICAL_PROMPT).to_dict()
    assert data == {
        "theme": "mystical",
        "mood": "mysterious",
        "elements": ["crystal", "portal"],
        "complexity": "simple",
        "word_count": 3,
    }
