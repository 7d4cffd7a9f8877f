"""Tests for the fallback object synthesizer."""

import numpy as np
import pytest

from realmsketch.engine.classifier import Complexity, Mood, PromptAnalysis, Theme
from realmsketch.engine.config import EngineConfig
from realmsketch.engine.synthesizer import (
    DEFAULT_COLOR,
    color_for,
    elaborate,
    new_object_id,
    synthesize,
)
from realmsketch.models.scene import CanvasSize
from tests.conftest import CANVAS, SEED, counting_ids


def _analysis(*elements, mood=Mood.NEUTRAL, complexity=Complexity.SIMPLE):
    return PromptAnalysis(theme=Theme.GENERIC, mood=mood, elements=tuple(elements), complexity=complexity)


def test_empty_elements_default_to_tree_and_rock(rng):
    objects = synthesize(_analysis(), CANVAS, rng)
    assert [o.type for o in objects] == ["tree", "rock"]


def test_radial_placement(rng):
    objects = synthesize(_analysis("tree", "crystal", "portal", "house"), CANVAS, rng)
    # radius = 0.2 * 600 = 120 around (300, 300)
    expected = [(420, 300), (300, 420), (180, 300), (300, 180)]
    for obj, (x, y) in zip(objects, expected):
        assert obj.x == pytest.approx(x)
        assert obj.y == pytest.approx(y)


def test_single_element_keeps_offset(rng):
    (obj,) = synthesize(_analysis("portal"), CANVAS, rng)
    assert (obj.x, obj.y) == pytest.approx((420, 300))


def test_random_attributes_in_range(rng):
    objects = synthesize(_analysis("tree", "crystal", "portal", "house", "tower", "rock"), CANVAS, rng)
    for obj in objects:
        assert 0 <= obj.rotation < 360
        assert 0.8 <= obj.scale < 1.2
        assert obj.reasoning == f"Placed {obj.type} based on prompt analysis"


def test_positions_clamped_to_margin(rng):
    tiny = CanvasSize(width=60, height=60)
    (obj,) = synthesize(_analysis("tree"), tiny, rng)
    # 30 + 12 = 42 is past the 20-unit margin
    assert obj.x == pytest.approx(40)
    assert obj.y == pytest.approx(30)


def test_seeded_generators_reproduce_output():
    analysis = _analysis("tree", "rock", "tower")
    a = synthesize(analysis, CANVAS, np.random.default_rng(SEED), id_factory=counting_ids())
    b = synthesize(analysis, CANVAS, np.random.default_rng(SEED), id_factory=counting_ids())
    assert [o.model_dump() for o in a] == [o.model_dump() for o in b]


def test_ids_are_unique(rng):
    objects = synthesize(_analysis("tree", "crystal", "portal", "house", "tower", "rock"), CANVAS, rng)
    ids = [o.id for o in objects]
    assert len(set(ids)) == len(ids)
    assert new_object_id() != new_object_id()


def test_mood_colors():
    assert color_for("tree", Mood.DARK) == "#1f4d1f"
    assert color_for("tree", Mood.BRIGHT) == "#22c55e"
    assert color_for("crystal", Mood.DARK) == "#4c1d95"
    assert color_for("crystal", Mood.MYSTERIOUS) == "#06b6d4"
    assert color_for("portal", Mood.DARK) == color_for("portal", Mood.NEUTRAL) == "#8b5cf6"
    assert color_for("dragon", Mood.DARK) == DEFAULT_COLOR


def test_synthesized_colors_follow_mood(rng):
    objects = synthesize(_analysis("tree", "house", mood=Mood.DARK), CANVAS, rng)
    assert [o.color for o in objects] == ["#1f4d1f", "#8b4513"]


def test_no_elaboration_unless_complex(rng):
    assert elaborate(_analysis("tree"), CANVAS, rng) == []
    assert elaborate(_analysis("tree", complexity=Complexity.MEDIUM), CANVAS, rng) == []


def test_elaboration_for_complex(rng):
    extras = elaborate(_analysis("tree", complexity=Complexity.COMPLEX, mood=Mood.DARK), CANVAS, rng)
    assert [o.type for o in extras] == ["crystal", "rock"]
    for obj in extras:
        assert obj.reasoning == "Added for scene complexity"
        assert 20 <= obj.x <= 580
        assert 20 <= obj.y <= 580
        assert 0.6 <= obj.scale < 0.9
    assert extras[0].color == "#4c1d95"


def test_elaboration_types_are_configurable(rng):
    config = EngineConfig(elaboration_types=("tower",))
    extras = elaborate(_analysis(complexity=Complexity.COMPLEX), CANVAS, rng, config)
    assert [o.type for o in extras] == ["tower"]
