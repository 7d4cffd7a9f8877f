"""Shared test fixtures."""

from __future__ import annotations

import itertools

import numpy as np
import pytest

from realmsketch.models.scene import CanvasSize, SceneObject

CANVAS = CanvasSize(width=600, height=600)

SEED = 1234

MYSTICAL_PROMPT = "mystical crystal portal"
FOREST_PROMPT = "a peaceful mystical forest with crystals"

# 25 words, four element tags, no theme keyword
COMPLEX_GENERIC_PROMPT = " ".join(["portal", "house", "tower", "rock"] + ["quiet"] * 21)


def make_object(
    type: str = "tree",
    x: float = 100.0,
    y: float = 100.0,
    id: str | None = None,
    **kwargs,
) -> SceneObject:
    return SceneObject(
        id=id or f"{type}-{x:g}-{y:g}",
        type=type,
        x=x,
        y=y,
        rotation=kwargs.get("rotation", 0.0),
        scale=kwargs.get("scale", 1.0),
        color=kwargs.get("color", "#22c55e"),
        reasoning=kwargs.get("reasoning"),
    )


def counting_ids(prefix: str = "id"):
    counter = itertools.count()
    return lambda: f"{prefix}-{next(counter)}"


@pytest.fixture
def canvas() -> CanvasSize:
    return CANVAS


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(SEED)
