"""Tests for the shared random source behind the random constructors."""

from __future__ import annotations

import math
import random

import pytest

from geovec import random_source
from geovec.vector2 import Vector2
from geovec.vector3 import Vector3


@pytest.fixture(autouse=True)
def _reset_shared_rng():
    random_source.set_rng(None)
    yield
    random_source.set_rng(None)


def test_seed_makes_random_vectors_reproducible():
    random_source.seed(1234)
    first = [Vector3.random(), Vector2.random(3.0)]
    random_source.seed(1234)
    second = [Vector3.random(), Vector2.random(3.0)]
    assert first == second


def test_injected_generator_is_used():
    random_source.set_rng(random.Random(99))
    shared = Vector3.random()
    explicit = Vector3.random(rng=random.Random(99))
    assert shared == explicit


def test_explicit_rng_does_not_consume_shared_stream():
    random_source.seed(5)
    expected = random_source.random_angle()
    random_source.seed(5)
    Vector2.random(rng=random.Random(1))
    assert random_source.random_angle() == expected


def test_random_angle_range():
    rng = random.Random(0)
    angles = [random_source.random_angle(rng) for _ in range(500)]
    assert all(0.0 <= angle < 2 * math.pi for angle in angles)


def test_shared_generator_created_once():
    assert random_source.get_rng() is random_source.get_rng()


def test_configured_seed_used_on_first_use(monkeypatch):
    monkeypatch.setattr(random_source.settings, "RANDOM_SEED", 77)
    first = random_source.random_angle()
    random_source.set_rng(None)
    assert random_source.random_angle() == first
    assert first == random.Random(77).random() * 2 * math.pi
