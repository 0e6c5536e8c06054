"""Tests for conversions to and from pygame vectors."""

from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")
from pygame.math import Vector2 as PygameVector2
from pygame.math import Vector3 as PygameVector3

from geovec.interop import from_pygame, to_pygame
from geovec.vector2 import Vector2
from geovec.vector3 import Vector3


def test_vector3_round_trip():
    original = Vector3(1.5, -2.0, 3.25)
    converted = to_pygame(original)
    assert isinstance(converted, PygameVector3)
    assert tuple(converted) == pytest.approx(original.to_tuple())
    back = from_pygame(converted)
    assert isinstance(back, Vector3)
    assert back == original


def test_vector2_round_trip():
    original = Vector2(-0.5, 8.0)
    converted = to_pygame(original)
    assert isinstance(converted, PygameVector2)
    assert from_pygame(converted) == original


def test_converted_vector_is_independent():
    original = Vector2(1.0, 2.0)
    converted = to_pygame(original)
    converted.x = 10.0
    assert original.x == 1.0


def test_rejects_unknown_types():
    with pytest.raises(TypeError):
        to_pygame((1.0, 2.0))
    with pytest.raises(TypeError):
        from_pygame([1.0, 2.0, 3.0])
