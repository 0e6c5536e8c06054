"""Shared random source used by the ``random`` vector constructors.

The generator is created lazily and seeded once, either from the
configured ``RANDOM_SEED`` or from the high resolution clock. Tests and
callers that need reproducible output call :func:`seed`, or inject their
own :class:`random.Random` through :func:`set_rng` or the ``rng``
argument of the constructors.

A single :class:`random.Random` is not meant to be shared between
threads that require independent streams; hand each thread its own.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Optional

from .config import settings
from .utils.math_utils import TWO_PI

logger = logging.getLogger(__name__)

_RNG: Optional[random.Random] = None


def get_rng() -> random.Random:
    """Return the shared generator, seeding it on first use."""
    global _RNG
    if _RNG is None:
        initial_seed = settings.RANDOM_SEED
        if initial_seed is None:
            initial_seed = time.time_ns()
        _RNG = random.Random(initial_seed)
        logger.debug("Random source seeded with %s", initial_seed)
    return _RNG


def seed(value: int) -> random.Random:
    """Re-seed the shared generator for reproducible output."""
    rng = get_rng()
    rng.seed(value)
    logger.debug("Random source re-seeded with %s", value)
    return rng


def set_rng(rng: Optional[random.Random]) -> None:
    """Replace the shared generator; ``None`` restores lazy seeding."""
    global _RNG
    _RNG = rng


def random_angle(rng: Optional[random.Random] = None) -> float:
    """Draw an angle uniformly from ``[0, 2π)``."""
    source = rng if rng is not None else get_rng()
    return source.random() * TWO_PI


__all__ = ["get_rng", "random_angle", "seed", "set_rng"]
