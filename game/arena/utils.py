"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random
from typing import Optional

import numpy as np

from .vector import Vec2


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def distance(a: Vec2, b: Vec2) -> float:
    """Euclidean distance between two points"""
    return Vec2.subtract(a, b).length()


def within_radius(a: Vec2, b: Vec2, radius: float) -> bool:
    """Inclusive radius test (used for hearing)"""
    return distance(a, b) <= radius


def touching(a: Vec2, b: Vec2, radius: float) -> bool:
    """Strict radius test (used for projectile hits)"""
    return distance(a, b) < radius


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the random source injected into the simulation"""
    return random.Random(seed)


def seed_everything(py_seed: Optional[int]):
    """Seed the global random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
