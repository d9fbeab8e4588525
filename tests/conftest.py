import random

import pytest

from game.arena.config import ENEMY_ARCHETYPES, PLAYER_WEAPONS
from game.arena.enemy import Enemy
from game.arena.player import Player
from game.arena.vector import Vec2
from game.arena.weapons import Weapon


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_enemy(rng):
    """Enemy factory with a ready weapon and a fixed random source."""
    def _create(pos=(100, 100), waypoints=None, archetype=1, **kwargs):
        position = Vec2(*pos)
        if waypoints is None:
            waypoints = [pos]
        kwargs.setdefault("initial_cooldown", 0.0)
        enemy_rng = kwargs.pop("rng", rng)
        return Enemy(
            position,
            [Vec2(x, y) for x, y in waypoints],
            Weapon.from_config(ENEMY_ARCHETYPES[archetype]),
            enemy_rng,
            **kwargs,
        )
    return _create


@pytest.fixture
def make_player():
    def _create(pos=(400, 300), **kwargs):
        weapons = [Weapon.from_config(w) for w in PLAYER_WEAPONS]
        return Player(Vec2(*pos), weapons, **kwargs)
    return _create
