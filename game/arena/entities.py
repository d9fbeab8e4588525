"""
Game entities: factions, AI states, noise events and projectiles
"""

from __future__ import annotations
from enum import Enum

from .config import ARENA_CONFIG
from .vector import Vec2


class Faction(Enum):
    """Who fired a shot / made a noise"""
    PLAYER = "player"
    ENEMY = "enemy"


class AIState(Enum):
    """Enemy behaviour states. DOWN is terminal."""
    PATROL = "patrol"
    ALERT = "alert"
    ATTACK = "attack"
    DOWN = "down"


class NoiseEvent:
    """Audible cue left where a weapon fired"""

    def __init__(self, position: Vec2, radius: float, source: Faction,
                 time: float = ARENA_CONFIG["noise_lifetime"]):
        self.position = position
        self.radius = radius
        self.source = source
        self.time = time

    def update(self, dt: float):
        self.time -= dt

    @property
    def active(self) -> bool:
        return self.time > 0


class Projectile:
    """Bullet flying in a straight line until it hits something or leaves the arena"""

    def __init__(self, position: Vec2, direction: Vec2, speed: float,
                 owner: Faction, damage: float, noise_radius: float):
        self.position = position.copy()
        self.direction = direction.copy().normalize()
        self.speed = speed
        self.owner = owner
        self.damage = damage
        self.noise_radius = noise_radius
        self.alive = True

    def update(self, dt: float, width: float, height: float):
        self.position.add(self.direction.copy().scale(self.speed * dt))
        p = self.position
        if p.x < 0 or p.x > width or p.y < 0 or p.y > height:
            self.kill()

    def kill(self):
        self.alive = False
