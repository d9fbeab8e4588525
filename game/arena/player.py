"""
Controllable agent
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config import ARENA_CONFIG, PLAYER_CONFIG
from .entities import Faction, NoiseEvent, Projectile
from .utils import clamp
from .vector import Vec2
from .weapons import Weapon

logger = logging.getLogger(__name__)


@dataclass
class PlayerIntent:
    """What the input layer wants the player to do this tick"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    fire: bool = False
    aim: Vec2 = field(default_factory=Vec2)
    weapon_select: Optional[int] = None


class Player:
    """Player agent entity"""

    def __init__(self, position: Vec2, weapons: List[Weapon],
                 speed: float = PLAYER_CONFIG["speed"],
                 health: float = PLAYER_CONFIG["health"]):
        if not weapons:
            raise ValueError("player needs at least one weapon")
        self.position = position.copy()
        self.weapons = weapons
        self.speed = speed
        self.health = health
        self.active_weapon = 0

    @property
    def weapon(self) -> Weapon:
        return self.weapons[self.active_weapon]

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def faction(self) -> Faction:
        return Faction.PLAYER

    def update(self, dt: float, intent: PlayerIntent, width: float, height: float,
               projectiles: List[Projectile], noises: List[NoiseEvent]):
        self._move(dt, intent, width, height)
        self._select_weapon(intent.weapon_select)

        for w in self.weapons:
            w.update(dt)

        if intent.fire:
            self._fire(intent.aim, projectiles, noises)

    def _move(self, dt: float, intent: PlayerIntent, width: float, height: float):
        direction = Vec2()
        if intent.up:
            direction.y -= 1
        if intent.down:
            direction.y += 1
        if intent.left:
            direction.x -= 1
        if intent.right:
            direction.x += 1
        if direction.length() == 0:
            return

        self.position.add(direction.normalize().scale(self.speed * dt))
        m = ARENA_CONFIG["wall_margin"]
        self.position.x = clamp(self.position.x, m, width - m)
        self.position.y = clamp(self.position.y, m, height - m)

    def _select_weapon(self, index: Optional[int]):
        if index is None:
            return
        if not 0 <= index < len(self.weapons):
            logger.debug("ignoring weapon select %d (have %d)", index, len(self.weapons))
            return
        self.active_weapon = index

    def _fire(self, aim: Vec2, projectiles: List[Projectile], noises: List[NoiseEvent]):
        direction = Vec2.subtract(aim, self.position)
        if direction.length() == 0:
            return
        weapon = self.weapon
        shot = weapon.try_fire(self.position, direction, Faction.PLAYER)
        if shot is None:
            return
        projectiles.append(shot)
        noises.append(NoiseEvent(self.position.copy(), weapon.noise_radius, Faction.PLAYER))
