"""
Rate-limited weapons
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from .entities import Faction, Projectile
from .vector import Vec2


class Weapon:
    """Turns fire requests into projectiles, at most ``fire_rate`` per second"""

    def __init__(self, name: str, fire_rate: float, damage: float,
                 noise_radius: float, bullet_speed: float):
        if fire_rate <= 0:
            raise ValueError(f"fire_rate must be positive, got {fire_rate}")
        if bullet_speed <= 0:
            raise ValueError(f"bullet_speed must be positive, got {bullet_speed}")
        if damage < 0 or noise_radius < 0:
            raise ValueError("damage and noise_radius must be non-negative")

        self.name = name
        self.fire_rate = fire_rate
        self.damage = damage
        self.noise_radius = noise_radius
        self.bullet_speed = bullet_speed
        self.cooldown = 0.0

    @classmethod
    def from_config(cls, loadout: Dict[str, Any]) -> Weapon:
        return cls(
            name=loadout["name"],
            fire_rate=loadout["fire_rate"],
            damage=loadout["damage"],
            noise_radius=loadout["noise_radius"],
            bullet_speed=loadout["bullet_speed"],
        )

    def update(self, dt: float):
        self.cooldown = max(0.0, self.cooldown - dt)

    def try_fire(self, origin: Vec2, direction: Vec2, owner: Faction) -> Optional[Projectile]:
        """Return a projectile, or None while the weapon is cooling down"""
        if self.cooldown > 0:
            return None
        self.cooldown = 1.0 / self.fire_rate
        return Projectile(origin, direction, self.bullet_speed, owner,
                          self.damage, self.noise_radius)
