"""Stealth arena - top-down shooter with patrolling, listening enemies"""

from .entities import AIState, Faction, NoiseEvent, Projectile
from .enemy import Enemy
from .player import Player, PlayerIntent
from .simulation import Simulation
from .vector import Vec2
from .weapons import Weapon

__all__ = [
    'AIState', 'Faction', 'NoiseEvent', 'Projectile', 'Enemy',
    'Player', 'PlayerIntent', 'Simulation', 'Vec2', 'Weapon',
]
