"""
Simulation step - agent updates, projectile flight, collision and pruning

One call to ``Simulation.step`` is one tick:

  1. player update (may fire -> projectile + noise)
  2. enemy updates (perception against the player and live noises)
  3. projectile flight (leaving the arena kills the projectile)
  4. collision resolution
  5. dead projectiles pruned, noises decayed and pruned

The projectile and noise lists are owned by the simulation and compacted in
place, so a reference obtained from ``projectiles`` / ``noises`` stays valid
across ticks.
"""

from __future__ import annotations
import logging
import random
from typing import Callable, Dict, List, Optional, TypeVar

from .config import ARENA_CONFIG, ENEMY_ARCHETYPES, PATROL_ROUTES, PLAYER_CONFIG, PLAYER_WEAPONS
from .enemy import Enemy
from .entities import AIState, Faction, NoiseEvent, Projectile
from .player import Player, PlayerIntent
from .utils import make_rng, touching
from .vector import Vec2
from .weapons import Weapon

logger = logging.getLogger(__name__)

HIT_RADIUS = ARENA_CONFIG["hit_radius"]

T = TypeVar("T")


def compact(items: List[T], keep: Callable[[T], bool]) -> int:
    """Drop items failing *keep* from the list in place, preserving order.

    Returns the number of items removed.
    """
    n = 0
    for item in items:
        if keep(item):
            items[n] = item
            n += 1
    removed = len(items) - n
    del items[n:]
    return removed


def spawn_player(width: float, height: float) -> Player:
    pos = Vec2(width * 0.5, height * 0.5 + PLAYER_CONFIG["spawn_offset_y"])
    return Player(pos, [Weapon.from_config(w) for w in PLAYER_WEAPONS])


def spawn_enemies(rng: random.Random) -> List[Enemy]:
    """One enemy per patrol route, each with a random archetype"""
    enemies = []
    for route in PATROL_ROUTES:
        waypoints = [Vec2(x, y) for x, y in route]
        archetype = rng.choice(ENEMY_ARCHETYPES)
        enemies.append(Enemy(waypoints[0], waypoints, Weapon.from_config(archetype), rng))
    return enemies


class Simulation:
    """Owns every agent, projectile and noise event in the arena"""

    def __init__(
        self,
        width: float = ARENA_CONFIG["width"],
        height: float = ARENA_CONFIG["height"],
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        player: Optional[Player] = None,
        enemies: Optional[List[Enemy]] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"arena size must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.rng = rng if rng is not None else make_rng(seed)

        self.player = player if player is not None else spawn_player(width, height)
        self.enemies = enemies if enemies is not None else spawn_enemies(self.rng)
        self.projectiles: List[Projectile] = []
        self.noises: List[NoiseEvent] = []

        self.elapsed = 0.0
        self.tick_count = 0

        # Per-tick counters, read by the RL reward
        self.events: Dict[str, float] = {}
        self._reset_events()

    def _reset_events(self):
        self.events = {"shot": 0.0, "hit": 0.0, "kill": 0.0, "damage": 0.0}

    # ----------------------------
    # Tick
    # ----------------------------

    def step(self, dt: float, intent: Optional[PlayerIntent] = None):
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if intent is None:
            intent = PlayerIntent()
        self._reset_events()

        n_before = len(self.projectiles)
        self.player.update(dt, intent, self.width, self.height, self.projectiles, self.noises)
        self.events["shot"] += len(self.projectiles) - n_before

        for enemy in self.enemies:
            enemy.update(dt, self.player.position, self.projectiles, self.noises)

        for p in self.projectiles:
            p.update(dt, self.width, self.height)

        self.handle_collisions()

        compact(self.projectiles, lambda p: p.alive)
        for n in self.noises:
            n.update(dt)
        compact(self.noises, lambda n: n.active)

        self.elapsed += dt
        self.tick_count += 1

    def handle_collisions(self):
        for p in self.projectiles:
            if not p.alive:
                continue
            if p.owner is Faction.PLAYER:
                self._hit_enemies(p)
            elif p.owner is Faction.ENEMY:
                self._hit_player(p)
            else:
                raise ValueError(f"unhandled projectile owner {p.owner!r}")

    def _hit_enemies(self, p: Projectile):
        for enemy in self.enemies:
            if not enemy.alive:
                continue
            if touching(p.position, enemy.position, HIT_RADIUS):
                p.kill()
                enemy.take_hit(p.damage)
                self.events["hit"] += 1.0
                if enemy.state is AIState.DOWN:
                    self.events["kill"] += 1.0
                break

    def _hit_player(self, p: Projectile):
        if touching(p.position, self.player.position, HIT_RADIUS):
            was_alive = self.player.alive
            p.kill()
            self.player.health -= p.damage
            self.events["damage"] += p.damage
            if was_alive and not self.player.alive:
                logger.info("player down after %.1fs", self.elapsed)

    # ----------------------------
    # Queries
    # ----------------------------

    def alive_enemies(self) -> List[Enemy]:
        return [e for e in self.enemies if e.alive]

    def is_over(self) -> bool:
        """Player dead or every enemy down"""
        return not self.player.alive or not self.alive_enemies()
