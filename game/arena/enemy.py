"""
Autonomous enemy: perception -> state machine -> motion / fire

States
------
PATROL  walk the waypoint loop; sight -> ATTACK, heard noise -> ALERT
ALERT   walk to the search target and poke around it; sight -> ATTACK,
        timer expiry -> PATROL
ATTACK  close in and shoot; player beyond lose range -> ALERT
DOWN    set by combat resolution when health drops to zero; terminal

Facing (for the vision cone) is always the direction to the current patrol
waypoint, in every state.
"""

from __future__ import annotations
import logging
import random
from typing import List, Optional, Sequence

from .config import ENEMY_CONFIG
from .entities import AIState, Faction, NoiseEvent, Projectile
from .utils import within_radius
from .vector import Vec2
from .weapons import Weapon

logger = logging.getLogger(__name__)

VISION_RANGE = ENEMY_CONFIG["vision_range"]
VISION_DOT = ENEMY_CONFIG["vision_dot"]
WAYPOINT_REACH = ENEMY_CONFIG["waypoint_reach"]
SEARCH_REACH = ENEMY_CONFIG["search_reach"]
LOSE_RANGE = ENEMY_CONFIG["lose_range"]
ENGAGE_RANGE = ENEMY_CONFIG["engage_range"]


class Enemy:
    """Patrolling shooter that reacts to sight and sound"""

    def __init__(
        self,
        position: Vec2,
        waypoints: Sequence[Vec2],
        weapon: Weapon,
        rng: random.Random,
        speed: float = ENEMY_CONFIG["speed"],
        health: float = ENEMY_CONFIG["health"],
        initial_cooldown: Optional[float] = None,
    ):
        if not waypoints:
            raise ValueError("enemy needs at least one patrol waypoint")

        self.position = position.copy()
        self.waypoints = [wp.copy() for wp in waypoints]
        self.current_wp = 0
        self.speed = speed
        self.health = health
        self.state = AIState.PATROL
        self.alert_timer = 0.0
        self.search_target: Optional[Vec2] = None
        self.rng = rng

        self.weapon = weapon
        if initial_cooldown is None:
            initial_cooldown = rng.random() * ENEMY_CONFIG["initial_cooldown_max"]
        self.weapon.cooldown = initial_cooldown

    def __repr__(self) -> str:
        return (f"Enemy({self.weapon.name!r}, {self.state.value}, "
                f"hp={self.health:.0f}, pos={self.position!r})")

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def faction(self) -> Faction:
        return Faction.ENEMY

    def next_waypoint(self) -> Vec2:
        return self.waypoints[self.current_wp]

    # ----------------------------
    # Perception
    # ----------------------------

    def facing(self) -> Vec2:
        """Unit vector toward the current patrol waypoint (zero when standing on it)"""
        return Vec2.subtract(self.next_waypoint(), self.position).normalize()

    def can_see(self, target: Vec2) -> bool:
        to_target = Vec2.subtract(target, self.position)
        if to_target.length() > VISION_RANGE:
            return False
        return self.facing().dot(to_target.normalize()) > VISION_DOT

    def hear(self, noises: Sequence[NoiseEvent]) -> bool:
        """Go on alert toward the first noise in earshot"""
        for noise in noises:
            if not noise.active:
                continue
            if within_radius(noise.position, self.position, noise.radius):
                self.search_target = noise.position.copy()
                self.alert_timer = (ENEMY_CONFIG["alert_time_min"]
                                    + self.rng.random() * ENEMY_CONFIG["alert_time_spread"])
                self._set_state(AIState.ALERT, "heard noise")
                return True
        return False

    # ----------------------------
    # Tick
    # ----------------------------

    def update(self, dt: float, player_pos: Vec2,
               projectiles: List[Projectile], noises: List[NoiseEvent]):
        if not self.alive:
            return

        self.weapon.update(dt)

        if self.state is AIState.PATROL:
            self._patrol(dt, player_pos, noises)
        elif self.state is AIState.ALERT:
            self._alert(dt, player_pos)
        elif self.state is AIState.ATTACK:
            self._attack(dt, player_pos, projectiles, noises)
        elif self.state is AIState.DOWN:
            pass
        else:
            raise ValueError(f"unhandled enemy state {self.state!r}")

    def _patrol(self, dt: float, player_pos: Vec2, noises: List[NoiseEvent]):
        to_wp = Vec2.subtract(self.next_waypoint(), self.position)
        if to_wp.length() < WAYPOINT_REACH:
            self.current_wp = (self.current_wp + 1) % len(self.waypoints)
        else:
            self.position.add(to_wp.normalize().scale(self.speed * dt))

        if self.can_see(player_pos):
            self._set_state(AIState.ATTACK, "spotted player")
        else:
            self.hear(noises)

    def _alert(self, dt: float, player_pos: Vec2):
        if self.can_see(player_pos):
            self._set_state(AIState.ATTACK, "spotted player")
            return

        self.alert_timer -= dt
        if self.search_target is not None:
            to_target = Vec2.subtract(self.search_target, self.position)
            if to_target.length() > SEARCH_REACH:
                step = self.speed * ENEMY_CONFIG["search_speed_mult"] * dt
                self.position.add(to_target.normalize().scale(step))
            elif self.rng.random() < ENEMY_CONFIG["wander_chance"]:
                # poke around the spot the noise came from
                off = ENEMY_CONFIG["wander_offset"]
                self.search_target.add(Vec2(self.rng.uniform(-off, off),
                                            self.rng.uniform(-off, off)))

        if self.alert_timer <= 0:
            self.search_target = None
            self._set_state(AIState.PATROL, "search timed out")

    def _attack(self, dt: float, player_pos: Vec2,
                projectiles: List[Projectile], noises: List[NoiseEvent]):
        to_player = Vec2.subtract(player_pos, self.position)
        dist = to_player.length()
        if dist > LOSE_RANGE:
            self.search_target = player_pos.copy()
            self.alert_timer = ENEMY_CONFIG["lost_alert_time"]
            self._set_state(AIState.ALERT, "lost player")
            return

        if dist > ENGAGE_RANGE:
            step = self.speed * ENEMY_CONFIG["chase_speed_mult"] * dt
            self.position.add(to_player.normalize().scale(step))
        self.fire_at(player_pos, projectiles, noises)

    def fire_at(self, target: Vec2, projectiles: List[Projectile],
                noises: List[NoiseEvent]) -> Optional[Projectile]:
        direction = Vec2.subtract(target, self.position)
        if direction.length() == 0:
            return None
        shot = self.weapon.try_fire(self.position, direction, Faction.ENEMY)
        if shot is None:
            return None

        jitter = (self.rng.random() - 0.5) * ENEMY_CONFIG["aim_jitter"]
        shot.direction = direction.rotated(jitter).normalize()
        projectiles.append(shot)
        noises.append(NoiseEvent(self.position.copy(), self.weapon.noise_radius, Faction.ENEMY))
        return shot

    def _set_state(self, state: AIState, reason: str):
        if state is self.state:
            return
        logger.debug("%s: %s -> %s (%s)", self.weapon.name, self.state.value, state.value, reason)
        self.state = state

    def take_hit(self, damage: float):
        """Apply projectile damage; a hit enemy always engages"""
        self.health -= damage
        if self.health <= 0:
            logger.info("%s down", self.weapon.name)
            self.state = AIState.DOWN
        elif self.state is not AIState.ATTACK:
            self._set_state(AIState.ATTACK, "took fire")
