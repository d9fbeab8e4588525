"""
StealthShooterEnv - the stealth arena as a Gymnasium environment
----------------------------------------------------------------
- Gymnasium API over ``Simulation`` (fixed dt per step)
- The RL agent is the player: moves, aims, fires, switches weapon
- Four patrolling enemies that see, hear and shoot back
- Vector observation: player state + top-K nearest living enemies
- MultiDiscrete action space: [move(5), fire(2), aim(8), weapon(2)]

Quick test:
    python -m game.arena.shooter_env
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ARENA_CONFIG, ENEMY_CONFIG, PLAYER_CONFIG, PLAYER_WEAPONS
from .entities import AIState
from .player import PlayerIntent
from .simulation import Simulation
from .utils import clamp, seed_everything
from .vector import Vec2

DEFAULT_REWARDS = {
    "R_HIT": 0.3,       # per enemy hit
    "R_KILL": 1.0,      # per enemy down
    "R_DAMAGE": 0.02,   # per point of damage taken
    "R_SHOT": 0.01,     # per shot fired (noise has a cost)
    "R_TIME": 0.001,
    "R_DEATH": 5.0,
    "R_WIN": 5.0,       # all enemies down
}

AIM_DISTANCE = 100.0


class StealthShooterEnv(gym.Env):
    """2D top-down stealth shooter environment"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = ARENA_CONFIG["width"],
        height: int = ARENA_CONFIG["height"],
        dt: float = 1 / 30,
        max_steps: int = 1800,  # 60s at 30 FPS
        k_enemies: int = 4,
        rewards: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.rewards = dict(DEFAULT_REWARDS, **(rewards or {}))

        # move: 0 stay, 1 up, 2 down, 3 left, 4 right
        # fire: 0/1
        # aim: 0..7 (8 directions)
        # weapon: index into the player loadout
        self.action_space = spaces.MultiDiscrete([5, 2, 8, len(PLAYER_WEAPONS)])

        # Player: pos(2) health(1) cooldown(1) weapon(1)
        # Each enemy: rel pos(2) health(1) alert(1) attack(1)
        obs_dim = 2 + 1 + 1 + 1 + self.k_enemies * 5
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self.sim: Simulation = None  # type: ignore
        self._step_count = 0
        self._totals: Dict[str, float] = {}

        self._aim_dirs = []
        for i in range(8):
            ang = (math.pi * 2) * (i / 8.0)
            self._aim_dirs.append(Vec2(math.cos(ang), math.sin(ang)))

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        sim_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.sim = Simulation(width=self.width, height=self.height, seed=sim_seed)
        self._step_count = 0
        self._totals = {"hit": 0.0, "kill": 0.0, "damage": 0.0, "shot": 0.0}

        return self._get_obs(), self._get_info()

    def step(self, action):
        intent = self._action_to_intent(action)
        self.sim.step(self.dt, intent)

        for k in self._totals:
            self._totals[k] += self.sim.events[k]

        reward = self._compute_reward()

        terminated = self.sim.is_over()
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _action_to_intent(self, action) -> PlayerIntent:
        move, fire, aim, weapon = (int(a) for a in action)
        d = self._aim_dirs[aim % 8]
        p = self.sim.player.position
        return PlayerIntent(
            up=move == 1,
            down=move == 2,
            left=move == 3,
            right=move == 4,
            fire=fire == 1,
            aim=Vec2(p.x + d.x * AIM_DISTANCE, p.y + d.y * AIM_DISTANCE),
            weapon_select=weapon,
        )

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        player = self.sim.player
        pos = player.position

        obs_parts = [
            (pos.x / self.width) * 2 - 1,
            (pos.y / self.height) * 2 - 1,
            clamp(player.health / PLAYER_CONFIG["health"], 0, 1) * 2 - 1,
            clamp(player.weapon.cooldown * player.weapon.fire_rate, 0, 1) * 2 - 1,
            1.0 if player.active_weapon else -1.0,
        ]

        enemies_sorted = sorted(
            self.sim.alive_enemies(),
            key=lambda e: (e.position.x - pos.x) ** 2 + (e.position.y - pos.y) ** 2,
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.position.x - pos.x) / self.width, -1, 1),
                    clamp((e.position.y - pos.y) / self.height, -1, 1),
                    clamp(e.health / ENEMY_CONFIG["health"], 0, 1) * 2 - 1,
                    1.0 if e.state is AIState.ALERT else 0.0,
                    1.0 if e.state is AIState.ATTACK else 0.0,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        r = self.rewards
        ev = self.sim.events

        reward = 0.0
        reward += r["R_HIT"] * ev["hit"]
        reward += r["R_KILL"] * ev["kill"]
        reward -= r["R_DAMAGE"] * ev["damage"]
        reward -= r["R_SHOT"] * ev["shot"]
        reward -= r["R_TIME"]

        if not self.sim.player.alive:
            reward -= r["R_DEATH"]
        elif not self.sim.alive_enemies():
            reward += r["R_WIN"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "health": self.sim.player.health,
            "weapon": self.sim.player.weapon.name,
            "enemies_alive": len(self.sim.alive_enemies()),
            "enemies_killed": self._totals["kill"],
            "damage_taken": self._totals["damage"],
            "shots_fired": self._totals["shot"],
            "num_bullets": len(self.sim.projectiles),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # imported lazily so headless training never loads arcade
            from .window import ArenaWindow
            self._window = ArenaWindow(self.sim, interactive=False)

        self._window.sim = self.sim
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def run_random_episode(render: bool = True, seed: int = 42):
    """Run a random episode for testing"""
    env = StealthShooterEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f}")
    print(f"Enemies killed: {info['enemies_killed']:.0f}, "
          f"damage taken: {info['damage_taken']:.0f}, steps: {info['step']}")
    env.close()


if __name__ == "__main__":
    run_random_episode(render=True)
