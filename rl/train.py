"""
Train and score Stable-Baselines3 agents on the stealth arena

    python -m rl.train --algo ppo --timesteps 200000
    python -m rl.train --algo dqn --episodes 20

PPO acts on the MultiDiscrete actions directly; DQN needs a flat Discrete
space, so its envs go through ``MultiDiscreteToDiscreteWrapper``.
"""

import argparse
import os
from typing import Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from stable_baselines3 import DQN, PPO
from stable_baselines3.common.monitor import Monitor
from stable_baselines3.common.vec_env import DummyVecEnv

from game.arena.shooter_env import StealthShooterEnv

# Only what differs from the SB3 defaults
ALGOS = {
    "ppo": (PPO, {"n_steps": 1024, "batch_size": 256, "ent_coef": 0.01}),
    "dqn": (DQN, {"learning_rate": 1e-4, "buffer_size": 100_000, "batch_size": 128,
                  "target_update_interval": 1000, "exploration_final_eps": 0.05}),
}


class MultiDiscreteToDiscreteWrapper(gym.ActionWrapper):
    """Index i maps to the mixed-radix digits of i, last action dimension fastest"""

    def __init__(self, env):
        super().__init__(env)
        self._nvec = [int(n) for n in env.action_space.nvec]
        self.action_space = spaces.Discrete(int(np.prod(self._nvec)))

    def action(self, action):
        rest = int(action)
        digits = []
        for n in reversed(self._nvec):
            rest, d = divmod(rest, n)
            digits.append(d)
        return np.array(digits[::-1], dtype=np.int64)


def make_env(algo: str = "ppo", seed: Optional[int] = None, **env_kwargs):
    """Env factory for ``DummyVecEnv``"""
    if algo not in ALGOS:
        raise ValueError(f"unknown algorithm {algo!r}")

    def _init():
        env = StealthShooterEnv(**env_kwargs)
        if algo == "dqn":
            env = MultiDiscreteToDiscreteWrapper(env)
        env = Monitor(env)
        env.reset(seed=seed)
        return env
    return _init


def train(algo: str, timesteps: int, out_dir: str = "models", n_envs: int = 4, seed: int = 0):
    """Fit a fresh model and save it as ``<out_dir>/<algo>_arena.zip``"""
    if algo not in ALGOS:
        raise ValueError(f"unknown algorithm {algo!r}")
    cls, params = ALGOS[algo]
    # DQN's replay buffer gains nothing from parallel envs
    n = n_envs if algo == "ppo" else 1
    env = DummyVecEnv([make_env(algo, seed=seed + i) for i in range(n)])

    model = cls("MlpPolicy", env, seed=seed, verbose=1, **params)
    model.learn(total_timesteps=timesteps)

    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f"{algo}_arena")
    model.save(path)
    print(f"saved {path}.zip")
    env.close()
    return model


def score(model=None, algo: str = "ppo", episodes: int = 10, seed: int = 100, **env_kwargs):
    """
    Roll out ``episodes`` full episodes and average the outcome.
    With no model the actions are sampled uniformly (random baseline).
    """
    env = make_env(algo, **env_kwargs)()
    env.action_space.seed(seed)
    returns, kills, survived = [], [], []
    for ep in range(episodes):
        obs, info = env.reset(seed=seed + ep)
        done, total = False, 0.0
        while not done:
            if model is None:
                action = env.action_space.sample()
            else:
                action, _ = model.predict(obs, deterministic=True)
            obs, reward, terminated, truncated, info = env.step(action)
            total += reward
            done = terminated or truncated
        returns.append(total)
        kills.append(info["enemies_killed"])
        survived.append(info["health"] > 0)
    env.close()

    return {
        "mean_return": float(np.mean(returns)),
        "std_return": float(np.std(returns)),
        "mean_kills": float(np.mean(kills)),
        "survival_rate": float(np.mean(survived)),
    }


def main():
    parser = argparse.ArgumentParser(description="Train an agent on the stealth arena")
    parser.add_argument("--algo", choices=sorted(ALGOS), default="ppo")
    parser.add_argument("--timesteps", type=int, default=500_000)
    parser.add_argument("--n-envs", type=int, default=4, help="parallel envs (PPO only)")
    parser.add_argument("--out", default="models")
    parser.add_argument("--episodes", type=int, default=10, help="scoring episodes after training")
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    model = train(args.algo, args.timesteps, args.out, args.n_envs, args.seed)
    for name, policy in ((args.algo, model), ("random", None)):
        s = score(policy, args.algo, args.episodes)
        print(f"{name:>6}: return {s['mean_return']:.2f} +/- {s['std_return']:.2f}, "
              f"kills {s['mean_kills']:.2f}, survival {s['survival_rate']:.0%}")


if __name__ == "__main__":
    main()
