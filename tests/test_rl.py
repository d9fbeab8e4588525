import numpy as np
import pytest

pytest.importorskip("stable_baselines3")

from game.arena.shooter_env import StealthShooterEnv  # noqa: E402
from rl.train import MultiDiscreteToDiscreteWrapper, make_env, score  # noqa: E402


def test_discrete_wrapper_covers_every_action():
    env = MultiDiscreteToDiscreteWrapper(StealthShooterEnv())
    assert env.action_space.n == 5 * 2 * 8 * 2

    decoded = {tuple(env.action(i)) for i in range(env.action_space.n)}
    assert len(decoded) == env.action_space.n
    np.testing.assert_array_equal(env.action(0), [0, 0, 0, 0])
    np.testing.assert_array_equal(env.action(1), [0, 0, 0, 1])
    np.testing.assert_array_equal(env.action(env.action_space.n - 1), [4, 1, 7, 1])


def test_make_env_flattens_actions_for_dqn():
    env = make_env("dqn", seed=0)()
    obs, _ = env.reset(seed=0)
    assert obs.shape == (25,)
    _, _, _, _, info = env.step(0)
    assert "enemies_killed" in info
    env.close()


def test_make_env_rejects_unknown_algorithm():
    with pytest.raises(ValueError):
        make_env("sac")


def test_random_baseline_score_is_reproducible():
    a = score(None, "ppo", episodes=2, max_steps=40)
    b = score(None, "ppo", episodes=2, max_steps=40)
    assert a == b
    assert 0.0 <= a["survival_rate"] <= 1.0
    assert set(a) == {"mean_return", "std_return", "mean_kills", "survival_rate"}
