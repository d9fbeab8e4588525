import pytest

from game.arena.config import PLAYER_WEAPONS
from game.arena.entities import Faction, NoiseEvent, Projectile
from game.arena.vector import Vec2
from game.arena.weapons import Weapon


@pytest.fixture
def repeater():
    return Weapon.from_config(PLAYER_WEAPONS[0])


def test_fire_builds_projectile_from_weapon_stats(repeater):
    shot = repeater.try_fire(Vec2(10, 10), Vec2(0, 5), Faction.PLAYER)
    assert shot is not None
    assert shot.owner is Faction.PLAYER
    assert shot.speed == 480.0
    assert shot.damage == 12.0
    assert shot.noise_radius == 90.0
    assert shot.direction.length() == pytest.approx(1.0)
    assert (shot.direction.x, shot.direction.y) == (0.0, 1.0)
    assert shot.alive
    assert repeater.cooldown == pytest.approx(1 / 6)


def test_projectile_does_not_alias_origin(repeater):
    origin = Vec2(10, 10)
    shot = repeater.try_fire(origin, Vec2(1, 0), Faction.PLAYER)
    shot.update(0.1, 1000, 1000)
    assert origin == Vec2(10, 10)


def test_refuses_until_full_cooldown_elapsed(repeater):
    assert repeater.try_fire(Vec2(), Vec2(1, 0), Faction.PLAYER) is not None

    for _ in range(3):
        repeater.update(0.05)
        assert repeater.try_fire(Vec2(), Vec2(1, 0), Faction.PLAYER) is None

    repeater.update(0.05)
    assert repeater.try_fire(Vec2(), Vec2(1, 0), Faction.PLAYER) is not None


def test_cooldown_floors_at_zero(repeater):
    repeater.try_fire(Vec2(), Vec2(1, 0), Faction.PLAYER)
    repeater.update(10.0)
    assert repeater.cooldown == 0.0
    repeater.update(1.0)
    assert repeater.cooldown == 0.0


def test_fire_count_respects_rate(repeater):
    fired = 0
    for _ in range(100):  # one simulated second
        repeater.update(0.01)
        if repeater.try_fire(Vec2(), Vec2(1, 0), Faction.PLAYER):
            fired += 1
    assert fired <= 6 + 1


@pytest.mark.parametrize("kwargs", [
    {"fire_rate": 0},
    {"fire_rate": -1},
    {"bullet_speed": 0},
    {"damage": -1},
    {"noise_radius": -5},
])
def test_invalid_weapon_rejected(kwargs):
    params = dict(name="x", fire_rate=1.0, damage=1.0, noise_radius=1.0, bullet_speed=1.0)
    params.update(kwargs)
    with pytest.raises(ValueError):
        Weapon(**params)


def test_projectile_leaves_arena_and_dies():
    p = Projectile(Vec2(799, 300), Vec2(1, 0), 100.0, Faction.ENEMY, 5, 0)
    p.update(0.005, 800, 600)
    assert p.alive
    p.update(0.01, 800, 600)
    assert p.position.x > 800
    assert not p.alive


def test_noise_event_decays():
    n = NoiseEvent(Vec2(), 50, Faction.PLAYER, time=0.4)
    assert n.active
    n.update(0.25)
    assert n.active
    n.update(0.25)
    assert not n.active
