from game.arena.entities import AIState, Faction, NoiseEvent, Projectile
from game.arena.render import (
    BULLET_C, ENEMY_RADIUS, PLAYER_RADIUS, STATE_C, draw_floor, draw_hud, draw_scene,
    hud_lines,
)
from game.arena.simulation import Simulation
from game.arena.vector import Vec2


class RecordingSurface:
    def __init__(self):
        self.calls = []

    def circle(self, x, y, radius, color, filled=True, line_width=1):
        self.calls.append(("circle", x, y, radius, color, filled))

    def line(self, x1, y1, x2, y2, color, line_width=1):
        self.calls.append(("line", x1, y1, x2, y2))

    def rect(self, left, top, width, height, color):
        self.calls.append(("rect", left, top, width, height, color))

    def text(self, text, x, y, color, size):
        self.calls.append(("text", text, x, y))

    def filled_circles(self, radius):
        return [c for c in self.calls if c[0] == "circle" and c[3] == radius and c[5]]


def test_scene_skips_dead_enemies():
    sim = Simulation(seed=2)
    sim.enemies[0].take_hit(1000)
    sim.enemies[1].state = AIState.ALERT

    surface = RecordingSurface()
    draw_scene(sim, surface)

    enemy_fills = surface.filled_circles(ENEMY_RADIUS)
    assert len(enemy_fills) == 3
    assert enemy_fills[0][4] == STATE_C[AIState.ALERT]
    assert len(surface.filled_circles(PLAYER_RADIUS)) == 1


def test_scene_draws_projectiles_and_noises():
    sim = Simulation(seed=2)
    sim.projectiles.append(Projectile(Vec2(10, 10), Vec2(1, 0), 1, Faction.ENEMY, 1, 0))
    sim.noises.append(NoiseEvent(Vec2(50, 50), 120, Faction.PLAYER))
    sim.noises.append(NoiseEvent(Vec2(60, 60), 80, Faction.PLAYER, time=0.0))

    surface = RecordingSurface()
    draw_scene(sim, surface)

    bullets = surface.filled_circles(3)
    assert bullets == [("circle", 10.0, 10.0, 3, BULLET_C[Faction.ENEMY], True)]
    rings = [c for c in surface.calls if c[0] == "circle" and c[3] in (120, 80)]
    assert len(rings) == 1
    assert surface.calls[0] == rings[0]


def test_hud_clamps_health_and_counts_enemies():
    sim = Simulation(seed=2)
    sim.player.health = -14.6
    sim.enemies[3].take_hit(100)

    lines = hud_lines(sim)
    assert lines[0] == "Health: 0"
    assert "Quiet Repeater" in lines[1]
    assert "Fire rate 6.0/s" in lines[1]
    assert "Damage 12" in lines[1]
    assert "Noise 90" in lines[1]
    assert lines[2] == "Enemies: 3 active"


def test_hud_rounds_health():
    sim = Simulation(seed=2)
    sim.player.health = 47.6
    assert hud_lines(sim)[0] == "Health: 48"


def test_draw_hud_uses_band_and_text():
    sim = Simulation(seed=2)
    surface = RecordingSurface()
    draw_hud(sim, surface)
    assert surface.calls[0][0] == "rect"
    texts = [c[1] for c in surface.calls if c[0] == "text"]
    assert texts[0] == "Health: 100"
    assert texts == hud_lines(sim)
    assert "Patrol" in texts[3]


def test_floor_grid_is_skewed_and_covers_arena():
    sim = Simulation(width=200, height=120, seed=2)
    surface = RecordingSurface()
    draw_floor(sim, surface)

    lines = [c[1:] for c in surface.calls if c[0] == "line"]
    # 5 columns (0..160) and 3 rows (0..80)
    assert len(lines) == 8
    assert lines[0] == (0, 0, 60, 120)
    assert lines[4] == (160, 0, 220, 120)
    assert lines[5] == (0, 30, 200, 0)
    assert lines[-1] == (0, 110, 200, 80)
