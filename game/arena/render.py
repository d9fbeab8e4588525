"""
Drawing interface for the arena

The simulation never touches a graphics API. ``draw_scene`` issues draw calls
against any object implementing ``Surface``; ``window.ArcadeSurface`` is the
real one, tests use a recorder.

All coordinates are arena coordinates: origin top-left, y grows downward.
"""

from __future__ import annotations
from typing import List, Protocol, Tuple

from .entities import AIState, Faction
from .simulation import Simulation

Color = Tuple[int, ...]

PLAYER_C = (123, 224, 165)
PLAYER_RIM_C = (0, 187, 0)
ENEMY_RIM_C = (11, 13, 19)
STATE_C = {
    AIState.PATROL: (122, 162, 247),
    AIState.ALERT: (255, 209, 102),
    AIState.ATTACK: (255, 123, 156),
    AIState.DOWN: (80, 80, 80),
}
BULLET_C = {
    Faction.PLAYER: (255, 218, 107),
    Faction.ENEMY: (255, 92, 141),
}
NOISE_C = {
    Faction.PLAYER: (255, 218, 107, 102),
    Faction.ENEMY: (255, 92, 141, 102),
}

PLAYER_RADIUS = 12
ENEMY_RADIUS = 10
BULLET_RADIUS = 3


class Surface(Protocol):
    def circle(self, x: float, y: float, radius: float, color: Color,
               filled: bool = True, line_width: float = 1) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float, color: Color,
             line_width: float = 1) -> None: ...

    def rect(self, left: float, top: float, width: float, height: float,
             color: Color) -> None: ...

    def text(self, text: str, x: float, y: float, color: Color, size: int) -> None: ...


FLOOR_C = (255, 255, 255, 15)
FLOOR_STEP = 40


def draw_floor(sim: Simulation, surface: Surface):
    """Skewed grid under everything else"""
    x = 0
    while x < sim.width:
        surface.line(x, 0, x + 60, sim.height, FLOOR_C)
        x += FLOOR_STEP
    y = 0
    while y < sim.height:
        surface.line(0, y + 30, sim.width, y, FLOOR_C)
        y += FLOOR_STEP


def draw_scene(sim: Simulation, surface: Surface):
    """Draw noises, player, living enemies and bullets, in that order"""
    for n in sim.noises:
        if n.active:
            surface.circle(n.position.x, n.position.y, n.radius, NOISE_C[n.source],
                           filled=False, line_width=2)

    p = sim.player
    surface.circle(p.position.x, p.position.y, PLAYER_RADIUS, PLAYER_C)
    surface.circle(p.position.x, p.position.y, PLAYER_RADIUS, PLAYER_RIM_C,
                   filled=False, line_width=3)

    for e in sim.enemies:
        if not e.alive:
            continue
        surface.circle(e.position.x, e.position.y, ENEMY_RADIUS, STATE_C[e.state])
        surface.circle(e.position.x, e.position.y, ENEMY_RADIUS, ENEMY_RIM_C,
                       filled=False, line_width=2)

    for b in sim.projectiles:
        surface.circle(b.position.x, b.position.y, BULLET_RADIUS, BULLET_C[b.owner])


def hud_lines(sim: Simulation) -> List[str]:
    """Status text: health, active weapon stats, enemy count"""
    w = sim.player.weapon
    health = max(0, round(sim.player.health))
    return [
        f"Health: {health}",
        f"Weapon: {w.name} - Fire rate {w.fire_rate:.1f}/s, Damage {w.damage:g}, Noise {w.noise_radius:.0f}",
        f"Enemies: {len(sim.alive_enemies())} active",
        "States: Patrol -> Alert (noise/search) -> Attack (line of sight)",
    ]


HUD_BAND_C = (0, 0, 0, 90)
HUD_TEXT_C = (243, 244, 246)
HUD_HEIGHT = 60


def draw_hud(sim: Simulation, surface: Surface):
    """Translucent band along the bottom edge with every hud line"""
    top = sim.height - HUD_HEIGHT
    surface.rect(0, top, sim.width, HUD_HEIGHT, HUD_BAND_C)
    lines = hud_lines(sim)
    surface.text(lines[0], 16, sim.height - 28, HUD_TEXT_C, 16)
    surface.text(lines[1], 180, sim.height - 28, HUD_TEXT_C, 16)
    surface.text(lines[2], 16, sim.height - 8, HUD_TEXT_C, 12)
    surface.text(lines[3], 180, sim.height - 8, HUD_TEXT_C, 12)
