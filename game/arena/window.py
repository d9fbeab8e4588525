"""
Interactive arcade front-end

Keyboard / mouse state is turned into a ``PlayerIntent`` every frame and the
frame time is clamped before it reaches the simulation.

Controls: W/A/S/D move, mouse aims, left button fires, 1/2 switch weapon.

Run:
    python -m game.arena.window
"""

from __future__ import annotations
import argparse
import logging
from typing import Optional, Set

import arcade

from .config import ARENA_CONFIG
from .player import PlayerIntent
from .render import Color, draw_floor, draw_hud, draw_scene
from .simulation import Simulation
from .vector import Vec2

MAX_FRAME_DT = ARENA_CONFIG["max_frame_dt"]

BG_C = (18, 18, 22)

WEAPON_KEYS = {arcade.key.KEY_1: 0, arcade.key.KEY_2: 1}


class ArcadeSurface:
    """Surface that draws with arcade, flipping arena y to screen y"""

    def __init__(self, height: float):
        self.height = height

    def circle(self, x: float, y: float, radius: float, color: Color,
               filled: bool = True, line_width: float = 1):
        sy = self.height - y
        if filled:
            arcade.draw_circle_filled(x, sy, radius, color)
        else:
            arcade.draw_circle_outline(x, sy, radius, color, line_width)

    def line(self, x1: float, y1: float, x2: float, y2: float, color: Color,
             line_width: float = 1):
        arcade.draw_line(x1, self.height - y1, x2, self.height - y2, color, line_width)

    def rect(self, left: float, top: float, width: float, height: float, color: Color):
        arcade.draw_lrbt_rectangle_filled(
            left, left + width, self.height - (top + height), self.height - top, color
        )

    def text(self, text: str, x: float, y: float, color: Color, size: int):
        arcade.draw_text(text, x, self.height - y, color, size)


class ArenaWindow(arcade.Window):
    """Arcade window that drives a Simulation"""

    def __init__(self, sim: Simulation, interactive: bool = True):
        super().__init__(int(sim.width), int(sim.height), "Stealth Arena")
        self.sim = sim
        self.interactive = interactive
        self.surface = ArcadeSurface(sim.height)
        self.background_color = BG_C

        self.keys: Set[int] = set()
        self.mouse_pos = Vec2()
        self.mouse_down = False
        self._weapon_select: Optional[int] = None

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        self.keys.add(symbol)
        if symbol in WEAPON_KEYS:
            self._weapon_select = WEAPON_KEYS[symbol]

    def on_key_release(self, symbol: int, modifiers: int):
        self.keys.discard(symbol)

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        self.mouse_pos = Vec2(x, self.sim.height - y)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if button == arcade.MOUSE_BUTTON_LEFT:
            self.mouse_down = True

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        if button == arcade.MOUSE_BUTTON_LEFT:
            self.mouse_down = False

    def intent(self) -> PlayerIntent:
        intent = PlayerIntent(
            up=arcade.key.W in self.keys,
            down=arcade.key.S in self.keys,
            left=arcade.key.A in self.keys,
            right=arcade.key.D in self.keys,
            fire=self.mouse_down,
            aim=self.mouse_pos.copy(),
            weapon_select=self._weapon_select,
        )
        self._weapon_select = None
        return intent

    # ----------------------------
    # Frame
    # ----------------------------

    def on_update(self, delta_time: float):
        if not self.interactive:
            return
        self.sim.step(min(MAX_FRAME_DT, delta_time), self.intent())

    def on_draw(self):
        self.clear()
        draw_floor(self.sim, self.surface)
        draw_scene(self.sim, self.surface)
        draw_hud(self.sim, self.surface)


def main():
    parser = argparse.ArgumentParser(description="Play the stealth arena")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--width", type=int, default=ARENA_CONFIG["width"])
    parser.add_argument("--height", type=int, default=ARENA_CONFIG["height"])
    parser.add_argument("--verbose", action="store_true", help="Log AI state changes")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    sim = Simulation(width=args.width, height=args.height, seed=args.seed)
    ArenaWindow(sim)
    arcade.run()


if __name__ == "__main__":
    main()
