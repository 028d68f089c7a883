"""Keyboard and mouse controls of the map viewer."""

from __future__ import annotations

import enum
import math
from dataclasses import replace
from typing import Callable, Optional

from .geometry import MAX_ZOOM, MIN_ZOOM, Config, Point2D, Point3D, Projection
from .mapfile import HeightMap
from .raster import Image, render_map

TEXT_COLOR = 0xFFFFFF
LINE_HEIGHT = 25

ROTATION_STEP = 1.0
Z_SCALE_STEP = 0.5


class Key(enum.IntEnum):
    """Key symbols the viewer reacts to."""

    R = 0x0072
    SHIFT_L = 0xFFE1
    ONE = 0x0031
    TWO = 0x0032
    THREE = 0x0033
    ESCAPE = 0xFF1B
    I = 0x0069  # noqa: E741
    P = 0x0070
    O = 0x006F  # noqa: E741
    EQUAL = 0x003D
    MINUS = 0x002D
    UP = 0xFF52
    DOWN = 0xFF54
    LEFT = 0xFF51
    RIGHT = 0xFF53
    A = 0x0061
    S = 0x0073
    W = 0x0077
    D = 0x0064


class MouseButton(enum.IntEnum):
    """Mouse buttons the viewer reacts to."""

    LEFT = 1
    MIDDLE = 2
    SCROLL_UP = 4
    SCROLL_DOWN = 5


_ARROWS = frozenset({Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN})
_MOVES = frozenset({Key.W, Key.A, Key.S, Key.D})
_PROJECTIONS = frozenset({Key.I, Key.P, Key.O})
_ZOOMS = frozenset({Key.EQUAL, Key.MINUS})


class Viewer:
    """Holds a map and its view state, and turns input events into redraws."""

    def __init__(
        self,
        heightmap: HeightMap,
        image: Optional[Image] = None,
        on_redraw: Optional[Callable[[], None]] = None,
    ) -> None:
        self.heightmap = heightmap
        self.image = image if image is not None else Image()
        self.config = Config()
        self.closed = False
        self._on_redraw = on_redraw

    def redraw(self) -> None:
        """Clear the image, render the map into it and notify the listener."""
        self.image.clear()
        render_map(self.image, self.heightmap, self.config)
        if self._on_redraw is not None:
            self._on_redraw()

    def handle_key_press(self, key: int) -> None:
        """React to a key being pressed."""
        cfg = self.config
        if key == Key.ESCAPE:
            self.closed = True
        elif key in _PROJECTIONS:
            self.switch_projection(key)
        elif key == Key.SHIFT_L:
            cfg.is_rotating = True
        elif key in _ARROWS:
            if cfg.is_rotating:
                self.rotate_map(key)
            else:
                self.adjust_z_scale(key, Z_SCALE_STEP)
        elif key in _MOVES:
            self.key_translate(key)
        elif key in _ZOOMS:
            self.adjust_scale(key)
        elif key == Key.R:
            self.reset_config()
        elif cfg.projection is Projection.ORTHOGRAPHIC and Key.ONE <= key <= Key.THREE:
            self.apply_ortho_variations(key)

    def handle_key_release(self, key: int) -> None:
        """React to a key being released."""
        if key == Key.SHIFT_L:
            self.config.is_rotating = False

    def handle_mouse_press(self, button: int, x: int, y: int) -> None:
        """Start panning on a left click, zoom on scrolling, then redraw."""
        if button == MouseButton.LEFT:
            self.config.is_panning = True
            self.config.pan_start = Point2D(x, y)
        elif button in (MouseButton.SCROLL_UP, MouseButton.SCROLL_DOWN):
            self.adjust_scale(button)
        self.redraw()

    def handle_mouse_release(self, button: int, x: int, y: int) -> None:
        """Stop panning when the left button is released."""
        if button == MouseButton.LEFT:
            self.config.is_panning = False

    def handle_mouse_move(self, x: int, y: int) -> None:
        """Pan the view while the left button is held."""
        cfg = self.config
        if not cfg.is_panning:
            return
        dx = x - cfg.pan_start.x
        dy = y - cfg.pan_start.y
        factor = cfg.pan_speed / cfg.scale
        cfg.offset = Point2D(
            int(cfg.offset.x + dx * factor),
            int(cfg.offset.y + dy * factor),
            cfg.offset.color,
        )
        cfg.pan_start = Point2D(x, y, 0x000000)
        self.redraw()

    def rotate_map(self, key: int) -> None:
        """Turn the map one degree about the axis chosen by an arrow key."""
        rot = self.config.rotations
        if key == Key.LEFT:
            rot = replace(rot, y=rot.y - ROTATION_STEP)
        elif key == Key.RIGHT:
            rot = replace(rot, y=rot.y + ROTATION_STEP)
        elif key == Key.UP:
            rot = replace(rot, x=rot.x + ROTATION_STEP)
        elif key == Key.DOWN:
            rot = replace(rot, z=int(rot.z - ROTATION_STEP))
        self.config.rotations = replace(
            rot,
            x=math.fmod(rot.x, 360.0),
            y=math.fmod(rot.y, 360.0),
            z=int(math.fmod(rot.z, 360.0)),
        )
        self.redraw()

    def key_translate(self, key: int) -> None:
        """Move the view by the pan speed in the direction of a WASD key."""
        cfg = self.config
        x, y = cfg.offset.x, cfg.offset.y
        if key == Key.W:
            y -= cfg.pan_speed
        elif key == Key.S:
            y += cfg.pan_speed
        elif key == Key.D:
            x += cfg.pan_speed
        elif key == Key.A:
            x -= cfg.pan_speed
        cfg.offset = Point2D(int(x), int(y), cfg.offset.color)
        self.redraw()

    def switch_projection(self, key: int) -> None:
        """Select a projection and clear all rotations."""
        cfg = self.config
        cfg.rotations = Point3D(0.0, 0.0, 0, 0xFF)
        if key == Key.I:
            cfg.projection = Projection.ISOMETRIC
        elif key == Key.O:
            cfg.projection = Projection.ORTHOGRAPHIC
        else:
            cfg.projection = Projection.CAVALIER
        self.redraw()

    def adjust_z_scale(self, key: int, factor: float) -> None:
        """Raise or lower the height scale by ``factor``."""
        if key == Key.UP:
            self.config.z_scale += factor
        elif key == Key.DOWN:
            self.config.z_scale -= factor
        self.redraw()

    def adjust_scale(self, button: int) -> None:
        """Zoom in or out by ten percent, within the zoom limits."""
        cfg = self.config
        prev = cfg.scale
        if button in (MouseButton.SCROLL_UP, Key.EQUAL):
            cfg.scale = min(prev * 1.1, MAX_ZOOM)
        elif button in (MouseButton.SCROLL_DOWN, Key.MINUS):
            cfg.scale = max(prev * 0.9, MIN_ZOOM)
        self.redraw()

    def apply_ortho_variations(self, key: int) -> None:
        """Show the top, front or side view of an orthographic projection."""
        if key == Key.ONE:
            self.config.rotations = Point3D(0.0, 0.0, 0, 0xFF)
        elif key == Key.TWO:
            self.config.rotations = Point3D(90.0, 0.0, 0, 0xFF)
        elif key == Key.THREE:
            self.config.rotations = Point3D(90.0, 0.0, -90, 0xFF)
        self.redraw()

    def reset_config(self) -> None:
        """Restore the default view."""
        self.config = Config()
        self.redraw()


def instructions(line_height: int) -> list[tuple[int, int, str]]:
    """Return the help overlay as ``(x, y, text)`` lines."""
    y = 20
    lines = [(30, y, "=== Controls (R to Reset) ===")]
    y += line_height
    lines.append((20, y, "Mouse:"))
    for text in ("Left-Click + Drag: Pan", "Scroll: Zoom"):
        y += line_height
        lines.append((40, y, text))
    y += 2 * line_height
    lines.append((20, y, "Keyboard:"))
    for text in (
        "Esc: Quit",
        "i/p/o: Switch Projection",
        "Shift + Arrows: Rotate",
        "Arrows: Adjust Z Scale",
        "W/A/S/D: Move",
        "+/-: Zoom",
        "1/2/3: Ortho Modes (if active)",
    ):
        y += line_height
        lines.append((40, y, text))
    return lines