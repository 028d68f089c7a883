"""A pixel buffer and the line drawing that renders a map into it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .colors import create_trgb, int_to_rgb, interpolation_factor
from .geometry import HEIGHT, WIDTH, Bounds, Config, Point2D, map_bounds, project_point
from .mapfile import HeightMap


@dataclass
class Image:
    """A row-major buffer of packed 32-bit colours."""

    width: int = WIDTH
    height: int = HEIGHT
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel buffer does not match the image size")

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; positions outside the image are ignored."""
        if self._contains(x, y):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at a position inside the image."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y * self.width + x]

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self.pixels[:] = [color & 0xFFFFFFFF] * len(self.pixels)

    def clear(self) -> None:
        """Set every pixel to zero."""
        self.fill(0)


def line_step(start: int, end: int) -> int:
    """Return the unit step that moves ``start`` toward ``end``.

    Equal coordinates give -1, so a line never stalls on its first axis test.
    """
    if start < end:
        step = 1
    else:
        step = -1
    return step


def apply_offset(point: Point2D, offset: Point2D) -> Point2D:
    """Shift a point by an offset, keeping its colour."""
    return Point2D(point.x + offset.x, point.y + offset.y, point.color)


def gradient_color(curr: Point2D, start: Point2D, end: Point2D) -> int:
    """Blend the end colours for a position along a line, fully opaque."""
    a = int_to_rgb(start.color)
    b = int_to_rgb(end.color)
    t = interpolation_factor(curr, start, end)

    def blend(u: int, v: int) -> int:
        return int(u + (v - u) * t) & 0xFF

    return create_trgb(0xFF, blend(a.r, b.r), blend(a.g, b.g), blend(a.b, b.b))


def line_points(start: Point2D, end: Point2D) -> Iterator[Point2D]:
    """Yield each pixel of a Bresenham line from ``start`` to ``end``, coloured."""
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    sx = line_step(start.x, end.x)
    sy = line_step(start.y, end.y)
    error = dx - dy
    x, y = start.x, start.y
    while True:
        curr = Point2D(x, y)
        yield Point2D(x, y, gradient_color(curr, start, end))
        if x == end.x and y == end.y:
            return
        doubled = 2 * error
        if doubled > -dy:
            error -= dy
            x += sx
        if doubled < dx:
            error += dx
            y += sy


def draw_line(image: Image, start: Point2D, end: Point2D) -> None:
    """Draw a colour-graded line into ``image``."""
    for p in line_points(start, end):
        image.put_pixel(p.x, p.y, p.color)


def centre_offset(bounds: Bounds, config: Config) -> Point2D:
    """Return the shift that centres ``bounds`` on screen, plus the pan offset."""
    x = (WIDTH - bounds.width) / 2 - bounds.min_x + config.offset.x
    y = (HEIGHT - bounds.height) / 2 - bounds.min_y + config.offset.y
    return Point2D(int(x), int(y))


def render_map(image: Image, heightmap: HeightMap, config: Config) -> None:
    """Draw the wireframe of ``heightmap`` into ``image``, centred on screen."""
    grid = heightmap.grid
    if heightmap.width == 0 or heightmap.height == 0:
        return
    offset = centre_offset(map_bounds(grid, config), config)

    def screen(y: int, x: int) -> Point2D:
        return apply_offset(project_point(grid[y][x], config), offset)

    for y in reversed(range(heightmap.height)):
        for x in reversed(range(heightmap.width - 1)):
            draw_line(image, screen(y, x), screen(y, x + 1))
    for x in reversed(range(heightmap.width)):
        for y in reversed(range(heightmap.height - 1)):
            draw_line(image, screen(y, x), screen(y + 1, x))