"""Points, view configuration, rotations and projections of a wireframe map."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence

WIDTH = 1920
HEIGHT = 1080

MAX_ZOOM = 100.0
MIN_ZOOM = 0.8

NEG_COS_45 = -0.5253219
NEG_SIN_45 = -0.8509035
COS_30 = 0.8660254
SIN_30 = 0.5

DEFAULT_COLOR = 0xFFFFFF


class Projection(enum.Enum):
    """The ways a map can be flattened onto the screen."""

    ISOMETRIC = 0
    ORTHOGRAPHIC = 1
    CAVALIER = 2


@dataclass(frozen=True)
class Point2D:
    """A pixel position with a colour."""

    x: int
    y: int
    color: int = 0


@dataclass(frozen=True)
class Point3D:
    """A map point: horizontal coordinates are real, the height is whole."""

    x: float
    y: float
    z: int
    color: int = DEFAULT_COLOR


@dataclass(frozen=True)
class Bounds:
    """The extent of a projected map on screen."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass
class Config:
    """The view state: zoom, pan, height scale, rotation and projection."""

    scale: float = 8.0
    offset: Point2D = field(default_factory=lambda: Point2D(0, 0))
    z_scale: float = 2.0
    pan_speed: float = 8.0
    pan_start: Point2D = field(default_factory=lambda: Point2D(0, 0))
    is_panning: bool = False
    is_rotating: bool = False
    rotations: Point3D = field(default_factory=lambda: Point3D(0.0, 0.0, 0, 0))
    projection: Projection = Projection.ISOMETRIC


def _roundf(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _radians(angle: float) -> float:
    return angle * math.pi / 180.0


def rotate_x(point: Point3D, angle: float) -> Point3D:
    """Rotate a point about the x axis by an angle in degrees."""
    rad = _radians(angle)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    y = point.y * cos_a - point.z * sin_a
    z = int(point.y * sin_a + point.z * cos_a)
    return replace(point, y=y, z=z)


def rotate_y(point: Point3D, angle: float) -> Point3D:
    """Rotate a point about the y axis by an angle in degrees."""
    rad = _radians(angle)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    x = point.x * cos_a + point.z * sin_a
    z = int(-point.x * sin_a + point.z * cos_a)
    return replace(point, x=x, z=z)


def rotate_z(point: Point3D, angle: float) -> Point3D:
    """Rotate a point about the z axis by an angle in degrees."""
    rad = _radians(angle)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    x = point.x * cos_a - point.y * sin_a
    y = point.x * sin_a + point.y * cos_a
    return replace(point, x=x, y=y)


def rotate_point(point: Point3D, angles: Point3D) -> Point3D:
    """Apply the z, then y, then x rotations given in ``angles``."""
    point = rotate_z(point, angles.z)
    point = rotate_y(point, angles.y)
    return rotate_x(point, angles.x)


def scale_and_rotate(point: Point3D, config: Config) -> Point3D:
    """Scale a point by the zoom and height scale, then rotate it."""
    scaled = replace(
        point,
        x=point.x * config.scale,
        y=point.y * config.scale,
        z=int(point.z * config.z_scale),
    )
    return rotate_point(scaled, config.rotations)


def project_point(point: Point3D, config: Config) -> Point2D:
    """Project a map point to a screen position under ``config``."""
    t = scale_and_rotate(point, config)
    off = config.offset
    if config.projection is Projection.ISOMETRIC:
        x = _roundf((t.x - t.y) * COS_30 + off.x)
        y = _roundf((t.x + t.y) * SIN_30 - t.z + off.y)
    elif config.projection is Projection.CAVALIER:
        x = _roundf(t.x + t.z * NEG_COS_45 + off.x)
        y = _roundf(t.y + t.z * NEG_SIN_45 - t.z + off.y)
    else:
        x = _roundf(t.x + off.x)
        y = _roundf(t.y + off.y)
    return Point2D(x, y, point.color)


def map_bounds(grid: Sequence[Iterable[Point3D]], config: Config) -> Bounds:
    """Return the screen extent of every projected point of ``grid``."""
    projected = [project_point(p, config) for row in grid for p in row]
    if not projected:
        return Bounds(math.inf, -math.inf, math.inf, -math.inf)
    xs = [p.x for p in projected]
    ys = [p.y for p in projected]
    return Bounds(float(min(xs)), float(max(xs)), float(min(ys)), float(max(ys)))