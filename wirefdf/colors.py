"""Packing, unpacking and blending of 0xTTRRGGBB colours."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol


class ColorChannel(enum.IntEnum):
    """Bit offset of each channel in a packed colour."""

    T = 24
    R = 16
    G = 8
    B = 0


@dataclass(frozen=True)
class Rgb:
    """A colour split into red, green and blue bytes."""

    r: int
    g: int
    b: int


class _HasXY(Protocol):
    x: int
    y: int


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack four channel bytes into one 32-bit colour."""
    return (t << 24 | r << 16 | g << 8 | b) & 0xFFFFFFFF


def get_color_param(trgb: int, param: ColorChannel) -> int:
    """Extract one channel byte from a packed colour."""
    return (trgb >> int(param)) & 0xFF


def int_to_rgb(n: int) -> Rgb:
    """Split a packed colour into its red, green and blue bytes."""
    return Rgb(
        get_color_param(n, ColorChannel.R),
        get_color_param(n, ColorChannel.G),
        get_color_param(n, ColorChannel.B),
    )


def interpolation_factor(curr: _HasXY, start: _HasXY, end: _HasXY) -> float:
    """Return how far ``curr`` lies from ``start`` toward ``end`` along the main axis."""
    dx = end.x - start.x
    dy = end.y - start.y
    if abs(dx) > abs(dy):
        if dx != 0:
            return (curr.x - start.x) / dx
    elif dy != 0:
        return (curr.y - start.y) / dy
    return 0.0