"""Reading ``.fdf`` height maps into grids of points."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .geometry import DEFAULT_COLOR, Point3D
from .numparse import INT_MAX, INT_MIN, atoi, strtol

MAP_ERROR_KIND = "Map Initialization"

_TRIM_SET = " \t\n"


class MapError(Exception):
    """A map file could not be opened or is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.kind = MAP_ERROR_KIND
        self.message = message


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of map points, indexed ``grid[y][x]``."""

    width: int
    height: int
    grid: tuple[tuple[Point3D, ...], ...]


def has_valid_extension(filename: str, extension: str) -> bool:
    """Tell whether the text after the last dot of ``filename`` begins ``extension``.

    A dot that opens the name, or no dot at all, means no extension.
    """
    if not filename or not extension:
        return False
    dot = filename.rfind(".")
    if dot <= 0:
        return False
    return extension.startswith(filename[dot + 1 :])


def is_hex_color(token: str | None) -> bool:
    """Tell whether a token carries a ``0x`` or ``0X`` prefix."""
    return bool(token) and token[:2] in ("0x", "0X")


def _split_words(text: str, sep: str) -> list[str]:
    return [word for word in text.split(sep) if word]


def _split_lines(text: str) -> list[str]:
    """Split text after each newline, keeping the newline on its line."""
    lines = text.split("\n")
    result = [line + "\n" for line in lines[:-1]]
    if lines[-1]:
        result.append(lines[-1])
    return result


def _measure(lines: list[str]) -> tuple[int, int]:
    width = 0
    height = 0
    for line in lines:
        count = len(_split_words(line.strip(_TRIM_SET), " "))
        if width == 0:
            width = count
        elif count != width:
            raise MapError("Invalid dimensions.")
        height += 1
    return width, height


def _parse_point(token: str, x: int, y: int) -> Point3D:
    parts = _split_words(token, ",")
    z = atoi(parts[0] if parts else "")
    if z >= INT_MAX or z <= INT_MIN:
        raise MapError("Failed to allocate grid.")
    color = DEFAULT_COLOR
    if len(parts) > 1 and is_hex_color(parts[1]):
        color = strtol(parts[1], 16)
    return Point3D(float(x), float(y), z, color)


def _parse_row(line: str, width: int, y: int) -> tuple[Point3D, ...]:
    tokens = _split_words(line, " ")[:width]
    row = [_parse_point(token, x, y) for x, token in enumerate(tokens)]
    row.extend(Point3D(0.0, 0.0, 0, 0) for _ in range(width - len(row)))
    return tuple(row)


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from the lines of a map file.

    Every non-first line must hold as many space-separated tokens as the
    first; each token is ``z`` or ``z,0xRRGGBB``.
    """
    lines = list(lines)
    width, height = _measure(lines)
    grid = tuple(_parse_row(line, width, y) for y, line in enumerate(lines))
    return HeightMap(width, height, grid)


def load_map(filename: str | Path) -> HeightMap:
    """Read and parse a ``.fdf`` map file."""
    name = str(filename)
    if not has_valid_extension(name, "fdf"):
        raise MapError("File is missing or inaccessible.")
    try:
        data = Path(name).read_bytes()
    except OSError as exc:
        raise MapError("Failed to open file.") from exc
    return parse_map(_split_lines(data.decode("latin-1")))