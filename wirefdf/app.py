"""The command that opens a map file in an interactive window."""

from __future__ import annotations

import sys
from array import array
from typing import Optional, Sequence

from .controls import LINE_HEIGHT, TEXT_COLOR, Key, Viewer, instructions
from .geometry import HEIGHT, WIDTH
from .mapfile import MapError, load_map

USAGE = "./fdf <filename>.fdf  or  path/to/<filename>.fdf"


class UsageError(Exception):
    """The command line does not name a map file."""


class _SetupError(Exception):
    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


def format_error(kind: str, message: str) -> str:
    """Return an error line in the program's format."""
    return f"FdF: {kind}: {message}"


def check_arguments(argv: Sequence[str]) -> str:
    """Return the map file named by the arguments that follow the program name."""
    if not argv or "." not in argv[0]:
        raise UsageError(USAGE)
    return argv[0]


def _key_map(pygame) -> dict[int, Key]:
    return {
        pygame.K_r: Key.R,
        pygame.K_LSHIFT: Key.SHIFT_L,
        pygame.K_1: Key.ONE,
        pygame.K_2: Key.TWO,
        pygame.K_3: Key.THREE,
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_i: Key.I,
        pygame.K_p: Key.P,
        pygame.K_o: Key.O,
        pygame.K_EQUALS: Key.EQUAL,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_w: Key.W,
        pygame.K_d: Key.D,
    }


def run(filename: str) -> None:
    """Load a map and show it in a window until the user quits."""
    heightmap = load_map(filename)

    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
    except pygame.error as exc:
        pygame.quit()
        raise _SetupError("Rendering", "Failed to initialize display.") from exc
    try:
        pygame.display.set_caption("fdf")
        pygame.key.set_repeat(300, 30)
        font = pygame.font.Font(None, 22)
        text_rgb = ((TEXT_COLOR >> 16) & 0xFF, (TEXT_COLOR >> 8) & 0xFF, TEXT_COLOR & 0xFF)
        pixel_format = "BGRA" if sys.byteorder == "little" else "ARGB"
        keys = _key_map(pygame)
        viewer: Viewer

        def present() -> None:
            image = viewer.image
            data = array("I", image.pixels).tobytes()
            surface = pygame.image.frombuffer(data, (image.width, image.height), pixel_format)
            screen.fill((0, 0, 0))
            screen.blit(surface, (0, 0))
            for x, y, text in instructions(LINE_HEIGHT):
                screen.blit(font.render(text, True, text_rgb), (x, y))
            pygame.display.flip()

        viewer = Viewer(heightmap, on_redraw=present)
        viewer.redraw()
        clock = pygame.time.Clock()
        while not viewer.closed:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    viewer.closed = True
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    viewer.handle_key_press(keys[event.key])
                elif event.type == pygame.KEYUP and event.key in keys:
                    viewer.handle_key_release(keys[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    viewer.handle_mouse_press(event.button, *event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    viewer.handle_mouse_release(event.button, *event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    viewer.handle_mouse_move(*event.pos)
                if viewer.closed:
                    break
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        filename = check_arguments(args)
    except UsageError as exc:
        print(format_error("Usage", str(exc)), file=sys.stderr)
        return 1
    try:
        run(filename)
    except (MapError, _SetupError) as exc:
        print(format_error(exc.kind, exc.message), file=sys.stderr)
        print(format_error("MLX", "Failed to initialize MLX."), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())