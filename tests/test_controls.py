import pytest

from wirefdf.controls import (
    Key,
    MouseButton,
    Viewer,
    instructions,
)
from wirefdf.geometry import MAX_ZOOM, MIN_ZOOM, Config, Point2D, Point3D, Projection
from wirefdf.mapfile import parse_map
from wirefdf.raster import Image, render_map


@pytest.fixture
def redraws():
    return []


@pytest.fixture
def viewer(redraws):
    heightmap = parse_map(["0 0 0\n", "0 10 0\n", "0 0 0\n"])
    return Viewer(heightmap, image=Image(4, 4), on_redraw=lambda: redraws.append(1))


def test_escape_closes_without_redraw(viewer, redraws):
    viewer.handle_key_press(Key.ESCAPE)
    assert viewer.closed is True
    assert redraws == []


def test_shift_toggles_rotation_mode(viewer):
    viewer.handle_key_press(Key.SHIFT_L)
    assert viewer.config.is_rotating is True
    viewer.handle_key_release(Key.SHIFT_L)
    assert viewer.config.is_rotating is False


def test_arrows_adjust_z_scale_when_not_rotating(viewer, redraws):
    before = viewer.config.z_scale
    viewer.handle_key_press(Key.UP)
    assert viewer.config.z_scale == before + 0.5
    viewer.handle_key_press(Key.DOWN)
    viewer.handle_key_press(Key.DOWN)
    assert viewer.config.z_scale == before - 0.5
    assert len(redraws) == 3


def test_arrows_rotate_when_shift_held(viewer):
    viewer.handle_key_press(Key.SHIFT_L)
    viewer.handle_key_press(Key.LEFT)
    viewer.handle_key_press(Key.UP)
    viewer.handle_key_press(Key.DOWN)
    rot = viewer.config.rotations
    assert (rot.x, rot.y, rot.z) == (1.0, -1.0, -1)
    assert viewer.config.z_scale == Config().z_scale


def test_rotation_wraps_at_full_turn(viewer):
    viewer.config.rotations = Point3D(359.0, 0.0, 0, 0)
    viewer.rotate_map(Key.UP)
    assert viewer.config.rotations.x == 0.0


def test_wasd_moves_by_pan_speed(viewer):
    speed = viewer.config.pan_speed
    viewer.handle_key_press(Key.W)
    assert viewer.config.offset.y == -speed
    viewer.handle_key_press(Key.D)
    viewer.handle_key_press(Key.D)
    assert viewer.config.offset.x == 2 * speed
    viewer.handle_key_press(Key.S)
    viewer.handle_key_press(Key.A)
    assert (viewer.config.offset.x, viewer.config.offset.y) == (speed, 0)


def test_zoom_keys_change_scale_within_limits(viewer):
    before = viewer.config.scale
    viewer.handle_key_press(Key.EQUAL)
    assert before < viewer.config.scale <= MAX_ZOOM
    for _ in range(100):
        viewer.handle_key_press(Key.EQUAL)
    assert viewer.config.scale == MAX_ZOOM
    for _ in range(200):
        viewer.handle_key_press(Key.MINUS)
    assert viewer.config.scale == MIN_ZOOM


def test_scroll_zooms_and_redraws_twice(viewer, redraws):
    before = viewer.config.scale
    viewer.handle_mouse_press(MouseButton.SCROLL_UP, 0, 0)
    assert viewer.config.scale > before
    assert len(redraws) == 2
    viewer.handle_mouse_press(MouseButton.SCROLL_DOWN, 0, 0)
    assert viewer.config.scale < before * 1.1


def test_left_drag_pans(viewer):
    viewer.handle_mouse_press(MouseButton.LEFT, 3, 2)
    assert viewer.config.is_panning is True
    assert viewer.config.pan_start == Point2D(3, 2)
    viewer.handle_mouse_move(13, 7)
    # default pan speed equals the default scale, so the offset follows the mouse
    assert (viewer.config.offset.x, viewer.config.offset.y) == (13 - 3, 7 - 2)
    assert (viewer.config.pan_start.x, viewer.config.pan_start.y) == (13, 7)


def test_release_stops_panning(viewer, redraws):
    viewer.handle_mouse_press(MouseButton.LEFT, 0, 0)
    viewer.handle_mouse_release(MouseButton.LEFT, 0, 0)
    count = len(redraws)
    viewer.handle_mouse_move(50, 50)
    assert viewer.config.is_panning is False
    assert viewer.config.offset == Point2D(0, 0)
    assert len(redraws) == count


def test_projection_switch_clears_rotation(viewer):
    viewer.config.rotations = Point3D(30.0, 20.0, 10, 0)
    viewer.handle_key_press(Key.O)
    assert viewer.config.projection is Projection.ORTHOGRAPHIC
    assert (viewer.config.rotations.x, viewer.config.rotations.y, viewer.config.rotations.z) == (
        0.0,
        0.0,
        0,
    )
    viewer.handle_key_press(Key.P)
    assert viewer.config.projection is Projection.CAVALIER
    viewer.handle_key_press(Key.I)
    assert viewer.config.projection is Projection.ISOMETRIC


def test_ortho_variations_only_in_orthographic(viewer):
    viewer.handle_key_press(Key.TWO)
    assert viewer.config.rotations.x == 0.0
    viewer.handle_key_press(Key.O)
    viewer.handle_key_press(Key.TWO)
    assert viewer.config.rotations.x == 90.0
    viewer.handle_key_press(Key.THREE)
    assert (viewer.config.rotations.x, viewer.config.rotations.z) == (90.0, -90)
    viewer.handle_key_press(Key.ONE)
    assert (viewer.config.rotations.x, viewer.config.rotations.z) == (0.0, 0)


def test_reset_restores_defaults(viewer):
    viewer.handle_key_press(Key.EQUAL)
    viewer.handle_key_press(Key.W)
    viewer.handle_key_press(Key.P)
    viewer.handle_key_press(Key.R)
    assert viewer.config == Config()


def test_redraw_draws_pixels_on_full_image():
    heightmap = parse_map(["0 0\n", "0 0\n"])
    viewer = Viewer(heightmap)
    viewer.redraw()
    expected = Image()
    render_map(expected, heightmap, Config())
    assert viewer.image.pixels == expected.pixels
    # default point colour is white, drawn fully opaque
    assert {p for p in viewer.image.pixels if p} == {0xFFFFFFFF}


def test_instructions_lines():
    lines = instructions(25)
    assert lines[0] == (30, 20, "=== Controls (R to Reset) ===")
    assert [text for _, _, text in lines] == [
        "=== Controls (R to Reset) ===",
        "Mouse:",
        "Left-Click + Drag: Pan",
        "Scroll: Zoom",
        "Keyboard:",
        "Esc: Quit",
        "i/p/o: Switch Projection",
        "Shift + Arrows: Rotate",
        "Arrows: Adjust Z Scale",
        "W/A/S/D: Move",
        "+/-: Zoom",
        "1/2/3: Ortho Modes (if active)",
    ]


@pytest.mark.parametrize("line_height", [10, 25, 40])
def test_instruction_lines_step_by_line_height(line_height):
    ys = [y for _, y, _ in instructions(line_height)]
    steps = [b - a for a, b in zip(ys, ys[1:])]
    assert all(step > 0 and step % line_height == 0 for step in steps)