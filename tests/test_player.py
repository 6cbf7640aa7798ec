import math

import pytest

from cubraycaster.grid import validate_map
from cubraycaster.player import Player, player_from_start


@pytest.fixture
def open_grid():
    return validate_map(["11111", "10001", "10N01", "10001", "11111"])


@pytest.fixture
def pillar_grid():
    return validate_map(["111111", "100001", "1N0101", "100001", "111111"])


@pytest.mark.parametrize(
    "direction, expected",
    [
        ("N", (0.0, -1.0, 0.66, 0.0)),
        ("S", (0.0, 1.0, -0.66, 0.0)),
        ("E", (1.0, 0.0, 0.0, 0.66)),
        ("W", (-1.0, 0.0, 0.0, -0.66)),
    ],
)
def test_player_from_start_orientation(direction, expected):
    player = player_from_start(direction, 3.5, 4.5)
    assert (player.position_x, player.position_y) == (3.5, 4.5)
    assert (
        player.direction_x,
        player.direction_y,
        player.plane_x,
        player.plane_y,
    ) == expected


def test_player_from_start_rejects_unknown_direction():
    with pytest.raises(ValueError):
        player_from_start("X", 1.5, 1.5)


def test_rotate_keeps_lengths_and_perpendicularity():
    player = player_from_start("S", 2.5, 2.5)
    for _ in range(10):
        player.rotate(0.3)
    assert math.hypot(player.direction_x, player.direction_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)
    dot = player.direction_x * player.plane_x + player.direction_y * player.plane_y
    assert dot == pytest.approx(0.0, abs=1e-12)


def test_rotate_back_restores_state():
    player = player_from_start("W", 2.5, 2.5)
    player.rotate(0.7)
    player.rotate(-0.7)
    reference = player_from_start("W", 2.5, 2.5)
    assert player.direction_x == pytest.approx(reference.direction_x)
    assert player.direction_y == pytest.approx(reference.direction_y, abs=1e-12)
    assert player.plane_x == pytest.approx(reference.plane_x, abs=1e-12)
    assert player.plane_y == pytest.approx(reference.plane_y)


def test_quarter_turn_from_north_faces_east():
    player = player_from_start("N", 2.5, 2.5)
    player.rotate(math.pi / 2)
    east = player_from_start("E", 2.5, 2.5)
    assert player.direction_x == pytest.approx(east.direction_x)
    assert player.direction_y == pytest.approx(east.direction_y, abs=1e-12)
    assert player.plane_x == pytest.approx(east.plane_x, abs=1e-12)
    assert player.plane_y == pytest.approx(east.plane_y)


def test_attempt_move_in_open_space(open_grid):
    player = Player(position_x=2.5, position_y=2.5)
    player.attempt_move(open_grid, 0.25, -0.5)
    assert player.position_x == pytest.approx(2.5 + 0.25)
    assert player.position_y == pytest.approx(2.5 - 0.5)


def test_attempt_move_into_wall_is_refused(open_grid):
    player = Player(position_x=2.5, position_y=2.5)
    player.attempt_move(open_grid, -2.0, 0.0)
    assert (player.position_x, player.position_y) == (2.5, 2.5)


def test_attempt_move_outside_map_is_refused(open_grid):
    player = Player(position_x=2.5, position_y=2.5)
    player.attempt_move(open_grid, 0.0, 10.0)
    assert (player.position_x, player.position_y) == (2.5, 2.5)


def test_attempt_move_slides_along_wall(pillar_grid):
    player = Player(position_x=2.5, position_y=2.5)
    player.attempt_move(pillar_grid, 1.0, -1.0)
    assert player.position_x == 2.5
    assert player.position_y == pytest.approx(2.5 - 1.0)


def test_move_linear_forward_and_back(open_grid):
    player = player_from_start("N", 2.5, 2.5)
    player.move_linear(open_grid, 0.5, 1)
    assert player.position_x == 2.5
    assert player.position_y < 2.5
    player.move_linear(open_grid, 0.5, -1)
    assert player.position_y == pytest.approx(2.5)


def test_move_lateral_follows_camera_plane(open_grid):
    player = player_from_start("N", 2.5, 2.5)
    player.move_lateral(open_grid, 0.5, 1)
    assert player.position_y == 2.5
    assert player.position_x > 2.5
    player.move_lateral(open_grid, 0.5, -1)
    assert player.position_x == pytest.approx(2.5)


def test_move_linear_stops_at_wall(open_grid):
    player = player_from_start("N", 2.5, 2.5)
    for _ in range(20):
        player.move_linear(open_grid, 0.3, 1)
    assert not open_grid.is_wall(int(player.position_x), int(player.position_y))
    assert player.position_y >= 1.0