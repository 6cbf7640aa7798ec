"""Player position, orientation and collision-aware movement."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cubraycaster.grid import MapGrid

_ORIENTATIONS: dict[str, tuple[float, float, float, float]] = {
    "N": (0.0, -1.0, 0.66, 0.0),
    "S": (0.0, 1.0, -0.66, 0.0),
    "E": (1.0, 0.0, 0.0, 0.66),
    "W": (-1.0, 0.0, 0.0, -0.66),
}


@dataclass
class Player:
    """Position, unit view direction and camera plane of the player."""

    position_x: float = 0.0
    position_y: float = 0.0
    direction_x: float = 0.0
    direction_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0

    def rotate(self, angle: float) -> None:
        """Turn the view direction and the camera plane by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        old_dx = self.direction_x
        self.direction_x = self.direction_x * cos_a - self.direction_y * sin_a
        self.direction_y = old_dx * sin_a + self.direction_y * cos_a
        old_px = self.plane_x
        self.plane_x = self.plane_x * cos_a - self.plane_y * sin_a
        self.plane_y = old_px * sin_a + self.plane_y * cos_a

    def attempt_move(self, grid: MapGrid, delta_x: float, delta_y: float) -> None:
        """Move by the given offset, sliding along walls instead of entering them."""
        new_x = self.position_x + delta_x
        new_y = self.position_y + delta_y
        cell_x = int(new_x)
        cell_y = int(new_y)
        if grid.is_wall(cell_x, cell_y):
            return
        if not grid.is_wall(cell_x, int(self.position_y)):
            self.position_x = new_x
        if not grid.is_wall(int(self.position_x), cell_y):
            self.position_y = new_y

    def move_linear(self, grid: MapGrid, speed: float, direction: int) -> None:
        """Walk forwards (``direction`` 1) or backwards (-1) along the view direction."""
        self.attempt_move(
            grid,
            direction * self.direction_x * speed,
            direction * self.direction_y * speed,
        )

    def move_lateral(self, grid: MapGrid, speed: float, direction: int) -> None:
        """Strafe right (``direction`` 1) or left (-1) along the camera plane."""
        self.attempt_move(
            grid,
            direction * self.plane_x * speed,
            direction * self.plane_y * speed,
        )


def player_from_start(direction: str, x: float, y: float) -> Player:
    """Create a player at (x, y) facing N, S, E or W with a 66-degree field of view."""
    try:
        dir_x, dir_y, plane_x, plane_y = _ORIENTATIONS[direction]
    except KeyError:
        raise ValueError(f"unknown player direction: {direction!r}") from None
    return Player(
        position_x=x,
        position_y=y,
        direction_x=dir_x,
        direction_y=dir_y,
        plane_x=plane_x,
        plane_y=plane_y,
    )