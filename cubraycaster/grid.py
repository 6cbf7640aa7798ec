"""Map extraction, normalisation and validation for the grid part of a scene."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from cubraycaster.errors import (
    ERROR_EMPTY_MAP,
    ERROR_INVALID_CHAR,
    ERROR_MAP_NOT_AT_THE_END,
    ERROR_MAP_NOT_CLOSED,
    ERROR_MAP_NOT_SINGLE_BLOCK,
    ERROR_MAP_TOO_SMALL,
    ERROR_NUMBER_CHARACTER,
    MapError,
)

WHITESPACE = " \t\n\r\v\f"
PLAYER_CHARS = "NSEW"
ALLOWED_CHARS = "10 " + PLAYER_CHARS
WALL = "1"


@dataclass(frozen=True)
class MapGrid:
    """A validated, rectangular map with the player's starting cell."""

    rows: tuple[str, ...]
    player_direction: str
    player_x: float
    player_y: float

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

    def is_wall(self, x: int, y: int) -> bool:
        """Return True for a wall cell or any cell outside the map."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            return True
        row = self.rows[y]
        return x < len(row) and row[x] == WALL


def _starts_map(line: str) -> bool:
    return line.lstrip(WHITESPACE).startswith(WALL)


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def extract_map_lines(lines: Iterable[str]) -> list[str]:
    """Return the block of map lines, newline removed, checking it is the last content.

    The map starts at the first line whose first non-blank character is ``1``
    and runs while lines keep starting that way. The line that ends the block
    is passed over; every line after it must be blank.
    """
    remaining = iter(lines)
    block: list[str] = []
    for line in remaining:
        if _starts_map(line):
            block.append(_strip_newline(line))
            break
    else:
        return block
    for line in remaining:
        if not _starts_map(line):
            break
        block.append(_strip_newline(line))
    for line in remaining:
        head = line.lstrip(WHITESPACE)
        if head.startswith(WALL):
            raise MapError(ERROR_MAP_NOT_SINGLE_BLOCK)
        if head:
            raise MapError(ERROR_MAP_NOT_AT_THE_END)
    return block


def normalize_rows(rows: Iterable[str], width: int) -> list[str]:
    """Pad every row with spaces to ``width`` and turn tabs and carriage returns into spaces."""
    return [
        row.ljust(width).replace("\t", " ").replace("\r", " ") for row in rows
    ]


def flood_fill(rows: Sequence[str], x: int, y: int) -> frozenset[tuple[int, int]]:
    """Return the cells reachable from (x, y) without crossing a wall.

    Raises MapError when the region touches a space, a missing cell or the
    edge of the map.
    """
    height = len(rows)
    width = max((len(row) for row in rows), default=0)
    visited: set[tuple[int, int]] = set()
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if not (0 <= cy < height and 0 <= cx < width):
            raise MapError(ERROR_MAP_NOT_CLOSED)
        row = rows[cy]
        cell = row[cx] if cx < len(row) else ""
        if cell == "" or cell == " ":
            raise MapError(ERROR_MAP_NOT_CLOSED)
        if (cx, cy) in visited or cell in ("1", "F"):
            continue
        visited.add((cx, cy))
        stack.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))
    return frozenset(visited)


def _is_large_enough(width: int, height: int) -> bool:
    return (
        (width >= 4 and height >= 4)
        or (width >= 3 and height >= 5)
        or (width >= 5 and height >= 3)
    )


def validate_map(rows: Iterable[str]) -> MapGrid:
    """Check characters, player count, size and closure; return the map grid."""
    grid_rows = tuple(rows)
    if not grid_rows:
        raise MapError(ERROR_EMPTY_MAP)
    players: list[tuple[int, int, str]] = []
    for y, row in enumerate(grid_rows):
        for x, cell in enumerate(row):
            if cell in PLAYER_CHARS:
                players.append((x, y, cell))
            elif cell not in ALLOWED_CHARS:
                raise MapError(ERROR_INVALID_CHAR)
    if len(players) != 1:
        raise MapError(ERROR_NUMBER_CHARACTER)
    start_x, start_y, direction = players[0]
    width = max(len(row) for row in grid_rows)
    if not _is_large_enough(width, len(grid_rows)):
        raise MapError(ERROR_MAP_TOO_SMALL)
    flood_fill(grid_rows, start_x, start_y)
    return MapGrid(
        rows=grid_rows,
        player_direction=direction,
        player_x=start_x + 0.5,
        player_y=start_y + 0.5,
    )