"""Parsing of .cub scene files: texture paths, colours and the map."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from cubraycaster.errors import (
    ERROR_DUPLICATE_COLOR,
    ERROR_DUPLICATE_TEXTURE,
    ERROR_EMPTY_FILE,
    ERROR_EMPTY_MAP,
    ERROR_INVALID_RGB,
    ERROR_MISSING_COLOR_VALUE,
    ERROR_MISSING_CONFIG,
    ERROR_MISSING_TEXTURE_PATH,
    ERROR_OPEN,
    ERROR_TEXTURE_NOT_ACCESSIBLE,
    ERROR_TEXTURE_NOT_PNG,
    ERROR_TEXTURE_PATH_EMPTY,
    ERROR_UNKNOWN_IDENTIFIER,
    MapError,
    ParseError,
)
from cubraycaster.grid import (
    WHITESPACE,
    MapGrid,
    extract_map_lines,
    normalize_rows,
    validate_map,
)

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_VALID_LEADS = "NSWEFC1"
_TEXTURE_IDS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLOR_IDS = {"F": "floor", "C": "ceiling"}

RGB = tuple[int, int, int]


@dataclass
class SceneConfig:
    """Texture paths and floor/ceiling colours read from a scene file."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: RGB | None = None
    ceiling: RGB | None = None


@dataclass(frozen=True)
class Scene:
    """A fully validated scene: its configuration and its map."""

    config: SceneConfig
    grid: MapGrid


def parse_int_strict(text: str) -> int:
    """Parse a 32-bit integer with optional leading blanks and sign, nothing after it.

    Raises ValueError on trailing characters or overflow.
    """
    i, n = 0, len(text)
    while i < n and text[i] in WHITESPACE:
        i += 1
    sign = 1
    if i < n and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < n and "0" <= text[i] <= "9":
        result = result * 10 + (ord(text[i]) - ord("0"))
        i += 1
        if (sign == 1 and result > INT_MAX) or (sign == -1 and -result < INT_MIN):
            raise ValueError(f"integer out of range: {text!r}")
    if i < n:
        raise ValueError(f"not an integer: {text!r}")
    return sign * result


def parse_rgb(text: str) -> RGB:
    """Parse ``R,G,B`` with each component in 0..255; empty fields are ignored."""
    fields = [part for part in text.split(",") if part]
    if len(fields) != 3:
        raise ParseError(ERROR_INVALID_RGB)
    values = []
    for field in fields:
        try:
            value = parse_int_strict(field)
        except ValueError:
            raise ParseError(ERROR_INVALID_RGB) from None
        if not 0 <= value <= 255:
            raise ParseError(ERROR_INVALID_RGB)
        values.append(value)
    return (values[0], values[1], values[2])


def parse_texture_path(rest: str) -> str:
    """Return the path following a texture identifier, given the text after it."""
    if not rest.startswith(" "):
        raise ParseError(ERROR_MISSING_TEXTURE_PATH)
    path = rest[1:].strip(WHITESPACE)
    if not path:
        raise ParseError(ERROR_TEXTURE_PATH_EMPTY)
    return path


def _parse_color(rest: str) -> RGB:
    if not rest.startswith(" "):
        raise ParseError(ERROR_MISSING_COLOR_VALUE)
    return parse_rgb(rest[1:].strip(WHITESPACE))


def parse_config(lines: Iterable[str]) -> SceneConfig:
    """Read every texture and colour line; map lines are passed over."""
    config = SceneConfig()
    any_line = False
    for line in lines:
        any_line = True
        head = line.lstrip(WHITESPACE)
        if not head:
            continue
        if head[0] not in _VALID_LEADS:
            raise ParseError(ERROR_UNKNOWN_IDENTIFIER)
        texture = _TEXTURE_IDS.get(head[:2])
        color = _COLOR_IDS.get(head[0])
        if texture is not None:
            if getattr(config, texture) is not None:
                raise ParseError(ERROR_DUPLICATE_TEXTURE)
            setattr(config, texture, parse_texture_path(head[2:]))
        elif color is not None:
            if getattr(config, color) is not None:
                raise ParseError(ERROR_DUPLICATE_COLOR)
            setattr(config, color, _parse_color(head[1:]))
    if not any_line:
        raise ParseError(ERROR_EMPTY_FILE)
    return config


def _is_png(path: str) -> bool:
    dot = path.rfind(".")
    return dot > 0 and path[dot:] == ".png"


def ensure_config_ready(config: SceneConfig) -> None:
    """Check every element is defined and every texture is a readable .png file."""
    paths = (config.north, config.south, config.west, config.east)
    if any(path is None for path in paths) or config.floor is None or config.ceiling is None:
        raise ParseError(ERROR_MISSING_CONFIG)
    if not all(_is_png(path) for path in paths):
        raise ParseError(ERROR_TEXTURE_NOT_PNG)
    for path in paths:
        try:
            fd = os.open(path, os.O_RDONLY)
        except OSError:
            raise ParseError(ERROR_TEXTURE_NOT_ACCESSIBLE.format(path=path)) from None
        os.close(fd)


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def parse_scene(text: str) -> Scene:
    """Parse and validate the whole content of a .cub file."""
    lines = _split_lines(text)
    config = parse_config(lines)
    raw_rows = extract_map_lines(lines)
    if not raw_rows:
        raise MapError(ERROR_EMPTY_MAP)
    width = max(len(row) for row in raw_rows)
    rows = normalize_rows(raw_rows, width)
    ensure_config_ready(config)
    grid = validate_map(rows)
    return Scene(config=config, grid=grid)


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read a .cub file from disk and parse it."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        raise ParseError(ERROR_OPEN) from None
    return parse_scene(data.decode("utf-8", errors="surrogateescape"))