"""Ray casting through the map grid and column drawing into an RGBA image."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

from cubraycaster.errors import ERROR_SCREEN_NOT_INITIALIZED, GraphicsError
from cubraycaster.grid import MapGrid
from cubraycaster.player import Player

_PIXEL = struct.Struct(">I")
_NO_CROSSING = 1e30


@dataclass(eq=False)
class Image:
    """A width x height image stored as RGBA bytes, four per pixel, row by row.

    Colours are 32-bit integers laid out as 0xRRGGBBAA.
    """

    width: int
    height: int
    pixels: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        size = self.width * self.height * 4
        if not self.pixels:
            self.pixels = bytearray(size)
        elif len(self.pixels) != size:
            raise ValueError(
                f"expected {size} bytes of pixel data, got {len(self.pixels)}"
            )

    def _offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * 4

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Write ``color`` at (x, y); coordinates outside the image are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            _PIXEL.pack_into(self.pixels, self._offset(x, y), color & 0xFFFFFFFF)

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return _PIXEL.unpack_from(self.pixels, self._offset(x, y))[0]


@dataclass(frozen=True, eq=False)
class WallTextures:
    """The four wall images, one per facing."""

    north: Image
    south: Image
    west: Image
    east: Image


@dataclass
class Ray:
    """State of one ray cast from the player through a screen column."""

    direction_x: float = 0.0
    direction_y: float = 0.0
    tile_x: int = 0
    tile_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_x: float = 0.0
    delta_y: float = 0.0
    step_x: int = 0
    step_y: int = 0
    hit_side: int = 0
    perp_distance: float = 0.0


def rgb_to_rgba(rgb: tuple[int, int, int]) -> int:
    """Pack an (R, G, B) triple into an opaque 0xRRGGBBAA colour."""
    red, green, blue = rgb
    return ((red << 24) | (green << 16) | (blue << 8) | 0xFF) & 0xFFFFFFFF


def read_texel(image: Image, x: int, y: int) -> int:
    """Return the colour of a texture pixel."""
    return image.pixel(x, y)


def shade_color(color: int) -> int:
    """Halve the red, green and blue components, keeping alpha."""
    alpha = color & 0xFF
    rgb = (color >> 8) & 0x00FFFFFF
    rgb = (rgb >> 1) & 0x007F7F7F
    return ((rgb << 8) | alpha) & 0xFFFFFFFF


def _prepare_ray(player: Player, screen_x: int, screen_width: int) -> Ray:
    camera = 2.0 * screen_x / float(screen_width) - 1.0
    ray = Ray(
        direction_x=player.direction_x + player.plane_x * camera,
        direction_y=player.direction_y + player.plane_y * camera,
        tile_x=int(player.position_x),
        tile_y=int(player.position_y),
    )
    ray.delta_x = _NO_CROSSING if ray.direction_x == 0 else abs(1.0 / ray.direction_x)
    ray.delta_y = _NO_CROSSING if ray.direction_y == 0 else abs(1.0 / ray.direction_y)
    if ray.direction_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (player.position_x - ray.tile_x) * ray.delta_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.tile_x + 1.0 - player.position_x) * ray.delta_x
    if ray.direction_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (player.position_y - ray.tile_y) * ray.delta_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.tile_y + 1.0 - player.position_y) * ray.delta_y
    return ray


def cast_ray(grid: MapGrid, player: Player, screen_x: int, screen_width: int) -> Ray:
    """Trace the ray of one screen column until it reaches a wall."""
    ray = _prepare_ray(player, screen_x, screen_width)
    while True:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_x
            ray.tile_x += ray.step_x
            ray.hit_side = 0
        else:
            ray.side_dist_y += ray.delta_y
            ray.tile_y += ray.step_y
            ray.hit_side = 1
        if grid.is_wall(ray.tile_x, ray.tile_y):
            break
    if ray.hit_side == 0:
        ray.perp_distance = ray.side_dist_x - ray.delta_x
    else:
        ray.perp_distance = ray.side_dist_y - ray.delta_y
    return ray


def select_texture(textures: WallTextures, ray: Ray, player: Player) -> tuple[Image, int]:
    """Return the wall texture the ray hit and the texture column to draw."""
    if ray.hit_side != 0:
        texture = textures.north if ray.direction_y < 0 else textures.south
        wall = player.position_x + ray.perp_distance * ray.direction_x
    else:
        texture = textures.west if ray.direction_x < 0 else textures.east
        wall = player.position_y + ray.perp_distance * ray.direction_y
    wall -= math.floor(wall)
    hit_x = int(wall * texture.width)
    if (ray.hit_side == 0 and ray.direction_x > 0) or (
        ray.hit_side == 1 and ray.direction_y < 0
    ):
        hit_x = texture.width - hit_x - 1
    return texture, hit_x


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def draw_column(
    screen: Image,
    screen_x: int,
    ray: Ray,
    texture: Image,
    hit_x: int,
    ceiling: int,
    floor: int,
) -> None:
    """Draw ceiling, textured wall slice and floor for one screen column."""
    height = screen.height
    if ray.perp_distance > 0:
        wall_height = int(height / ray.perp_distance)
    else:
        wall_height = height
    if wall_height <= 0:
        wall_height = 1
    wall_start = _trunc_div(-wall_height, 2) + height // 2
    wall_end = _trunc_div(wall_height, 2) + height // 2
    wall_start = max(wall_start, 0)
    if wall_end >= height:
        wall_end = height - 1

    for screen_y in range(wall_start):
        screen.put_pixel(screen_x, screen_y, ceiling)

    step = texture.height / wall_height
    texture_y = (wall_start - _trunc_div(height - wall_height, 2)) * step
    for screen_y in range(wall_start, wall_end + 1):
        color = read_texel(texture, hit_x, int(texture_y) % texture.height)
        if ray.hit_side == 1:
            color = shade_color(color)
        screen.put_pixel(screen_x, screen_y, color)
        texture_y += step

    for screen_y in range(wall_end + 1, height):
        screen.put_pixel(screen_x, screen_y, floor)


def render_frame(
    screen: Image | None,
    grid: MapGrid,
    player: Player,
    textures: WallTextures,
    ceiling: int,
    floor: int,
) -> None:
    """Render the whole view of ``player`` into ``screen``."""
    if screen is None:
        raise GraphicsError(ERROR_SCREEN_NOT_INITIALIZED)
    for screen_x in range(screen.width):
        ray = cast_ray(grid, player, screen_x, screen.width)
        texture, hit_x = select_texture(textures, ray, player)
        draw_column(screen, screen_x, ray, texture, hit_x, ceiling, floor)