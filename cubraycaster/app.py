"""Command-line entry point, input handling and the main game loop."""

from __future__ import annotations

import sys
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from enum import Enum

from PIL import Image as PilImage

from cubraycaster.errors import (
    ERROR_ARGC,
    ERROR_CUB,
    ERROR_DISPLAY_IMAGE,
    ERROR_LOAD_TEXTURE,
    ERROR_MLX_INIT,
    INFO_ESCAPE_EXIT,
    INFO_WINDOW_CLOSE,
    ArgumentError,
    CubError,
    GraphicsError,
    error_report,
    info_report,
)
from cubraycaster.player import Player, player_from_start
from cubraycaster.raycast import Image, WallTextures, render_frame, rgb_to_rgba
from cubraycaster.scene import Scene, load_scene
from cubraycaster.settings import Settings, default_settings

FRAMES_PER_SECOND = 60
SPRINT_FACTOR = 1.5
WINDOW_TITLE = "cub3D"

_BOLD_YELLOW = "\033[1;33m"
_BOLD_CYAN = "\033[1;36m"
_RESET = "\033[0m"
_RULE = "====================\n"


class Key(Enum):
    """Keys the game reacts to."""

    ESCAPE = "escape"
    LEFT_SHIFT = "left_shift"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    W = "w"
    A = "a"
    S = "s"
    D = "d"


def validate_arguments(argv: Sequence[str]) -> str:
    """Return the scene path from the arguments, which must be one ``.cub`` file."""
    if len(argv) != 1:
        raise ArgumentError(ERROR_ARGC)
    path = argv[0]
    dot = path.rfind(".")
    if dot <= 0 or path[dot:] != ".cub":
        raise ArgumentError(ERROR_CUB)
    return path


def load_texture(path: str) -> Image:
    """Load an image file as an RGBA texture."""
    try:
        with PilImage.open(path) as source:
            rgba = source.convert("RGBA")
            width, height = rgba.size
            data = bytearray(rgba.tobytes())
    except (OSError, ValueError):
        raise GraphicsError(ERROR_LOAD_TEXTURE) from None
    if width == 0 or height == 0:
        raise GraphicsError(ERROR_LOAD_TEXTURE)
    return Image(width, height, data)


def _layout_cell(cell: str) -> str:
    return {" ": ".", "\t": "\\t", "\r": "\\r"}.get(cell, cell)


def _format_layout(scene: Scene) -> str:
    grid = scene.grid
    width = grid.width
    lines = [f"\n{_BOLD_YELLOW}Map Layout:{_RESET}\n", "\n", _RULE]
    for row in grid.rows:
        cells = "".join(
            _layout_cell(row[x]) if x < len(row) else "*" for x in range(width)
        )
        lines.append(f"|{cells}|\n")
    lines.append(_RULE)
    return "".join(lines)


def format_map_data(scene: Scene) -> str:
    """Return the debug summary of a scene's map, colours, textures and start."""
    config = scene.config
    grid = scene.grid
    floor = config.floor or (0, 0, 0)
    ceiling = config.ceiling or (0, 0, 0)

    def path_text(path: str | None) -> str:
        return path if path is not None else "(null)"

    parts = [
        f"\n{_BOLD_CYAN}=== Map Data ==={_RESET}\n",
        f"\n{_BOLD_YELLOW}Map Dimensions:{_RESET}\n",
        f"  Width : {grid.width}\n",
        f"  Height: {grid.height}\n",
    ]
    if grid.rows:
        parts.append(_format_layout(scene))
    else:
        parts.append(f"\n{_BOLD_YELLOW}Map Layout:{_RESET} (none loaded)\n")
    parts.extend(
        [
            f"\n{_BOLD_YELLOW}Floor Color:{_RESET}   "
            f"R:{floor[0]:3d} G:{floor[1]:3d} B:{floor[2]:3d}\n",
            f"{_BOLD_YELLOW}Ceiling Color:{_RESET} "
            f"R:{ceiling[0]:3d} G:{ceiling[1]:3d} B:{ceiling[2]:3d}\n",
            f"\n{_BOLD_YELLOW}Textures:{_RESET}\n",
            f"  North:  {path_text(config.north)}\n",
            f"  South:  {path_text(config.south)}\n",
            f"  West:   {path_text(config.west)}\n",
            f"  East:   {path_text(config.east)}\n",
            f"\n{_BOLD_YELLOW}Player Info:{_RESET}\n",
            f"  Position: ({grid.player_x:.2f}, {grid.player_y:.2f})\n",
            f"  Direction: '{grid.player_direction or '-'}'\n",
            f"\n{_BOLD_CYAN}======================{_RESET}\n",
        ]
    )
    return "".join(parts)


def format_player(player: Player) -> str:
    """Return the debug summary of the player's position, direction and plane."""
    return (
        "=== Player Data ===\n"
        f"Position   : ({player.position_x:.2f}, {player.position_y:.2f})\n"
        f"Direction  : ({player.direction_x:.3f}, {player.direction_y:.3f})\n"
        f"Plane (FOV): ({player.plane_x:.3f}, {player.plane_y:.3f})\n"
        f"{_RULE}"
    )


@dataclass(eq=False)
class Game:
    """A running game: scene, textures, player state and the screen buffer."""

    scene: Scene
    textures: WallTextures
    settings: Settings = field(default_factory=default_settings)
    player: Player = field(init=False)
    screen: Image = field(init=False)
    floor_color: int = field(init=False)
    ceiling_color: int = field(init=False)

    def __post_init__(self) -> None:
        grid = self.scene.grid
        self.player = player_from_start(grid.player_direction, grid.player_x, grid.player_y)
        config = self.scene.config
        self.floor_color = rgb_to_rgba(config.floor or (0, 0, 0))
        self.ceiling_color = rgb_to_rgba(config.ceiling or (0, 0, 0))
        dims = self.settings.dimensions
        self.screen = Image(dims.screen_width, dims.screen_height)

    def handle_input(self, pressed: Collection[Key]) -> bool:
        """Apply the held keys to the player; return False when escape asks to quit."""
        if Key.ESCAPE in pressed:
            return False
        grid = self.scene.grid
        linear = self.settings.player_speed.linear
        lateral = self.settings.player_speed.lateral
        rotation = self.settings.camera.rotation_speed
        if Key.LEFT_SHIFT in pressed:
            linear *= SPRINT_FACTOR
        if Key.LEFT in pressed:
            self.player.rotate(-rotation)
        if Key.RIGHT in pressed:
            self.player.rotate(rotation)
        if Key.W in pressed or Key.UP in pressed:
            self.player.move_linear(grid, linear, 1)
        if Key.S in pressed or Key.DOWN in pressed:
            self.player.move_linear(grid, linear, -1)
        if Key.A in pressed:
            self.player.move_lateral(grid, lateral, -1)
        if Key.D in pressed:
            self.player.move_lateral(grid, lateral, 1)
        return True

    def tick(self, pressed: Collection[Key]) -> bool:
        """Run one frame: handle input, then render. Return False to stop."""
        if not self.handle_input(pressed):
            return False
        render_frame(
            self.screen,
            self.scene.grid,
            self.player,
            self.textures,
            self.ceiling_color,
            self.floor_color,
        )
        return True


def _load_wall_textures(scene: Scene) -> WallTextures:
    config = scene.config
    return WallTextures(
        north=load_texture(config.north or ""),
        south=load_texture(config.south or ""),
        west=load_texture(config.west or ""),
        east=load_texture(config.east or ""),
    )


def _run_window(scene: Scene, settings: Settings) -> int:
    import pygame

    dims = settings.dimensions
    try:
        pygame.init()
        window = pygame.display.set_mode((dims.screen_width, dims.screen_height))
        pygame.display.set_caption(WINDOW_TITLE)
    except pygame.error:
        pygame.quit()
        raise GraphicsError(ERROR_MLX_INIT) from None
    try:
        game = Game(scene, _load_wall_textures(scene), settings)
        bindings = {
            Key.ESCAPE: pygame.K_ESCAPE,
            Key.LEFT_SHIFT: pygame.K_LSHIFT,
            Key.LEFT: pygame.K_LEFT,
            Key.RIGHT: pygame.K_RIGHT,
            Key.UP: pygame.K_UP,
            Key.DOWN: pygame.K_DOWN,
            Key.W: pygame.K_w,
            Key.A: pygame.K_a,
            Key.S: pygame.K_s,
            Key.D: pygame.K_d,
        }
        clock = pygame.time.Clock()
        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            state = pygame.key.get_pressed()
            pressed = {key for key, code in bindings.items() if state[code]}
            if not game.tick(pressed):
                sys.stdout.write(info_report(INFO_ESCAPE_EXIT))
                return 0
            try:
                frame = pygame.image.frombuffer(
                    bytes(game.screen.pixels),
                    (game.screen.width, game.screen.height),
                    "RGBA",
                )
                window.blit(frame, (0, 0))
            except (pygame.error, ValueError):
                raise GraphicsError(ERROR_DISPLAY_IMAGE) from None
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
        sys.stdout.write(format_map_data(scene))
        sys.stdout.write(format_player(game.player))
        sys.stdout.write(info_report(INFO_WINDOW_CLOSE))
        return 0
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and run the game window."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = validate_arguments(args)
        settings = default_settings()
        scene = load_scene(path)
        return _run_window(scene, settings)
    except CubError as error:
        sys.stderr.write(error_report(error))
        return 1


if __name__ == "__main__":
    sys.exit(main())