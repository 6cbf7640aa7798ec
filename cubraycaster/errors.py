"""Error types raised while loading and running a scene, and their report format."""

from __future__ import annotations

ERROR_PREFIX = "\033[91mError\n"
ERROR_SUFFIX = "\033[0m\n"
INFO_PREFIX = "\033[96m"
INFO_SUFFIX = "\033[0m\n"

ERROR_ARGC = "This program takes a single argument as parameter."
ERROR_CUB = "This program takes a .cub map file as parameter."
ERROR_OPEN = "Error while opening file."
ERROR_EMPTY_FILE = "The file is empty."
ERROR_UNKNOWN_IDENTIFIER = (
    "Invalid or unknown identifier found in .cub file. Expected: NO, SO, WE, "
    "EA, F, C, or map data. Ensure the map is a single, closed block "
    "surrounded by walls (1)."
)
ERROR_MISSING_TEXTURE_PATH = (
    "Missing path after texture identifier. Expected one or more spaces "
    "followed by a valid texture path."
)
ERROR_ALLOC = "Memory allocation failed."
ERROR_TEXTURE_PATH_EMPTY = (
    "Texture path is empty. Expected a valid path after identifier "
    "(e.g. NO ./path_to_texture)."
)
ERROR_DUPLICATE_TEXTURE = (
    "Duplicate texture path detected. Each texture (NO, SO, WE, EA) must be "
    "defined only once in the .cub file."
)
ERROR_MISSING_COLOR_VALUE = (
    "Missing value after color identifier. Expected one or more spaces "
    "followed by a valid RGB value."
)
ERROR_DUPLICATE_COLOR = (
    "Duplicate color detected. Each color (F or C) must be defined only once "
    "in the .cub file."
)
ERROR_INVALID_RGB = (
    "Invalid RGB color format. Expected format: R,G,B with values between "
    "0 and 255."
)
ERROR_MAP_NOT_SINGLE_BLOCK = (
    "Map is not a single block. Unexpected map content after map ended."
)
ERROR_MAP_NOT_AT_THE_END = (
    "Invalid map position in .cub file.\nThe map must appear at the end of "
    "the file."
)
ERROR_INVALID_CHAR = (
    "The map contains an invalid character.\nOnly the following characters "
    "are allowed:\n'0' (floor), '1' (wall), 'N', 'S', 'E', 'W' (player "
    "directions)."
)
ERROR_NUMBER_CHARACTER = (
    "Invalid number of player starting positions.\nThe map must contain "
    "exactly one starting position among the characters: 'N', 'S', 'E', "
    "or 'W'."
)
ERROR_MAP_TOO_SMALL = (
    "The map is too small.\nMinimum required size is:\n  - 4x4\n  - or 3x5\n"
    "  - or 5x3\nEnsure your map meets one of these minimum dimensions."
)
ERROR_MAP_NOT_CLOSED = (
    "The map is not closed. Player can escape through a hole or space."
)
ERROR_EMPTY_MAP = (
    "Map data is missing or empty in the .cub file.\nExpected a map layout "
    "defined with characters: '1', '0', 'N', 'S', 'E', 'W'."
)
ERROR_MISSING_CONFIG = (
    "Incomplete configuration in .cub file.\nMissing one or more required "
    "elements: textures (NO, SO, WE, EA) or colors (F, C)."
)
ERROR_TEXTURE_PATH_NULL = (
    "A texture path is missing. All texture paths (NO, SO, WE, EA) must be "
    "defined."
)
ERROR_TEXTURE_NOT_ACCESSIBLE = (
    "Cannot access texture file : {path}\nMake sure the path exists and is "
    "readable."
)
ERROR_TEXTURE_NOT_PNG = (
    "Texture file must be a .png file. Expected extension: .png"
)
ERROR_MLX_INIT = (
    "Failed to initialize the display.\nEnsure that your system supports a "
    "graphical window and try again."
)
ERROR_LOAD_TEXTURE = (
    "Failed to load a texture.\nCheck the file path and ensure the image "
    "exists and is valid."
)
ERROR_LOAD_IMAGE = (
    "Failed to convert texture to image.\nEnsure the display is properly "
    "initialized and your textures are valid."
)
ERROR_NEW_IMAGE = (
    "Failed to create a new image.\nEnsure the display is properly "
    "initialized and sufficient memory is available."
)
ERROR_DISPLAY_IMAGE = (
    "Failed to display image in the window.\nEnsure the display is "
    "initialized and the window is valid."
)
ERROR_SCREEN_NOT_INITIALIZED = (
    "Screen buffer is not initialized.\nCreate the screen before rendering "
    "frames."
)

INFO_ESCAPE_EXIT = (
    "[EXIT] Escape key pressed.\nApplication terminated gracefully.\n"
    "Resources have been released."
)
INFO_WINDOW_CLOSE = (
    "[EXIT] Window closed by user.\nApplication terminated gracefully.\n"
    "Resources have been released."
)


class CubError(Exception):
    """Base class of every error the program reports before exiting with status 1."""

    default_message = "An unexpected error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message else self.default_message
        super().__init__(self.message)


class ArgumentError(CubError):
    """The command line is not a single path to a .cub file."""

    default_message = ERROR_ARGC


class ParseError(CubError):
    """The configuration part of a .cub file is malformed or incomplete."""

    default_message = ERROR_UNKNOWN_IDENTIFIER


class MapError(CubError):
    """The map part of a .cub file is missing, malformed or not closed."""

    default_message = ERROR_EMPTY_MAP


class GraphicsError(CubError):
    """The window, an image or a texture could not be created or loaded."""

    default_message = ERROR_MLX_INIT


def error_report(error: BaseException) -> str:
    """Return the coloured text written to standard error for ``error``."""
    message = error.message if isinstance(error, CubError) else str(error)
    return f"{ERROR_PREFIX}{message}{ERROR_SUFFIX}"


def info_report(message: str) -> str:
    """Return the coloured text written to standard output for an exit notice."""
    return f"{INFO_PREFIX}{message}{INFO_SUFFIX}"