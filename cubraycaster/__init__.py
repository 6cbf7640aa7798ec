"""Textured grid raycaster: .cub scene parsing, player movement, rendering and a game window."""

__version__ = "0.1.0"