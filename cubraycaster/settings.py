"""Simulation parameters: screen and texture sizes, movement and rotation speeds."""

from __future__ import annotations

from dataclasses import dataclass, field

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
TEXTURE_WIDTH = 64
TEXTURE_HEIGHT = 64
LINEAR_SPEED = 0.04
LATERAL_SPEED = 0.04
ROTATION_SPEED = 0.025


@dataclass(frozen=True)
class PlayerSpeedConfig:
    """Distance moved per frame forwards/backwards and sideways."""

    linear: float = 0.0
    lateral: float = 0.0


@dataclass(frozen=True)
class CameraConfig:
    """Camera rotation per frame, in radians."""

    rotation_speed: float = 0.0


@dataclass(frozen=True)
class DimensionsConfig:
    """Window and texture sizes in pixels."""

    screen_width: int = 0
    screen_height: int = 0
    texture_width: int = 0
    texture_height: int = 0


@dataclass(frozen=True)
class Settings:
    """All tunable parameters of a running simulation."""

    player_speed: PlayerSpeedConfig = field(default_factory=PlayerSpeedConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)
    dimensions: DimensionsConfig = field(default_factory=DimensionsConfig)


def default_settings() -> Settings:
    """Return the parameters the game runs with."""
    return Settings(
        player_speed=PlayerSpeedConfig(linear=LINEAR_SPEED, lateral=LATERAL_SPEED),
        camera=CameraConfig(rotation_speed=ROTATION_SPEED),
        dimensions=DimensionsConfig(
            screen_width=SCREEN_WIDTH,
            screen_height=SCREEN_HEIGHT,
            texture_width=TEXTURE_WIDTH,
            texture_height=TEXTURE_HEIGHT,
        ),
    )