"""
Configuration settings for Gold Rush.

Values come from the environment (a local .env file is honoured) with
defaults matching the shipped map.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_number(name, default, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


# Window settings
WINDOW_TITLE = "Gold Rush"
FPS = _env_number("GOLDRUSH_FPS", "60", int)

# Tile settings
TILE_SIZE = _env_number("GOLDRUSH_TILE_SIZE", "32", int)

# Simulation settings
TICK_MS = _env_number("GOLDRUSH_TICK_MS", "120", float)  # one simulation step

# Logging
LOG_LEVEL = os.getenv("GOLDRUSH_LOG_LEVEL", "INFO").upper()

# Colors
COLOR_BACKGROUND = "#000000"
COLOR_BRICK = "#a0522d"
COLOR_BRICK_EDGE = "#7a3b1e"
COLOR_LADDER = "#f5c518"
COLOR_GIRDER = "#888888"
COLOR_GOLD = "#ffd700"
COLOR_GOLD_EDGE = "#b8860b"
COLOR_PLAYER_BODY = "#00bfff"
COLOR_PLAYER_HEAD = "#ffe4b5"
COLOR_TEXT = "#ffffff"


def validate() -> None:
    """Raise ValueError if a setting cannot drive the game."""
    if TILE_SIZE <= 0:
        raise ValueError(f"GOLDRUSH_TILE_SIZE must be positive, got {TILE_SIZE}")
    if TICK_MS <= 0:
        raise ValueError(f"GOLDRUSH_TICK_MS must be positive, got {TICK_MS}")
    if FPS <= 0:
        raise ValueError(f"GOLDRUSH_FPS must be positive, got {FPS}")
