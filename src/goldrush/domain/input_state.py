from __future__ import annotations

from enum import Enum


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class InputState:
    """
    Latched key state polled by the simulation.
    Latest write wins; there is no event queue.
    """

    def __init__(self) -> None:
        self._pressed: dict[Direction, bool] = {}

    def set_pressed(self, key: Direction, pressed: bool) -> None:
        self._pressed[key] = pressed

    def is_pressed(self, key: Direction) -> bool:
        return self._pressed.get(key, False)

    def clear(self) -> None:
        self._pressed.clear()
