from __future__ import annotations

from enum import Enum


class TileKind(Enum):
    EMPTY = "."
    SOLID = "#"
    LADDER = "H"
    GIRDER = "="
    GOLD = "$"


TileRow = tuple[TileKind, ...]
TileGrid = tuple[TileRow, ...]
