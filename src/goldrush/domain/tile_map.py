from __future__ import annotations

from collections.abc import Iterable, Sequence

from goldrush.domain.tiles import TileGrid, TileKind


def count_gold(rows: Iterable[Sequence[TileKind]]) -> int:
    return sum(1 for row in rows for t in row if t is TileKind.GOLD)


class TileMap:
    """
    Mutable play grid backed by an immutable template.
    Only gold cells change during play (gold -> empty).
    """

    def __init__(self, template: TileGrid) -> None:
        self._template = template
        self._rows: list[list[TileKind]] = []
        self.reset()

    @property
    def rows(self) -> int:
        return len(self._template)

    @property
    def cols(self) -> int:
        return len(self._template[0])

    @property
    def template(self) -> TileGrid:
        return self._template

    def reset(self) -> None:
        # Fresh list per row so pickups never touch the template.
        self._rows = [list(row) for row in self._template]

    def tile_at(self, col: int, row: int) -> TileKind:
        # Everything outside the grid is an invisible wall.
        if row < 0 or row >= self.rows or col < 0 or col >= self.cols:
            return TileKind.SOLID
        return self._rows[row][col]

    def is_solid(self, col: int, row: int) -> bool:
        return self.tile_at(col, row) is TileKind.SOLID

    def is_ladder(self, col: int, row: int) -> bool:
        return self.tile_at(col, row) is TileKind.LADDER

    def is_girder(self, col: int, row: int) -> bool:
        return self.tile_at(col, row) is TileKind.GIRDER

    def is_gold(self, col: int, row: int) -> bool:
        return self.tile_at(col, row) is TileKind.GOLD

    def collect_gold_at(self, col: int, row: int) -> bool:
        if not self.is_gold(col, row):
            return False
        self._rows[row][col] = TileKind.EMPTY
        return True

    def tiles(self) -> TileGrid:
        return tuple(tuple(row) for row in self._rows)
