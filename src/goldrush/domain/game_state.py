from __future__ import annotations

from dataclasses import dataclass

from goldrush.domain.level import SPAWN, default_template, validate_spawn
from goldrush.domain.tile_map import TileMap, count_gold
from goldrush.domain.tiles import TileGrid


@dataclass(frozen=True)
class Player:
    col: int
    row: int


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer once per frame."""
    tiles: TileGrid
    player: Player
    collected_gold: int
    total_gold: int
    cleared: bool


@dataclass
class GameState:
    grid: TileMap
    spawn: Player
    player: Player
    total_gold: int
    collected_gold: int = 0
    cleared: bool = False

    @classmethod
    def new(cls, template: TileGrid | None = None, spawn: tuple[int, int] = SPAWN) -> GameState:
        if template is None:
            template = default_template()
        validate_spawn(template, spawn)

        start = Player(col=spawn[0], row=spawn[1])
        total = count_gold(template)
        return cls(
            grid=TileMap(template),
            spawn=start,
            player=start,
            total_gold=total,
            cleared=total == 0,
        )

    def reset(self) -> None:
        self.grid.reset()
        self.player = self.spawn
        self.total_gold = count_gold(self.grid.template)
        self.collected_gold = 0
        # A map without gold has nothing left to collect.
        self.cleared = self.total_gold == 0

    def snapshot(self) -> Snapshot:
        return Snapshot(
            tiles=self.grid.tiles(),
            player=self.player,
            collected_gold=self.collected_gold,
            total_gold=self.total_gold,
            cleared=self.cleared,
        )
