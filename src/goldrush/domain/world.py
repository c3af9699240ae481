from __future__ import annotations

import logging

from goldrush.domain.game_state import GameState, Player
from goldrush.domain.input_state import Direction, InputState

logger = logging.getLogger(__name__)


class World:
    def step(self, state: GameState, inp: InputState) -> None:
        """
        Advance the simulation by one tick.

        Order per tick: support check, falling (pre-empts all input),
        up, down, left, right, then gold pickup. Each directional check
        sees the position left by the previous one, so a vertical and a
        horizontal move can both land in the same tick.
        """
        if state.cleared:
            return

        grid = state.grid
        col, row = state.player.col, state.player.row

        # ----- Support -----
        on_ladder = grid.is_ladder(col, row)
        on_girder = grid.is_girder(col, row)
        on_ground = grid.is_solid(col, row + 1)

        # ----- Falling -----
        if not (on_ladder or on_girder or on_ground):
            if not grid.is_solid(col, row + 1):
                state.player = Player(col=col, row=row + 1)
            return

        # ----- Vertical -----
        if inp.is_pressed(Direction.UP) and (on_ladder or grid.is_ladder(col, row - 1)):
            if not grid.is_solid(col, row - 1):
                row -= 1
        if inp.is_pressed(Direction.DOWN) and (on_ladder or on_ground):
            if not grid.is_solid(col, row + 1):
                row += 1

        # ----- Horizontal -----
        if inp.is_pressed(Direction.LEFT):
            if not grid.is_solid(col - 1, row):
                col -= 1
        if inp.is_pressed(Direction.RIGHT):
            if not grid.is_solid(col + 1, row):
                col += 1

        if (col, row) != (state.player.col, state.player.row):
            state.player = Player(col=col, row=row)

        # ----- Gold pickup -----
        if grid.collect_gold_at(col, row):
            state.collected_gold += 1
            logger.debug("Gold at (%d, %d): %d/%d", col, row, state.collected_gold, state.total_gold)
            if state.collected_gold >= state.total_gold:
                state.cleared = True
                logger.info("All %d gold collected, level cleared", state.total_gold)
