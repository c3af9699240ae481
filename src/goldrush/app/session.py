from __future__ import annotations

import logging
from typing import Protocol

from goldrush.app.scheduler import FixedStepScheduler
from goldrush.domain.game_state import GameState, Snapshot
from goldrush.domain.input_state import InputState
from goldrush.domain.world import World

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, snapshot: Snapshot) -> None:
        ...


class GameSession:
    """
    One independent game: state, input latches, tick scheduler and renderer.
    Everything the loop touches between frames goes through here.
    """

    def __init__(
        self,
        *,
        state: GameState,
        renderer: Renderer,
        tick_ms: float,
        inp: InputState | None = None,
        world: World | None = None,
    ) -> None:
        self.state = state
        self.input = inp or InputState()
        self.scheduler = FixedStepScheduler(tick_ms)
        self.world = world or World()
        self._renderer = renderer

    def frame(self, now_ms: float) -> int:
        steps = self.scheduler.frame(now_ms, halted=self.state.cleared)
        for _ in range(steps):
            self.world.step(self.state, self.input)

        # Always draw, even when no tick was due.
        self._renderer.render(self.state.snapshot())
        return steps

    def reset(self) -> None:
        # All in one callback: the loop never sees a half-reset game.
        self.state.reset()
        self.scheduler.reset()
        self.input.clear()
        logger.info("Game reset (%d gold on the map)", self.state.total_gold)
