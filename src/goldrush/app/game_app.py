from __future__ import annotations

import logging
import tkinter as tk

from goldrush import config
from goldrush.app.game_loop import GameLoop
from goldrush.app.session import GameSession
from goldrush.domain.game_state import GameState
from goldrush.ui.input_mapper import TkInputMapper
from goldrush.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(self, state: GameState | None = None) -> None:
        # Build the model first so a bad map fails before any window appears.
        state = state or GameState.new()

        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.resizable(False, False)

        # Display surface is fixed by the grid size.
        grid = state.grid
        self.view = TkCanvasView(
            self.root,
            cols=grid.cols,
            rows=grid.rows,
            tile_size=config.TILE_SIZE,
        )

        self.session = GameSession(
            state=state,
            renderer=self.view,
            tick_ms=config.TICK_MS,
        )
        self.input = TkInputMapper(self.root, self.session.input, on_reset=self._reset)

        self.loop = GameLoop(
            root=self.root,
            frame_fn=self.session.frame,
            fps=config.FPS,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        logger.info(
            "Map %dx%d, %d gold, tick %.0f ms",
            grid.cols,
            grid.rows,
            state.total_gold,
            config.TICK_MS,
        )

    def run(self) -> None:
        self.loop.start()
        self.root.mainloop()

    def _reset(self) -> None:
        self.session.reset()
        self.input.release_all()

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()
