from __future__ import annotations

import logging
import time
import tkinter as tk
from collections.abc import Callable

logger = logging.getLogger(__name__)


class GameLoop:
    def __init__(
        self,
        *,
        root: tk.Tk,
        frame_fn: Callable[[float], None],
        fps: int = 60,
    ) -> None:
        self._root = root
        self._frame_fn = frame_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))

        self._running = False
        self._after_id: str | None = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        if not self._running:
            return

        try:
            self._frame_fn(time.monotonic() * 1000.0)
        except Exception:
            # Fail fast rather than keep drawing a corrupt state.
            logger.exception("Frame callback failed; stopping game loop")
            self.stop()
            raise

        self._schedule_next()
