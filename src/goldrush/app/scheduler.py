from __future__ import annotations


class FixedStepScheduler:
    """
    Turns wall-clock frame time into a whole number of fixed simulation ticks.

    Leftover time stays in the accumulator and carries into the next frame,
    so the tick count for a given stretch of real time does not depend on
    how often frames arrive.
    """

    def __init__(self, tick_ms: float) -> None:
        if tick_ms <= 0:
            raise ValueError("tick_ms must be > 0")
        self._tick_ms = float(tick_ms)
        self._accum_ms = 0.0
        self._last_ms: float | None = None

    @property
    def tick_ms(self) -> float:
        return self._tick_ms

    @property
    def accumulator_ms(self) -> float:
        return self._accum_ms

    def advance(self, elapsed_ms: float, *, halted: bool = False) -> int:
        """Add elapsed time and return how many ticks are due now."""
        self._accum_ms += max(0.0, float(elapsed_ms))
        if halted:
            return 0

        steps = 0
        while self._accum_ms >= self._tick_ms:
            self._accum_ms -= self._tick_ms
            steps += 1
        return steps

    def frame(self, now_ms: float, *, halted: bool = False) -> int:
        # First frame only sets the baseline.
        if self._last_ms is None:
            elapsed = 0.0
        else:
            elapsed = now_ms - self._last_ms
        self._last_ms = now_ms
        return self.advance(elapsed, halted=halted)

    def reset(self) -> None:
        self._accum_ms = 0.0
        self._last_ms = None
