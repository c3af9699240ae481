from __future__ import annotations

import tkinter as tk
from collections.abc import Callable

from goldrush.domain.input_state import Direction, InputState

KEY_BINDINGS: dict[str, Direction] = {
    "Up": Direction.UP,
    "w": Direction.UP,
    "W": Direction.UP,
    "Down": Direction.DOWN,
    "s": Direction.DOWN,
    "S": Direction.DOWN,
    "Left": Direction.LEFT,
    "a": Direction.LEFT,
    "A": Direction.LEFT,
    "Right": Direction.RIGHT,
    "d": Direction.RIGHT,
    "D": Direction.RIGHT,
}

RESET_KEYS = frozenset({"r", "R"})


class TkInputMapper:
    """
    Feeds Tk key events into the latched InputState.
    A direction stays pressed while any of its keys is held.

    Auto-repeat on X11 arrives as release+press pairs. Releases are applied
    from an idle callback, after the queued press has had a chance to cancel
    them, so a held key never reads as released between repeats.
    """

    def __init__(
        self,
        root: tk.Misc,
        inp: InputState,
        *,
        on_reset: Callable[[], None],
    ) -> None:
        self._root = root
        self._input = inp
        self._on_reset = on_reset
        self._held: dict[Direction, set[str]] = {d: set() for d in Direction}
        self._pending_release: set[str] = set()

        root.bind("<KeyPress>", self._on_key_down)
        root.bind("<KeyRelease>", self._on_key_up)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_key_down(self, evt: tk.Event) -> None:
        if evt.keysym in RESET_KEYS:
            self._on_reset()
            return

        direction = KEY_BINDINGS.get(evt.keysym)
        if direction is None:
            return
        self._pending_release.discard(evt.keysym)
        self._held[direction].add(evt.keysym)
        self._input.set_pressed(direction, True)

    def _on_key_up(self, evt: tk.Event) -> None:
        keysym = evt.keysym
        if keysym not in KEY_BINDINGS:
            return
        self._pending_release.add(keysym)
        self._root.after_idle(lambda: self._apply_release(keysym))

    def _apply_release(self, keysym: str) -> None:
        if keysym not in self._pending_release:
            return  # re-pressed
        self._pending_release.discard(keysym)

        direction = KEY_BINDINGS[keysym]
        held = self._held[direction]
        held.discard(keysym)
        self._input.set_pressed(direction, bool(held))

    def release_all(self) -> None:
        self._pending_release.clear()
        for held in self._held.values():
            held.clear()
        self._input.clear()
