from __future__ import annotations

import tkinter as tk

from goldrush import config
from goldrush.domain.game_state import Snapshot
from goldrush.domain.tiles import TileGrid, TileKind


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, cols: int, rows: int, tile_size: int) -> None:
        self._tile = tile_size
        self._w = cols * tile_size
        self._h = rows * tile_size
        self._drawn_tiles: TileGrid | None = None

        self.canvas = tk.Canvas(
            root,
            width=self._w,
            height=self._h,
            highlightthickness=0,
            background=config.COLOR_BACKGROUND,
        )
        self.canvas.pack()

        self._body_id = self.canvas.create_rectangle(0, 0, 0, 0, outline="", fill=config.COLOR_PLAYER_BODY)
        self._head_id = self.canvas.create_oval(0, 0, 0, 0, outline="", fill=config.COLOR_PLAYER_HEAD)
        self._text_id = self.canvas.create_text(
            8, 8, anchor="nw", text="", fill=config.COLOR_TEXT, font=("TkFixedFont", 12)
        )

    def render(self, snapshot: Snapshot) -> None:
        # Tiles only change on pickup or reset.
        if snapshot.tiles != self._drawn_tiles:
            self._draw_tiles(snapshot.tiles)
            self._drawn_tiles = snapshot.tiles

        self.canvas.itemconfigure(
            self._text_id,
            text=f"Gold: {snapshot.collected_gold} / {snapshot.total_gold}",
        )

        self.canvas.delete("overlay")
        if snapshot.cleared:
            self.canvas.itemconfigure(self._body_id, state="hidden")
            self.canvas.itemconfigure(self._head_id, state="hidden")
            self.canvas.create_rectangle(
                0, 0, self._w, self._h, fill="#000000", outline="", stipple="gray50", tags=("overlay",)
            )
            self.canvas.create_text(
                self._w / 2,
                self._h / 2,
                text="CLEAR!",
                fill=config.COLOR_GOLD,
                font=("TkFixedFont", 48, "bold"),
                tags=("overlay",),
            )
            return

        t = self._tile
        px = snapshot.player.col * t
        py = snapshot.player.row * t
        self.canvas.itemconfigure(self._body_id, state="normal")
        self.canvas.itemconfigure(self._head_id, state="normal")
        self.canvas.coords(self._body_id, px + t * 0.25, py + t * 0.31, px + t * 0.75, py + t * 0.81)
        self.canvas.coords(self._head_id, px + t * 0.28, py + t * 0.0, px + t * 0.72, py + t * 0.44)

    def _draw_tiles(self, tiles: TileGrid) -> None:
        self.canvas.delete("tile")
        t = self._tile
        for row, cells in enumerate(tiles):
            for col, kind in enumerate(cells):
                x = col * t
                y = row * t
                if kind is TileKind.SOLID:
                    self.canvas.create_rectangle(
                        x, y, x + t, y + t, fill=config.COLOR_BRICK, outline=config.COLOR_BRICK_EDGE, tags=("tile",)
                    )
                elif kind is TileKind.LADDER:
                    left = x + t * 0.31
                    right = x + t * 0.69
                    opts = {"fill": config.COLOR_LADDER, "width": 3, "tags": ("tile",)}
                    self.canvas.create_line(left, y, left, y + t, **opts)
                    self.canvas.create_line(right, y, right, y + t, **opts)
                    for i in range(3):
                        hy = y + t * (0.19 + i * 0.31)
                        self.canvas.create_line(left, hy, right, hy, **opts)
                elif kind is TileKind.GIRDER:
                    self.canvas.create_rectangle(
                        x, y + t / 2 - 3, x + t, y + t / 2 + 3, fill=config.COLOR_GIRDER, outline="", tags=("tile",)
                    )
                elif kind is TileKind.GOLD:
                    cx = x + t / 2
                    cy = y + t / 2
                    r = t / 4
                    self.canvas.create_oval(
                        cx - r,
                        cy - r,
                        cx + r,
                        cy + r,
                        fill=config.COLOR_GOLD,
                        outline=config.COLOR_GOLD_EDGE,
                        width=2,
                        tags=("tile",),
                    )

        # Keep tiles underneath the player and HUD.
        self.canvas.tag_lower("tile")
