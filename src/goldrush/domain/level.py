from __future__ import annotations

from collections.abc import Sequence

from goldrush.domain.exceptions import MapTemplateError
from goldrush.domain.tiles import TileGrid, TileKind


# Ladder runs down col 8; platforms alternate left/right of it.
# The girder bridge on row 5 links the ladder to the right-hand side.
MAP_ROWS: tuple[str, ...] = (
    "....................",
    ".$...$..H...........",
    "########H...........",
    "........H..$..$..$..",
    "........H###########",
    ".$..$.$.H========...",
    "########H...........",
    "........H.$..$..$...",
    "........H###########",
    ".$.$.$..H...........",
    "########H...........",
    "........H...........",
    ".$...$.....$...$...$",
    "####################",
)

SPAWN: tuple[int, int] = (1, 12)  # (col, row)


def parse_template(rows: Sequence[str]) -> TileGrid:
    if not rows:
        raise MapTemplateError("Map template has no rows.")

    width = len(rows[0])
    if width == 0:
        raise MapTemplateError("Map template rows must not be empty.")

    parsed: list[tuple[TileKind, ...]] = []
    for r, line in enumerate(rows):
        if len(line) != width:
            raise MapTemplateError(
                f"Map template is not rectangular: row {r} has {len(line)} cells, expected {width}."
            )
        try:
            parsed.append(tuple(TileKind(ch) for ch in line))
        except ValueError as e:
            raise MapTemplateError(f"Unknown tile in row {r}: {e}") from e

    return tuple(parsed)


def validate_spawn(template: TileGrid, spawn: tuple[int, int]) -> None:
    col, row = spawn
    if row < 0 or row >= len(template) or col < 0 or col >= len(template[0]):
        raise MapTemplateError(f"Spawn {spawn} lies outside the map.")
    if template[row][col] is TileKind.SOLID:
        raise MapTemplateError(f"Spawn {spawn} is inside a solid tile.")


def default_template() -> TileGrid:
    template = parse_template(MAP_ROWS)
    validate_spawn(template, SPAWN)
    return template
