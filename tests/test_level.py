"""Tests for the compiled-in map template and its validation."""

import pytest

from goldrush.domain.exceptions import MapTemplateError
from goldrush.domain.level import MAP_ROWS, SPAWN, default_template, parse_template, validate_spawn
from goldrush.domain.tile_map import count_gold
from goldrush.domain.tiles import TileKind


def test_default_template_dimensions_and_gold():
    template = default_template()
    assert len(template) == 14
    assert all(len(row) == 20 for row in template)
    assert count_gold(template) == 19


def test_default_template_landmarks():
    template = default_template()
    col, row = SPAWN
    assert template[row + 1][col] is TileKind.SOLID
    assert template[5][8] is TileKind.LADDER
    assert template[5][9] is TileKind.GIRDER
    assert template[13] == (TileKind.SOLID,) * 20


def test_parse_template_rejects_ragged_rows():
    with pytest.raises(MapTemplateError, match="not rectangular"):
        parse_template(["...", "..", "..."])


def test_parse_template_rejects_unknown_tile():
    with pytest.raises(MapTemplateError, match="row 1"):
        parse_template(["...", ".x.", "###"])


def test_parse_template_rejects_empty():
    with pytest.raises(MapTemplateError):
        parse_template([])
    with pytest.raises(MapTemplateError):
        parse_template([""])


def test_validate_spawn_rejects_solid_and_out_of_bounds():
    template = parse_template(["...", "###"])
    validate_spawn(template, (0, 0))
    with pytest.raises(MapTemplateError, match="solid"):
        validate_spawn(template, (1, 1))
    with pytest.raises(MapTemplateError, match="outside"):
        validate_spawn(template, (3, 0))
    with pytest.raises(MapTemplateError, match="outside"):
        validate_spawn(template, (0, -1))


def test_map_rows_are_immutable_tuple():
    assert isinstance(MAP_ROWS, tuple)
