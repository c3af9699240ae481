"""Tests for the per-tick state machine."""

import random

from goldrush.domain.game_state import GameState, Player
from goldrush.domain.input_state import Direction, InputState
from goldrush.domain.level import parse_template
from goldrush.domain.tile_map import count_gold
from goldrush.domain.tiles import TileKind
from goldrush.domain.world import World


def make_state(rows, spawn) -> GameState:
    # Gold sealed under the floor keeps small maps from starting out cleared.
    sealed = list(rows) + ["$" * len(rows[0])]
    return GameState.new(parse_template(sealed), spawn)


def held(*directions: Direction) -> InputState:
    inp = InputState()
    for d in directions:
        inp.set_pressed(d, True)
    return inp


def run(state: GameState, inp: InputState, ticks: int = 1) -> None:
    world = World()
    for _ in range(ticks):
        world.step(state, inp)


def test_falling_ignores_input_and_only_changes_row():
    state = make_state([
        ".$..",
        ".$..",
        "....",
        "####",
    ], (1, 0))
    before = state.snapshot()

    run(state, held(Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN))

    after = state.snapshot()
    assert after.player == Player(col=1, row=1)
    assert after.tiles == before.tiles
    assert after.collected_gold == before.collected_gold == 0
    assert after.cleared is False


def test_landing_then_walking():
    state = make_state([
        "....",
        "....",
        "####",
    ], (1, 0))
    inp = held(Direction.RIGHT)

    run(state, inp)
    assert state.player == Player(col=1, row=1)
    run(state, inp)
    assert state.player == Player(col=2, row=1)


def test_standing_still_on_ladder_with_ground_below():
    state = make_state([
        "..",
        "H.",
        "##",
    ], (0, 1))
    run(state, InputState(), ticks=5)
    assert state.player == Player(col=0, row=1)


def test_climb_ladder_and_fall_off_the_top():
    state = make_state([
        "....",
        "..H.",
        "..H.",
        "####",
    ], (1, 2))
    inp = held(Direction.RIGHT)
    run(state, inp)
    assert state.player == Player(col=2, row=2)

    inp = held(Direction.UP)
    run(state, inp)
    assert state.player == Player(col=2, row=1)
    run(state, inp)
    assert state.player == Player(col=2, row=0)

    # Above the ladder there is no support.
    run(state, InputState())
    assert state.player == Player(col=2, row=1)


def test_climb_onto_ladder_from_directly_below_its_bottom():
    state = make_state([
        "...",
        ".H.",
        "...",
        "###",
    ], (1, 2))
    run(state, held(Direction.UP))
    assert state.player == Player(col=1, row=1)

    # Hanging on the ladder is supported.
    run(state, InputState(), ticks=3)
    assert state.player == Player(col=1, row=1)


def test_up_blocked_by_solid_and_boundary():
    state = make_state([
        ".#.",
        ".H.",
        "###",
    ], (1, 1))
    run(state, held(Direction.UP))
    assert state.player == Player(col=1, row=1)

    state = make_state([
        "H..",
        "###",
    ], (0, 0))
    run(state, held(Direction.UP))
    assert state.player == Player(col=0, row=0)


def test_descend_ladder_until_ground():
    state = make_state([
        ".H.",
        ".H.",
        "...",
        "###",
    ], (1, 0))
    inp = held(Direction.DOWN)
    run(state, inp)
    assert state.player == Player(col=1, row=1)
    run(state, inp)
    assert state.player == Player(col=1, row=2)
    run(state, inp)
    assert state.player == Player(col=1, row=2)


def test_girder_supports_but_does_not_climb():
    state = make_state([
        "...",
        "==.",
        "...",
        "###",
    ], (0, 1))
    run(state, held(Direction.UP))
    assert state.player == Player(col=0, row=1)
    run(state, held(Direction.DOWN))
    assert state.player == Player(col=0, row=1)

    run(state, held(Direction.RIGHT))
    assert state.player == Player(col=1, row=1)
    run(state, held(Direction.RIGHT))
    assert state.player == Player(col=2, row=1)

    # Walked off the end of the girder.
    run(state, held(Direction.RIGHT))
    assert state.player == Player(col=2, row=2)


def test_vertical_resolves_before_horizontal_in_same_tick():
    state = make_state([
        "....",
        ".H..",
        ".H#.",
        "####",
    ], (1, 2))
    # Right is blocked on row 2 but open on row 1 after climbing.
    run(state, held(Direction.UP, Direction.RIGHT))
    assert state.player == Player(col=2, row=1)


def test_left_and_right_together_cancel_out():
    state = make_state([
        "...",
        "###",
    ], (1, 0))
    run(state, held(Direction.LEFT, Direction.RIGHT))
    assert state.player == Player(col=1, row=0)


def test_edges_of_map_block_horizontal_movement():
    state = make_state([
        "..",
        "##",
    ], (0, 0))
    run(state, held(Direction.LEFT))
    assert state.player == Player(col=0, row=0)
    run(state, held(Direction.RIGHT), ticks=3)
    assert state.player == Player(col=1, row=0)


def test_walking_right_from_spawn_collects_gold_once():
    state = GameState.new()
    assert state.player == Player(col=1, row=12)
    inp = held(Direction.RIGHT)

    for _ in range(3):
        run(state, inp)
        assert state.collected_gold == 0
    assert state.player == Player(col=4, row=12)

    run(state, inp)
    assert state.player == Player(col=5, row=12)
    assert state.collected_gold == 1
    assert state.grid.tile_at(5, 12) is TileKind.EMPTY

    run(state, inp)
    assert state.collected_gold == 1
    # Left behind at spawn.
    assert state.grid.is_gold(1, 12)


def test_collecting_all_gold_clears_and_freezes():
    state = GameState.new(parse_template([
        "$.$",
        "###",
    ]), (1, 0))
    run(state, held(Direction.RIGHT))
    assert (state.collected_gold, state.cleared) == (1, False)

    run(state, held(Direction.LEFT), ticks=2)
    assert state.player == Player(col=0, row=0)
    assert (state.collected_gold, state.cleared) == (2, True)

    frozen = state.snapshot()
    run(state, held(Direction.RIGHT, Direction.UP), ticks=10)
    assert state.snapshot() == frozen


def test_gold_on_spawn_is_collected_when_standing_still():
    state = GameState.new(parse_template([
        "$.",
        "##",
    ]), (0, 0))
    run(state, InputState())
    assert state.collected_gold == 1
    assert state.cleared is True


def test_cleared_state_is_a_noop():
    state = GameState.new()
    state.cleared = True
    frozen = state.snapshot()
    run(state, held(*Direction), ticks=20)
    assert state.snapshot() == frozen


def test_gold_is_conserved_and_player_stays_in_bounds():
    state = GameState.new()
    template = state.grid.template
    total = count_gold(template)
    rng = random.Random(1234)
    world = World()
    inp = InputState()

    for _ in range(2000):
        for d in Direction:
            inp.set_pressed(d, rng.random() < 0.35)
        world.step(state, inp)

        assert total == state.collected_gold + count_gold(state.grid.tiles())
        assert 0 <= state.collected_gold <= state.total_gold
        assert state.cleared == (state.collected_gold == state.total_gold)
        assert 0 <= state.player.col < state.grid.cols
        assert 0 <= state.player.row < state.grid.rows
