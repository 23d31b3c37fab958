import random

import pytest

from bubbles.grid import Grid
from bubbles.store import RoundState
from bubbles.types import PALETTE, BubbleColor


def test_new_grid_is_empty(grid):
    assert grid.count() == 0
    assert grid.occupied() == []
    assert grid.is_empty(0, 0)


def test_out_of_bounds_reads_as_empty(grid):
    assert grid.get(-1, 0) is None
    assert grid.get(0, grid.cols) is None
    assert grid.is_empty(grid.rows, 0)


def test_out_of_bounds_writes_raise(grid):
    with pytest.raises(IndexError):
        grid.set(-1, 0, BubbleColor.RED)
    with pytest.raises(IndexError):
        grid.place(0, grid.cols, BubbleColor.RED)


def test_place_refuses_occupied_cell(grid):
    grid.place(3, 4, BubbleColor.BLUE)
    with pytest.raises(ValueError):
        grid.place(3, 4, BubbleColor.RED)
    assert grid.get(3, 4) is BubbleColor.BLUE


def test_clear_and_occupied(grid):
    grid.set(0, 1, BubbleColor.GREEN)
    grid.set(2, 2, BubbleColor.RED)
    assert grid.occupied() == [(0, 1, BubbleColor.GREEN), (2, 2, BubbleColor.RED)]
    grid.clear(0, 1)
    assert grid.count() == 1


def test_fill_rows_fills_only_top_rows(grid):
    grid.fill_rows(6, PALETTE, random.Random(7))
    assert grid.count() == 6 * grid.cols
    assert all(r < 6 for r, _, _ in grid.occupied())


def test_copy_is_independent(grid):
    grid.set(1, 1, BubbleColor.YELLOW)
    clone = grid.copy()
    clone.clear(1, 1)
    assert grid.get(1, 1) is BubbleColor.YELLOW


def test_palette_is_closed_and_hex_decodes():
    assert len(PALETTE) == 6
    assert BubbleColor.RED.rgb == (0xF9, 0x41, 0x44)
    assert BubbleColor.BLUE.lighten(1.0) == (255, 255, 255)


def test_round_state_score_never_decreases():
    state = RoundState()
    state.add_score(10)
    state.add_score(-5)
    state.add_score(0)
    assert state.score == 10


def test_round_state_lives_run_out():
    state = RoundState(lives=2)
    assert state.lose_life() is False
    assert state.lives == 1
    assert state.lose_life() is True
    assert state.game_over
    # Further losses after the end change nothing
    assert state.lose_life() is False
    assert state.lives == 0
    assert state.misses == 2


def test_round_state_records_pops_and_drops():
    state = RoundState()
    state.record_pop(4, 10)
    state.record_drop(3, 5)
    state.record_drop(0, 5)
    assert state.score == 55
    assert state.bubbles_popped == 4
    assert state.bubbles_dropped == 3
