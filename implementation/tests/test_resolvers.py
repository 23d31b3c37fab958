from bubbles.attachment import AttachOutcome, attach, candidate_cells, find_free_cell
from bubbles.clusters import find_cluster, pop_cluster
from bubbles.connectivity import drop_floating, find_anchored, find_floating
from bubbles.types import BubbleColor, Projectile

R = BubbleColor.RED
B = BubbleColor.BLUE
G = BubbleColor.GREEN


def shot_at(lattice, row, col, color):
    x, y = lattice.cell_to_position(row, col)
    return Projectile(x=x, y=y, vx=0.0, vy=0.0, radius=lattice.radius, color=color)


def fill(grid, cells):
    for (r, c), color in cells.items():
        grid.set(r, c, color)


# ── Cluster resolver ─────────────────────────────────────────────────


def test_find_cluster_follows_same_colour_only(grid, lattice):
    fill(grid, {(0, 0): R, (0, 1): R, (1, 0): R, (0, 2): B, (1, 1): B})
    assert sorted(find_cluster(grid, lattice, 0, 0)) == [(0, 0), (0, 1), (1, 0)]
    assert sorted(find_cluster(grid, lattice, 0, 2)) == [(0, 2), (1, 1)]
    assert find_cluster(grid, lattice, 5, 5) == []


def test_pair_does_not_pop(grid, lattice, state):
    fill(grid, {(0, 0): R, (0, 1): R})
    assert pop_cluster(grid, lattice, state, 0, 0) == []
    assert grid.count() == 2
    assert state.score == 0


def test_triple_pops_for_ten_each(grid, lattice, state):
    fill(grid, {(0, 0): R, (0, 1): R, (0, 2): R, (0, 3): G})
    popped = pop_cluster(grid, lattice, state, 0, 1)
    assert sorted(popped) == [(0, 0), (0, 1), (0, 2)]
    assert grid.occupied() == [(0, 3, G)]
    assert state.score == 30


# ── Connectivity analyser ────────────────────────────────────────────


def test_anchored_reaches_through_occupied_cells_only(grid, lattice):
    # (2, 0) hangs from (1, 0); (4, 4) touches nothing
    fill(grid, {(0, 0): R, (1, 0): B, (2, 0): G, (4, 4): R})
    assert find_anchored(grid, lattice) == {(0, 0), (1, 0), (2, 0)}
    assert find_floating(grid, lattice) == [(4, 4)]


def test_drop_floating_scores_five_each(grid, lattice, state):
    fill(grid, {(0, 5): R, (3, 3): B, (3, 4): B})
    dropped = drop_floating(grid, lattice, state)
    assert sorted(dropped) == [(3, 3), (3, 4)]
    assert grid.occupied() == [(0, 5, R)]
    assert state.score == 10


def test_empty_top_row_drops_everything(grid, lattice, state):
    fill(grid, {(1, 0): R, (2, 0): R})
    drop_floating(grid, lattice, state)
    assert grid.count() == 0


def test_drop_floating_reaches_fixed_point(grid, lattice, state):
    fill(grid, {(0, 0): R, (1, 0): B, (3, 3): G, (4, 3): G, (6, 6): B})
    drop_floating(grid, lattice, state)
    score = state.score
    assert drop_floating(grid, lattice, state) == []
    assert state.score == score


# ── Attachment resolver ──────────────────────────────────────────────


def test_candidates_are_impact_then_neighbours(lattice):
    assert candidate_cells(lattice, 2, 4) == [(2, 4)] + lattice.neighbors(2, 4)


def test_place_on_empty_grid_top_left(grid, lattice, state, settings):
    result = attach(shot_at(lattice, 0, 0, R), grid, lattice, state, settings)
    assert result.outcome is AttachOutcome.PLACED
    assert result.cell == (0, 0)
    assert result.popped == []
    assert result.dropped == []
    assert grid.occupied() == [(0, 0, R)]
    assert state.score == 0
    assert state.lives == 3


def test_fourth_bubble_pops_cluster_of_four(grid, lattice, state, settings):
    fill(grid, {(0, 0): R, (0, 1): R, (1, 0): R})
    result = attach(shot_at(lattice, 1, 1, R), grid, lattice, state, settings)
    assert result.placed
    assert sorted(result.popped) == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert grid.count() == 0
    assert state.score == 40


def test_pop_cuts_loose_hanging_bubble(grid, lattice, state, settings):
    # (1, 0) hangs only from the red pair; (0, 5) is anchored on its own
    fill(grid, {(0, 0): R, (0, 1): R, (1, 0): B, (0, 5): G})
    result = attach(shot_at(lattice, 0, 2, R), grid, lattice, state, settings)
    assert sorted(result.popped) == [(0, 0), (0, 1), (0, 2)]
    assert result.dropped == [(1, 0)]
    assert grid.occupied() == [(0, 5, G)]
    assert state.score == 3 * 10 + 5


def test_occupied_impact_cell_falls_back_to_neighbour(grid, lattice, state, settings):
    fill(grid, {(0, 3): B})
    result = attach(shot_at(lattice, 0, 3, R), grid, lattice, state, settings)
    # First free entry in the neighbour order of an even row is (0, 2)
    assert result.cell == (0, 2)
    assert grid.get(0, 2) is R
    assert grid.get(0, 3) is B


def test_neighbour_search_skips_out_of_bounds(grid, lattice, state, settings):
    fill(grid, {(0, 0): B})
    # (0, -1) is out of bounds, so the next candidate (0, 1) is used
    assert find_free_cell(grid, lattice, 0, 0) == (0, 1)
    result = attach(shot_at(lattice, 0, 0, R), grid, lattice, state, settings)
    assert result.cell == (0, 1)


def test_fully_surrounded_impact_costs_a_life(grid, lattice, state, settings):
    colors = [R, B, G, R, B, G, R]
    fill(grid, dict(zip(candidate_cells(lattice, 2, 4), colors)))
    # Anchor the blob so nothing could drop either way
    for row in range(2):
        for col in range(grid.cols):
            if grid.is_empty(row, col):
                grid.set(row, col, G)
    before = grid.copy()

    result = attach(shot_at(lattice, 2, 4, B), grid, lattice, state, settings)
    assert result.outcome is AttachOutcome.BLOCKED
    assert not result.ended_round
    assert grid.cells == before.cells
    assert state.lives == 2
    assert state.score == 0


def test_last_life_lost_ends_round(grid, lattice, state, settings):
    fill(grid, dict.fromkeys(candidate_cells(lattice, 2, 4), R))
    state.lives = 1
    result = attach(shot_at(lattice, 2, 4, B), grid, lattice, state, settings)
    assert result.ended_round
    assert state.game_over
    assert state.lives == 0
