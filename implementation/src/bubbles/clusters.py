from __future__ import annotations

from typing import List, Set

from bubbles.grid import Grid
from bubbles.lattice import Cell, Lattice
from bubbles.store import RoundState


def find_cluster(grid: Grid, lattice: Lattice, row: int, col: int) -> List[Cell]:
    """Same-colour component containing (row, col), or [] if that cell is empty."""
    color = grid.get(row, col)
    if color is None:
        return []
    seen: Set[Cell] = set()
    cluster: List[Cell] = []
    stack: List[Cell] = [(row, col)]
    while stack:
        r, c = stack.pop()
        if (r, c) in seen or not grid.in_bounds(r, c):
            continue
        seen.add((r, c))
        if grid.get(r, c) != color:
            continue
        cluster.append((r, c))
        stack.extend(lattice.neighbors(r, c))
    return cluster


def pop_cluster(
    grid: Grid,
    lattice: Lattice,
    state: RoundState,
    row: int,
    col: int,
    threshold: int = 3,
    reward: int = 10,
) -> List[Cell]:
    """Remove the component at (row, col) if it reaches `threshold` cells."""
    cluster = find_cluster(grid, lattice, row, col)
    if len(cluster) < threshold:
        return []
    for r, c in cluster:
        grid.clear(r, c)
    state.record_pop(len(cluster), reward)
    return cluster
