from __future__ import annotations

from collections import deque
from typing import Deque, List, Set

from bubbles.grid import Grid
from bubbles.lattice import Cell, Lattice
from bubbles.store import RoundState


def find_anchored(grid: Grid, lattice: Lattice) -> Set[Cell]:
    """Occupied cells reachable from the top row through occupied cells."""
    anchored: Set[Cell] = set()
    queue: Deque[Cell] = deque()
    for col in range(grid.cols):
        if not grid.is_empty(0, col):
            anchored.add((0, col))
            queue.append((0, col))
    while queue:
        r, c = queue.popleft()
        for nr, nc in lattice.neighbors(r, c):
            if (nr, nc) in anchored or grid.is_empty(nr, nc):
                continue
            anchored.add((nr, nc))
            queue.append((nr, nc))
    return anchored


def find_floating(grid: Grid, lattice: Lattice) -> List[Cell]:
    anchored = find_anchored(grid, lattice)
    return [(r, c) for r, c, _ in grid.occupied() if (r, c) not in anchored]


def drop_floating(grid: Grid, lattice: Lattice, state: RoundState, reward: int = 5) -> List[Cell]:
    """Remove every cell cut off from the top row, scoring `reward` each."""
    floating = find_floating(grid, lattice)
    for r, c in floating:
        grid.clear(r, c)
    state.record_drop(len(floating), reward)
    return floating
