"""Snap a touching projectile into the lattice and resolve the aftermath.

The impact cell is the lattice centre nearest to the projectile. It and its
six neighbours are tried in order; the first empty in-bounds one receives the
bubble, after which matching clusters pop and unsupported cells drop. When
all seven are taken the shot is lost and costs a life.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from bubbles.clusters import pop_cluster
from bubbles.config import Settings
from bubbles.connectivity import drop_floating
from bubbles.grid import Grid
from bubbles.lattice import Cell, Lattice
from bubbles.store import RoundState
from bubbles.types import Projectile


class AttachOutcome(Enum):
    PLACED = "placed"
    OUT_OF_BOUNDS = "out_of_bounds"
    BLOCKED = "blocked"


@dataclass
class AttachResult:
    outcome: AttachOutcome
    cell: Optional[Cell] = None
    popped: List[Cell] = field(default_factory=list)
    dropped: List[Cell] = field(default_factory=list)
    ended_round: bool = False

    @property
    def placed(self) -> bool:
        return self.outcome is AttachOutcome.PLACED


def candidate_cells(lattice: Lattice, row: int, col: int) -> List[Cell]:
    return [(row, col)] + lattice.neighbors(row, col)


def find_free_cell(grid: Grid, lattice: Lattice, row: int, col: int) -> Optional[Cell]:
    for r, c in candidate_cells(lattice, row, col):
        if grid.in_bounds(r, c) and grid.is_empty(r, c):
            return r, c
    return None


def attach(
    projectile: Projectile,
    grid: Grid,
    lattice: Lattice,
    state: RoundState,
    settings: Settings,
) -> AttachResult:
    row, col = lattice.position_to_cell(projectile.x, projectile.y)
    if not grid.in_bounds(row, col):
        return AttachResult(AttachOutcome.OUT_OF_BOUNDS)

    target = find_free_cell(grid, lattice, row, col)
    if target is None:
        ended = state.lose_life()
        return AttachResult(AttachOutcome.BLOCKED, cell=(row, col), ended_round=ended)

    grid.place(target[0], target[1], projectile.color)
    popped = pop_cluster(
        grid, lattice, state, target[0], target[1],
        threshold=settings.pop_threshold,
        reward=settings.pop_reward,
    )
    # Always runs, popped or not.
    dropped = drop_floating(grid, lattice, state, reward=settings.drop_reward)
    return AttachResult(AttachOutcome.PLACED, cell=target, popped=popped, dropped=dropped)
