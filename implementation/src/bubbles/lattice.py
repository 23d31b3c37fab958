"""Offset hex lattice geometry.

Odd rows sit one radius to the right of even rows, giving the brick-like
packing of the board. Row spacing is radius * sqrt(3), so touching bubbles in
neighbouring rows are exactly one diameter apart.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

Cell = Tuple[int, int]

# (d_row, d_col) for the six neighbours, same order for both parities.
_EVEN_ROW_OFFSETS: Tuple[Cell, ...] = ((0, -1), (0, 1), (-1, -1), (-1, 0), (1, -1), (1, 0))
_ODD_ROW_OFFSETS: Tuple[Cell, ...] = ((0, -1), (0, 1), (-1, 0), (-1, 1), (1, 0), (1, 1))


@dataclass(frozen=True)
class Lattice:
    rows: int
    cols: int
    radius: float
    top: float
    left: float

    @classmethod
    def centered(cls, rows: int, cols: int, radius: float, top: float, field_width: float) -> "Lattice":
        """Build a lattice whose widest (offset) row is centred in the field."""
        left = (field_width - (cols * radius * 2 - radius)) / 2
        return cls(rows=rows, cols=cols, radius=radius, top=top, left=left)

    @property
    def row_spacing(self) -> float:
        return self.radius * math.sqrt(3)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_to_position(self, row: int, col: int) -> Tuple[float, float]:
        offset = self.radius if row % 2 else 0.0
        x = self.left + col * self.radius * 2 + offset
        y = self.top + row * self.row_spacing
        return x, y

    def position_to_cell(self, x: float, y: float) -> Cell:
        # Exhaustive scan in row-major order; the first strict minimum wins ties.
        best = (0, 0)
        best_d = math.inf
        for r in range(self.rows):
            for c in range(self.cols):
                cx, cy = self.cell_to_position(r, c)
                d = math.hypot(cx - x, cy - y)
                if d < best_d:
                    best_d = d
                    best = (r, c)
        return best

    def neighbors(self, row: int, col: int) -> List[Cell]:
        """Six neighbouring coordinates; may include out-of-bounds cells."""
        offsets = _ODD_ROW_OFFSETS if row % 2 else _EVEN_ROW_OFFSETS
        return [(row + dr, col + dc) for dr, dc in offsets]
