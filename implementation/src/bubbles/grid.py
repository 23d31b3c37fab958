from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from bubbles.types import BubbleColor


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[Optional[BubbleColor]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.cells = [None] * (self.rows * self.cols)

    def index(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise IndexError(f"Grid index out of bounds: ({row}, {col})")
        return row * self.cols + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Optional[BubbleColor]:
        if not self.in_bounds(row, col):
            return None
        return self.cells[self.index(row, col)]

    def is_empty(self, row: int, col: int) -> bool:
        """True for empty cells and for anything outside the grid."""
        return self.get(row, col) is None

    def set(self, row: int, col: int, color: Optional[BubbleColor]) -> None:
        self.cells[self.index(row, col)] = color

    def place(self, row: int, col: int, color: BubbleColor) -> None:
        idx = self.index(row, col)
        if self.cells[idx] is not None:
            raise ValueError(f"Cell ({row}, {col}) is already occupied")
        self.cells[idx] = color

    def clear(self, row: int, col: int) -> None:
        self.set(row, col, None)

    def reset(self) -> None:
        self.cells = [None] * (self.rows * self.cols)

    def iter_cells(self) -> Iterable[Tuple[int, int, Optional[BubbleColor]]]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col, self.cells[row * self.cols + col]

    def occupied(self) -> List[Tuple[int, int, BubbleColor]]:
        return [(r, c, color) for r, c, color in self.iter_cells() if color is not None]

    def count(self) -> int:
        return sum(1 for color in self.cells if color is not None)

    def fill_rows(self, count: int, palette: Sequence[BubbleColor], rng: random.Random) -> None:
        """Fill the top `count` rows with random colours."""
        for row in range(min(count, self.rows)):
            for col in range(self.cols):
                self.set(row, col, rng.choice(palette))

    def copy(self) -> "Grid":
        clone = Grid(self.rows, self.cols)
        clone.cells = list(self.cells)
        return clone
