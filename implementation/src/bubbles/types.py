from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class BubbleColor(Enum):
    RED = "#f94144"
    ORANGE = "#f3722c"
    YELLOW = "#f9c74f"
    GREEN = "#90be6d"
    BLUE = "#577590"
    PURPLE = "#9b5de5"

    @property
    def rgb(self) -> Tuple[int, int, int]:
        value = self.value.lstrip("#")
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)

    def lighten(self, amount: float) -> Tuple[int, int, int]:
        """Channel-wise brighten used for the bubble highlight."""
        step = int(255 * amount)
        return tuple(min(255, c + step) for c in self.rgb)  # type: ignore[return-value]


PALETTE: Tuple[BubbleColor, ...] = tuple(BubbleColor)


@dataclass
class Projectile:
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    color: BubbleColor


@dataclass
class Shooter:
    x: float
    y: float
    angle: float
    next_color: BubbleColor
    ready_at: float = 0.0  # clock time after which the next shot is allowed

    def can_fire(self, now: float) -> bool:
        return now >= self.ready_at
