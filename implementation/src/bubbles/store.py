from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RoundState:
    score: int = 0
    lives: int = 3
    game_over: bool = False

    shots_fired: int = 0
    bubbles_popped: int = 0
    bubbles_dropped: int = 0
    misses: int = 0

    def add_score(self, amount: int) -> None:
        if amount <= 0:
            return
        self.score += amount

    def record_pop(self, count: int, reward: int) -> None:
        if count <= 0:
            return
        self.bubbles_popped += count
        self.add_score(count * reward)

    def record_drop(self, count: int, reward: int) -> None:
        if count <= 0:
            return
        self.bubbles_dropped += count
        self.add_score(count * reward)

    def lose_life(self) -> bool:
        """Take one life; returns True when this ends the round."""
        if self.game_over:
            return False
        self.misses += 1
        self.lives = max(0, self.lives - 1)
        if self.lives == 0:
            self.game_over = True
            return True
        return False
