from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import List, Tuple

from raylib_compat import (
    Color,
    Rectangle,
    Vector2,
    draw_circle_gradient,
    draw_circle_lines,
    draw_circle_v,
    draw_rectangle,
    draw_rectangle_pro,
    draw_text,
    measure_text,
)

from bubbles.score_client import ScoreRecord
from bubbles.simulation import FrameSnapshot
from bubbles.types import BubbleColor

BACKGROUND = Color(11, 22, 38, 255)
_HUD_STRIP = Color(255, 255, 255, 15)
_OUTLINE = Color(0, 0, 0, 64)
_CANNON_BASE = Color(8, 18, 32, 255)
_CANNON_BARREL = Color(36, 59, 85, 255)
_TEXT = Color(255, 255, 255, 255)
_TEXT_DIM = Color(200, 210, 225, 255)
_SHADE = Color(0, 0, 0, 128)
_PANEL = Color(20, 34, 56, 240)


def _rgba(rgb: Tuple[int, int, int], a: int = 255):
    return Color(rgb[0], rgb[1], rgb[2], a)


def _centered_text(text: str, center_x: float, y: float, size: int, color) -> None:
    width = measure_text(text, size) or 0
    draw_text(text, int(center_x - width / 2), int(y), size, color)


def round_summary(frame: FrameSnapshot) -> str:
    return (
        f"Shots {frame.shots_fired}  Popped {frame.bubbles_popped}  "
        f"Dropped {frame.bubbles_dropped}  Misses {frame.misses}"
    )


def draw_bubble(x: float, y: float, radius: float, color: BubbleColor) -> None:
    """Filled bubble with a soft highlight up and to the left."""
    draw_circle_v(Vector2(x, y), radius - 1, _rgba(color.rgb))
    draw_circle_gradient(
        x - radius / 3,
        y - radius / 3,
        radius / 2,
        _rgba(color.lighten(0.2)),
        _rgba(color.rgb, 0),
    )
    draw_circle_lines(x, y, radius - 1, _OUTLINE)


@dataclass
class Ui:
    top_scores: List[ScoreRecord] = field(default_factory=list)
    name_entry: str = ""
    prompt_open: bool = False
    submitted: bool = False
    max_name_length: int = 16

    def open_prompt(self) -> None:
        self.name_entry = ""
        self.prompt_open = True
        self.submitted = False

    def close_prompt(self) -> None:
        self.prompt_open = False

    def type_char(self, codepoint: int) -> None:
        if len(self.name_entry) >= self.max_name_length:
            return
        if 32 <= codepoint < 127:
            self.name_entry += chr(codepoint)

    def backspace(self) -> None:
        self.name_entry = self.name_entry[:-1]

    def draw(self, frame: FrameSnapshot) -> None:
        for cell in frame.cells:
            draw_bubble(cell.x, cell.y, frame.radius, cell.color)
        for p in frame.projectiles:
            draw_bubble(p.x, p.y, p.radius, p.color)
        self.draw_shooter(frame)
        self.draw_hud(frame)
        if frame.game_over:
            self.draw_game_over(frame)

    def draw_shooter(self, frame: FrameSnapshot) -> None:
        sx, sy = frame.shooter_x, frame.shooter_y
        draw_rectangle(int(sx - 28), int(sy + 10), 56, 10, _CANNON_BASE)
        # Barrel pivots on the shooter centre, 8px behind it
        draw_rectangle_pro(
            Rectangle(sx, sy, 40, 16),
            Vector2(8, 8),
            math.degrees(frame.shooter_angle),
            _CANNON_BARREL,
        )
        bx = sx + math.cos(frame.shooter_angle) * frame.muzzle_offset
        by = sy + math.sin(frame.shooter_angle) * frame.muzzle_offset
        draw_bubble(bx, by, frame.radius, frame.next_color)

    def draw_hud(self, frame: FrameSnapshot) -> None:
        draw_rectangle(0, 0, frame.width, int(frame.grid_top - 4), _HUD_STRIP)
        draw_text(f"Score: {frame.score}", 12, 10, 18, _TEXT)
        lives = f"Lives: {frame.lives}"
        draw_text(lives, frame.width - 12 - (measure_text(lives, 18) or 0), 10, 18, _TEXT)
        if self.top_scores:
            best = f"Best: {self.top_scores[0].score}"
            _centered_text(best, frame.width / 2, 12, 14, _TEXT_DIM)

    def draw_game_over(self, frame: FrameSnapshot) -> None:
        draw_rectangle(0, 0, frame.width, frame.height, _SHADE)
        cx = frame.width / 2
        cy = frame.height / 2
        _centered_text("Game Over", cx, cy - 76, 36, _TEXT)
        _centered_text(f"Score: {frame.score}", cx, cy - 34, 18, _TEXT)
        _centered_text(round_summary(frame), cx, cy - 10, 14, _TEXT_DIM)

        if self.prompt_open:
            draw_rectangle(int(cx - 150), int(cy + 16), 300, 64, _PANEL)
            _centered_text("Enter your name:", cx, cy + 22, 16, _TEXT_DIM)
            _centered_text(self.name_entry + "_", cx, cy + 46, 20, _TEXT)
            _centered_text("Enter to submit, Esc to skip", cx, cy + 90, 14, _TEXT_DIM)
        else:
            hint = "Score submitted - press R to play again" if self.submitted else "Press R to play again"
            _centered_text(hint, cx, cy + 24, 16, _TEXT_DIM)
            self.draw_scores(cx, cy + 60)

    def draw_scores(self, center_x: float, top: float, rows: int = 10) -> None:
        if not self.top_scores:
            return
        _centered_text("Top Scores", center_x, top, 18, _TEXT)
        for i, record in enumerate(self.top_scores[:rows]):
            line = f"{i + 1:>2}. {record.name} - {record.score}"
            draw_text(line, int(center_x - 110), int(top + 26 + i * 20), 16, _TEXT_DIM)
