from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from bubbles.attachment import AttachResult, attach
from bubbles.config import Settings
from bubbles.grid import Grid
from bubbles.lattice import Lattice
from bubbles.store import RoundState
from bubbles.types import PALETTE, BubbleColor, Projectile, Shooter


@dataclass(frozen=True)
class CellView:
    row: int
    col: int
    color: BubbleColor
    x: float
    y: float


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    radius: float
    color: BubbleColor


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of one frame, everything the renderer is allowed to see."""
    width: int
    height: int
    radius: float
    grid_top: float
    cells: Tuple[CellView, ...]
    projectiles: Tuple[ProjectileView, ...]
    shooter_x: float
    shooter_y: float
    shooter_angle: float
    muzzle_offset: float
    next_color: BubbleColor
    score: int
    lives: int
    game_over: bool
    shots_fired: int = 0
    bubbles_popped: int = 0
    bubbles_dropped: int = 0
    misses: int = 0


@dataclass
class TickReport:
    results: List[AttachResult] = field(default_factory=list)
    ended_round: bool = False

    @property
    def popped(self) -> int:
        return sum(len(r.popped) for r in self.results)

    @property
    def dropped(self) -> int:
        return sum(len(r.dropped) for r in self.results)


def touches_cell(projectile: Projectile, grid: Grid, lattice: Lattice, contact_distance: float) -> bool:
    for r, c, _ in grid.occupied():
        cx, cy = lattice.cell_to_position(r, c)
        if math.hypot(cx - projectile.x, cy - projectile.y) <= contact_distance:
            return True
    return False


def advance_projectiles(
    projectiles: List[Projectile],
    grid: Grid,
    lattice: Lattice,
    field_width: float,
    contact_distance: float,
) -> Tuple[List[Projectile], List[Projectile]]:
    """Move every projectile one tick and split them into (flying, resolved).

    Resolved projectiles touched the ceiling or an occupied cell and must be
    handed to the attachment step; they are not moved again.
    """
    flying: List[Projectile] = []
    resolved: List[Projectile] = []
    for p in projectiles:
        p.x += p.vx
        p.y += p.vy

        if p.x - p.radius <= 0 and p.vx < 0:
            p.vx = -p.vx
            p.x = p.radius
        elif p.x + p.radius >= field_width and p.vx > 0:
            p.vx = -p.vx
            p.x = field_width - p.radius

        if p.y - p.radius <= lattice.top:
            resolved.append(p)
        elif touches_cell(p, grid, lattice, contact_distance):
            resolved.append(p)
        else:
            flying.append(p)
    return flying, resolved


def clamp_aim(angle: float, margin: float) -> float:
    """Keep the aim inside the upward arc (screen y grows downward)."""
    return max(-math.pi + margin, min(-margin, angle))


@dataclass
class Simulation:
    """One game of bubble shooter.

    Each `tick` is a single frame: projectiles move with constant per-frame
    velocity (no frame-time scaling), touching ones attach, clusters pop and
    floating cells drop. Once the round is over, `tick` and `fire` leave all
    state untouched until `reset_game`.
    """
    settings: Settings = field(default_factory=Settings)
    rng: random.Random = field(default_factory=random.Random)

    lattice: Lattice = field(init=False)
    grid: Grid = field(init=False)
    state: RoundState = field(init=False)
    shooter: Shooter = field(init=False)
    projectiles: List[Projectile] = field(init=False, default_factory=list)
    total_ticks: int = field(init=False, default=0)

    game_over_listeners: List[Callable[[RoundState], None]] = field(default_factory=list, repr=False)
    reset_listeners: List[Callable[["Simulation"], None]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        s = self.settings
        self.lattice = Lattice.centered(s.rows, s.cols, s.radius, s.grid_top, s.window_width)
        self.grid = Grid(s.rows, s.cols)
        self.reset_game(notify=False)

    def random_color(self) -> BubbleColor:
        return self.rng.choice(PALETTE)

    def reset_game(self, notify: bool = True) -> None:
        s = self.settings
        self.grid.reset()
        self.grid.fill_rows(s.initial_rows, PALETTE, self.rng)
        self.state = RoundState(lives=s.lives)
        self.shooter = Shooter(
            x=s.window_width / 2,
            y=s.window_height - s.shooter_offset,
            angle=-math.pi / 2,
            next_color=self.random_color(),
        )
        self.projectiles = []
        self.total_ticks = 0
        if notify:
            for callback in self.reset_listeners:
                callback(self)

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def aim(self, target_x: float, target_y: float) -> float:
        if self.game_over:
            return self.shooter.angle
        angle = math.atan2(target_y - self.shooter.y, target_x - self.shooter.x)
        self.shooter.angle = clamp_aim(angle, self.settings.aim_margin)
        return self.shooter.angle

    def fire(self, now: float) -> Optional[Projectile]:
        """Launch the queued colour, unless cooling down or the round is over."""
        if self.game_over or not self.shooter.can_fire(now):
            return None
        s = self.settings
        sh = self.shooter
        cos_a, sin_a = math.cos(sh.angle), math.sin(sh.angle)
        projectile = Projectile(
            x=sh.x + cos_a * s.muzzle_offset,
            y=sh.y + sin_a * s.muzzle_offset,
            vx=cos_a * s.shot_speed,
            vy=sin_a * s.shot_speed,
            radius=s.radius,
            color=sh.next_color,
        )
        self.projectiles.append(projectile)
        sh.next_color = self.random_color()
        sh.ready_at = now + s.fire_cooldown
        self.state.shots_fired += 1
        return projectile

    def tick(self) -> TickReport:
        report = TickReport()
        if self.game_over:
            return report
        self.total_ticks += 1

        flying, resolved = advance_projectiles(
            self.projectiles,
            self.grid,
            self.lattice,
            self.settings.window_width,
            self.settings.contact_distance,
        )
        self.projectiles = flying

        for projectile in resolved:
            result = attach(projectile, self.grid, self.lattice, self.state, self.settings)
            report.results.append(result)
            if result.ended_round:
                report.ended_round = True
                break

        if report.ended_round:
            for callback in self.game_over_listeners:
                callback(self.state)
        return report

    def snapshot(self) -> FrameSnapshot:
        s = self.settings
        cells = []
        for r, c, color in self.grid.occupied():
            x, y = self.lattice.cell_to_position(r, c)
            cells.append(CellView(r, c, color, x, y))
        return FrameSnapshot(
            width=s.window_width,
            height=s.window_height,
            radius=s.radius,
            grid_top=s.grid_top,
            cells=tuple(cells),
            projectiles=tuple(ProjectileView(p.x, p.y, p.radius, p.color) for p in self.projectiles),
            shooter_x=self.shooter.x,
            shooter_y=self.shooter.y,
            shooter_angle=self.shooter.angle,
            muzzle_offset=s.muzzle_offset,
            next_color=self.shooter.next_color,
            score=self.state.score,
            lives=self.state.lives,
            game_over=self.state.game_over,
            shots_fired=self.state.shots_fired,
            bubbles_popped=self.state.bubbles_popped,
            bubbles_dropped=self.state.bubbles_dropped,
            misses=self.state.misses,
        )
