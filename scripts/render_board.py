#!/usr/bin/env python3
"""Render a bubble board to PNG without opening a window.

Builds a seeded round, optionally fires a number of random shots through the
real simulation, and draws the resulting lattice with Pillow. Useful for
checking lattice layout and drop behaviour by eye.

Usage:
  python render_board.py [--seed N] [--shots N] [--out board.png] [--labels]
"""

import argparse
import math
import random
import sys
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

SRC_DIR = Path(__file__).resolve().parent.parent / "implementation" / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from bubbles.config import load_settings  # noqa: E402
from bubbles.simulation import Simulation  # noqa: E402

BACKGROUND = (11, 22, 38, 255)
MAX_TICKS_PER_SHOT = 1000


def fire_random_shot(sim, rng):
    angle = rng.uniform(-math.pi, 0)
    sim.aim(sim.shooter.x + math.cos(angle) * 100, sim.shooter.y + math.sin(angle) * 100)
    # Fire at a clock far enough ahead that the cooldown never blocks
    sim.fire(float(sim.state.shots_fired) * 10.0)
    ticks = 0
    while sim.projectiles and ticks < MAX_TICKS_PER_SHOT:
        sim.tick()
        ticks += 1


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--shots", type=int, default=0)
    parser.add_argument("--out", type=Path, default=Path("board.png"))
    parser.add_argument("--labels", action="store_true", help="write row,col under each bubble")
    args = parser.parse_args()

    settings = load_settings()
    rng = random.Random(args.seed)
    sim = Simulation(settings=settings, rng=random.Random(args.seed))

    for _ in range(args.shots):
        if sim.game_over:
            print(f"  Round ended after {sim.state.shots_fired} shots")
            break
        fire_random_shot(sim, rng)

    frame = sim.snapshot()
    image = Image.new("RGBA", (frame.width, frame.height), BACKGROUND)
    draw = ImageDraw.Draw(image)

    try:
        font = ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", 9)
    except (OSError, IOError):
        font = ImageFont.load_default()

    r = frame.radius - 1
    for cell in frame.cells:
        box = [cell.x - r, cell.y - r, cell.x + r, cell.y + r]
        draw.ellipse(box, fill=cell.color.rgb + (255,), outline=(0, 0, 0, 64), width=2)
        if args.labels:
            draw.text((cell.x - 8, cell.y - 5), f"{cell.row},{cell.col}", fill=(20, 20, 20), font=font)

    # Shooter position and aim line
    sx, sy = frame.shooter_x, frame.shooter_y
    ex = sx + math.cos(frame.shooter_angle) * frame.muzzle_offset
    ey = sy + math.sin(frame.shooter_angle) * frame.muzzle_offset
    draw.line([(sx, sy), (ex, ey)], fill=(36, 59, 85, 255), width=8)
    draw.text((12, 10), f"Score: {frame.score}  Lives: {frame.lives}", fill=(255, 255, 255), font=font)

    image.save(args.out)
    print(f"Board: {args.out} ({len(frame.cells)} bubbles, score {frame.score})")


if __name__ == "__main__":
    main()
