from __future__ import annotations

from dataclasses import asdict, dataclass, fields
import json
import os
from pathlib import Path


def _package_root() -> Path:
    return Path(__file__).resolve().parent


def default_settings_path() -> Path:
    override = os.environ.get("BUBBLES_SETTINGS")
    if override:
        return Path(override).resolve()
    return _package_root() / "settings.json"


@dataclass
class Settings:
    window_width: int = 480
    window_height: int = 640
    target_fps: int = 60

    # Lattice
    rows: int = 12
    cols: int = 11
    radius: float = 18.0
    grid_top: float = 40.0
    initial_rows: int = 6

    # Shooter
    shooter_offset: float = 40.0  # distance of the shooter above the bottom edge
    muzzle_offset: float = 28.0
    shot_speed: float = 8.0
    fire_cooldown: float = 0.12
    aim_margin: float = 0.3  # radians kept clear of the horizontal on both sides

    # Rules
    lives: int = 3
    collision_slack: float = 2.0  # contact distance is 2 * radius - slack
    pop_threshold: int = 3
    pop_reward: int = 10
    drop_reward: int = 5

    # Leaderboard
    leaderboard_url: str = "http://localhost:5000"
    leaderboard_limit: int = 20
    request_timeout: float = 2.0

    @property
    def contact_distance(self) -> float:
        return self.radius * 2 - self.collision_slack


# Annotations are strings under postponed evaluation
_FIELD_TYPES = {"int": (int,), "float": (int, float), "str": (str,)}


def _mistyped_fields(data: dict) -> list:
    bad = []
    for f in fields(Settings):
        if f.name not in data:
            continue
        value = data[f.name]
        if isinstance(value, bool) or not isinstance(value, _FIELD_TYPES[f.type]):
            bad.append(f.name)
    return bad


def load_settings(path: Path | None = None) -> Settings:
    if path is None:
        path = default_settings_path()
    settings = Settings()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            bad = _mistyped_fields(data) if isinstance(data, dict) else []
            if bad:
                print(f"[settings] Ignoring {path}, wrong types for: {', '.join(bad)}")
            else:
                settings = Settings(**data)
        except (OSError, json.JSONDecodeError) as e:
            print(f"[settings] Could not read {path}: {e}")
        except TypeError as e:
            print(f"[settings] Ignoring {path}, unexpected fields: {e}")
    url = os.environ.get("BUBBLES_LEADERBOARD_URL")
    if url:
        settings.leaderboard_url = url
    return settings


def save_settings(settings: Settings, path: Path | None = None) -> None:
    if path is None:
        path = default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")
