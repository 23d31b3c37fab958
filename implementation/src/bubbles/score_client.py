"""HTTP client for the score server.

Network trouble must never interrupt a game, so every call here reports the
problem and returns an empty result instead of raising.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import requests

DEFAULT_NAME = "Anonymous"


@dataclass(frozen=True)
class ScoreRecord:
    id: int
    name: str
    score: int
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "ScoreRecord":
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or DEFAULT_NAME),
            score=int(data.get("score") or 0),
            created_at=str(data.get("created_at") or ""),
        )


def normalize_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    return name or DEFAULT_NAME


class ScoreClient:
    def __init__(self, base_url: str, timeout: float = 2.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def scores_url(self) -> str:
        return f"{self.base_url}/api/scores"

    def submit_score(self, name: Optional[str], score: int) -> Optional[int]:
        """POST a finished round; returns the stored id or None on failure."""
        payload = {"name": normalize_name(name), "score": int(score)}
        try:
            response = requests.post(self.scores_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            print(f"[scores] failed to submit score: {e}")
            return None
        if not isinstance(data, dict) or not data.get("success"):
            print(f"[scores] server rejected score: {data!r}")
            return None
        try:
            return int(data["id"])
        except (KeyError, TypeError, ValueError):
            print(f"[scores] submit response without id: {data!r}")
            return None

    def fetch_top_scores(self, limit: Optional[int] = None) -> List[ScoreRecord]:
        params = {"limit": limit} if limit is not None else None
        try:
            response = requests.get(self.scores_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            print(f"[scores] failed to fetch scores: {e}")
            return []
        if not isinstance(data, dict) or not isinstance(data.get("scores"), list):
            print(f"[scores] unexpected scores payload: {data!r}")
            return []
        records: List[ScoreRecord] = []
        for item in data["scores"]:
            try:
                records.append(ScoreRecord.from_dict(item))
            except (KeyError, TypeError, ValueError):
                print(f"[scores] skipping malformed record: {item!r}")
        return records
