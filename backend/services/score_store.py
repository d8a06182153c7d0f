"""
In-memory score table behind the /api/scores endpoints.

Scores live for the lifetime of the process only.
"""

import threading
from datetime import datetime, timezone
from typing import Any, Dict, List

MAX_NAME_LENGTH = 32


class ScoreStore:
    """Thread-safe list of submitted scores."""

    def __init__(self):
        self._entries: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    def add(self, player_name: str, score: int) -> Dict[str, Any]:
        """
        Record a score.

        Raises:
            ValueError: if the name is empty or the score is not a
                non-negative integer
        """
        if not isinstance(player_name, str) or not player_name.strip():
            raise ValueError("player_name must be a non-empty string")
        if not isinstance(score, int) or isinstance(score, bool) or score < 0:
            raise ValueError("score must be a non-negative integer")

        entry = {
            'player_name': player_name.strip()[:MAX_NAME_LENGTH],
            'score': score,
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }
        with self._lock:
            self._entries.append(entry)
        return dict(entry)

    def top(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Highest scores first; equal scores keep submission order."""
        with self._lock:
            ranked = sorted(
                enumerate(self._entries),
                key=lambda item: (-item[1]['score'], item[0])
            )
        return [dict(entry) for _, entry in ranked[:max(limit, 0)]]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self):
        with self._lock:
            return len(self._entries)
