"""
Tick interval as a function of score.
"""

from .constants import BASE_SPEED_MS, SPEED_DECREMENT_MS, MIN_SPEED_MS


class SpeedController:
    """
    Maps a score to the delay between ticks, in milliseconds.

    The interval shrinks by `decrement_ms` per point and never drops below
    `min_ms`. No state is kept between calls.
    """

    def __init__(
        self,
        base_ms: int = BASE_SPEED_MS,
        decrement_ms: int = SPEED_DECREMENT_MS,
        min_ms: int = MIN_SPEED_MS
    ):
        if min_ms <= 0:
            raise ValueError(f"min_ms must be positive, got {min_ms}.")
        if base_ms < min_ms:
            raise ValueError(f"base_ms ({base_ms}) must be >= min_ms ({min_ms}).")
        if decrement_ms < 0:
            raise ValueError(f"decrement_ms must not be negative, got {decrement_ms}.")
        self.base_ms = base_ms
        self.decrement_ms = decrement_ms
        self.min_ms = min_ms

    def next_interval_ms(self, score: int) -> int:
        return max(self.min_ms, self.base_ms - score * self.decrement_ms)

    def __repr__(self):
        return (
            f"<SpeedController base={self.base_ms}ms, "
            f"decrement={self.decrement_ms}ms, min={self.min_ms}ms>"
        )
