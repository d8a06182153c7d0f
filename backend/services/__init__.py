"""
Services around the game engine: score reporting and score storage.
"""

from .scoreboard import submit_score, fetch_scores, make_score_reporter
from .score_store import ScoreStore

__all__ = [
    'submit_score',
    'fetch_scores',
    'make_score_reporter',
    'ScoreStore',
]
