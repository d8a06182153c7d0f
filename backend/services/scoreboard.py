"""
Scoreboard client for reporting finished games to the remote score API.

The game itself never waits on this: every failure is logged and turned
into a False / empty result so a dead network can't affect play.
"""

import os
import requests
import logging
from typing import Any, Callable, Dict, List, Optional


logger = logging.getLogger(__name__)

SCORES_PATH = "/api/scores"
DEFAULT_PLAYER_NAME = "Player"


def get_scores_url(base_url: Optional[str] = None) -> Optional[str]:
    """
    Build the scores endpoint URL.

    Args:
        base_url: Override base URL (defaults to SNAKE_BACKEND_URL env var)

    Returns:
        Full endpoint URL, or None if no backend is configured
    """
    base = base_url or os.getenv('SNAKE_BACKEND_URL')
    if not base:
        return None
    return base.rstrip('/') + SCORES_PATH


def submit_score(
    player_name: str,
    score: int,
    base_url: Optional[str] = None,
    timeout: int = 10
) -> bool:
    """
    POST a final score to the scoreboard.

    Args:
        player_name: Name shown on the scoreboard
        score: Final score of the game
        base_url: Override base URL (defaults to SNAKE_BACKEND_URL env var)
        timeout: Request timeout in seconds (default: 10)

    Returns:
        True if the score was accepted, False otherwise
    """
    url = get_scores_url(base_url)

    if not url:
        logger.info("No scoreboard URL configured, skipping score submission")
        return False

    payload = {
        'player_name': player_name or DEFAULT_PLAYER_NAME,
        'score': score
    }

    try:
        response = requests.post(
            url,
            json=payload,
            timeout=timeout,
            headers={'Content-Type': 'application/json'}
        )
        response.raise_for_status()
        logger.info(f"Score {score} for {payload['player_name']} posted to {url}")
        return True

    except requests.exceptions.RequestException as e:
        logger.error(f"Failed to submit score to {url}: {e}")
        return False


def fetch_scores(base_url: Optional[str] = None, timeout: int = 10) -> List[Dict[str, Any]]:
    """
    GET the current top scores.

    Returns:
        List of {player_name, score, timestamp} dicts, empty on any failure
    """
    url = get_scores_url(base_url)

    if not url:
        logger.info("No scoreboard URL configured, nothing to fetch")
        return []

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        logger.error(f"Failed to fetch scores from {url}: {e}")
        return []
    except ValueError as e:
        logger.error(f"Scoreboard at {url} returned invalid JSON: {e}")
        return []

    if not isinstance(data, list):
        logger.warning(f"Unexpected scoreboard payload from {url}: {type(data).__name__}")
        return []
    return data


def make_score_reporter(
    player_name: str = DEFAULT_PLAYER_NAME,
    base_url: Optional[str] = None,
    timeout: int = 10
) -> Callable[[int], bool]:
    """
    Build a game-over listener that submits the final score.

    Usage:
        loop.add_game_over_listener(make_score_reporter("alice"))
    """
    def report(score: int) -> bool:
        return submit_score(player_name, score, base_url=base_url, timeout=timeout)

    return report
