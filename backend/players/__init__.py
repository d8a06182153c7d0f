"""
Player implementations and input mapping.

Everything here turns some kind of input (a key, a swipe, a d-pad touch,
an autopilot decision) into a direction request for the game loop.
"""

from .base import Player
from .random_player import RandomPlayer
from .controls import (
    KEY_BINDINGS,
    VirtualDPad,
    direction_from_key,
    direction_from_swipe,
    is_restart_key,
)

__all__ = [
    'Player',
    'RandomPlayer',
    'KEY_BINDINGS',
    'VirtualDPad',
    'direction_from_key',
    'direction_from_swipe',
    'is_restart_key',
]
