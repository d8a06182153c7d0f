"""
Input mapping: keyboard keys, swipe gestures and the on-screen d-pad all end
up as a Direction that is handed to GameLoop.request_direction().
"""

from typing import Dict, Optional, Tuple

from domain.constants import UP, DOWN, LEFT, RIGHT, Direction

KEY_BINDINGS: Dict[str, Direction] = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}

# Starts a new game once the current one has ended
RESTART_KEYS = {" "}

# Swipes shorter than this (in pixels) are treated as taps
MIN_SWIPE_DISTANCE = 30

# Virtual d-pad layout, in canvas pixels
DPAD_CANVAS_SIZE = 160
DPAD_CENTER_X = 80
BUTTON_SPACING = 42
BUTTON_RADIUS = 20


def direction_from_key(key: str) -> Optional[Direction]:
    """Map a KeyboardEvent.key value to a direction. Unbound keys give None."""
    if not isinstance(key, str):
        return None
    if key in KEY_BINDINGS:
        return KEY_BINDINGS[key]
    return KEY_BINDINGS.get(key.lower()) if len(key) == 1 else None


def is_restart_key(key: str) -> bool:
    return key in RESTART_KEYS


def direction_from_swipe(dx: float, dy: float, min_distance: float = MIN_SWIPE_DISTANCE) -> Optional[Direction]:
    """
    Map a swipe (end minus start, screen pixels) to a direction.

    The dominant axis wins; ties count as vertical. Positive dy is a swipe
    down the screen.
    """
    if abs(dx) > abs(dy):
        if abs(dx) <= min_distance:
            return None
        return RIGHT if dx > 0 else LEFT
    if abs(dy) <= min_distance:
        return None
    return DOWN if dy > 0 else UP


class VirtualDPad:
    """
    Four round buttons in a plus layout, for touch screens without a keyboard.

    Attributes:
        canvas_size: width/height of the square control canvas
        center_x: x of the pad centre
        spacing: distance from the centre to each button
        radius: button radius
    """

    def __init__(
        self,
        canvas_size: int = DPAD_CANVAS_SIZE,
        center_x: int = DPAD_CENTER_X,
        spacing: int = BUTTON_SPACING,
        radius: int = BUTTON_RADIUS
    ):
        self.canvas_size = canvas_size
        self.center_x = center_x
        self.spacing = spacing
        self.radius = radius

    def button_centers(self) -> Dict[Direction, Tuple[float, float]]:
        center_y = self.canvas_size / 2
        return {
            UP:    (self.center_x, center_y - self.spacing),
            DOWN:  (self.center_x, center_y + self.spacing),
            LEFT:  (self.center_x - self.spacing, center_y),
            RIGHT: (self.center_x + self.spacing, center_y),
        }

    def hit_test(
        self,
        x: float,
        y: float,
        rendered_width: Optional[float] = None,
        rendered_height: Optional[float] = None
    ) -> Optional[Direction]:
        """
        Return the button under a touch point, or None.

        Args:
            x, y: touch position relative to the canvas' top-left corner
            rendered_width, rendered_height: on-screen size of the canvas when
                CSS scales it; the point is mapped back to canvas pixels
        """
        if rendered_width:
            x = x * self.canvas_size / rendered_width
        if rendered_height:
            y = y * self.canvas_size / rendered_height

        for direction, (bx, by) in self.button_centers().items():
            if (x - bx) ** 2 + (y - by) ** 2 <= self.radius ** 2:
                return direction
        return None
