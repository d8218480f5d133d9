# direction.py
from enum import Enum
from typing import Iterable, Tuple


class Direction(Enum):
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy); y grows upward."""
        return _DELTAS[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.UP: (0, 1),
}

# Checked in this order; a later hit overrides an earlier one.
PRIORITY = (Direction.LEFT, Direction.RIGHT, Direction.DOWN, Direction.UP)


def resolve_direction(current: Direction, pressed: Iterable[Direction]) -> Direction:
    """
    Pick the heading for this input sample.
    - candidate = last of LEFT, RIGHT, DOWN, UP that is held (UP wins ties)
    - nothing held -> keep current
    - a 180° reversal is ignored
    """
    held = set(pressed)
    cand = current
    for d in PRIORITY:
        if d in held:
            cand = d
    if cand == current.opposite():
        return current
    return cand
