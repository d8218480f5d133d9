# grid.py
from dataclasses import dataclass

from .direction import Direction


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Size:
    """Sprite footprint as a fraction of one cell. Rendering only."""
    width: float
    height: float

    def __post_init__(self):
        for v in (self.width, self.height):
            if not 0 < v <= 1.0:
                raise ValueError(f"size fraction must be in (0, 1], got {v}")

    @classmethod
    def square(cls, v: float) -> "Size":
        return cls(v, v)


@dataclass(frozen=True)
class Arena:
    width: int
    height: int

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"arena must be at least 1x1, got {self.width}x{self.height}")

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height
