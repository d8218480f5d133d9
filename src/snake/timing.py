# timing.py
from dataclasses import dataclass, field


@dataclass
class FixedTimestep:
    """
    Accumulator-driven fixed-rate trigger.

    advance(dt) returns how many whole intervals are due, at most max_steps.
    The fractional remainder is carried to the next frame; whole intervals
    beyond max_steps are dropped so a stalled frame never causes a burst.
    """
    interval: float
    max_steps: int = 1
    accumulator: float = field(default=0.0)

    def __post_init__(self):
        if self.interval <= 0:
            raise ValueError(f"interval must be positive, got {self.interval}")
        if self.max_steps < 1:
            raise ValueError(f"max_steps must be >= 1, got {self.max_steps}")

    def advance(self, dt: float) -> int:
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        self.accumulator += dt
        due = int(self.accumulator // self.interval)
        self.accumulator -= due * self.interval
        return min(due, self.max_steps)

    def reset(self) -> None:
        self.accumulator = 0.0
