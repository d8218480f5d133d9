from dataclasses import dataclass

# ----- Window & arena -----
WIDTH, HEIGHT = 500, 500
ARENA_WIDTH, ARENA_HEIGHT = 10, 10
FPS = 60

# ----- Colors -----
def _rgb(r: float, g: float, b: float):
    return (int(r * 255), int(g * 255), int(b * 255))

BG            = _rgb(0.04, 0.04, 0.04)
HEAD_COLOR    = _rgb(0.7, 0.7, 0.7)
SEGMENT_COLOR = _rgb(0.3, 0.3, 0.3)
FOOD_COLOR    = _rgb(1.0, 0.0, 1.0)

# ----- Sprite footprints (fraction of a cell) -----
HEAD_SIZE = 0.8
SEGMENT_SIZE = 0.65
FOOD_SIZE = 0.8

# ----- Spawn layout -----
HEAD_START = (3, 3)
TAIL_START = (3, 2)

# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    move_every_s: float = 0.15
    food_every_s: float = 1.0
    max_ticks_per_frame: int = 1   # no catch-up bursts after a slow frame
    arena_width: int = ARENA_WIDTH
    arena_height: int = ARENA_HEIGHT
    debug: bool = False            # stale entity references raise instead of being skipped

    def __post_init__(self):
        if self.move_every_s <= 0 or self.food_every_s <= 0:
            raise ValueError("tick intervals must be positive")
        if self.max_ticks_per_frame < 1:
            raise ValueError(f"max_ticks_per_frame must be >= 1, got {self.max_ticks_per_frame}")
        # the starting snake must spawn inside the arena
        for x, y in (HEAD_START, TAIL_START):
            if not (0 <= x < self.arena_width and 0 <= y < self.arena_height):
                raise ValueError(
                    f"arena {self.arena_width}x{self.arena_height} cannot hold start cell ({x}, {y})"
                )

CFG = Config(seed=0)
