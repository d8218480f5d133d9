# game.py
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple
import logging
import random

from .config import (
    HEAD_SIZE, SEGMENT_SIZE, FOOD_SIZE,
    HEAD_START, TAIL_START,
    CFG, Config,
)
from .direction import Direction, resolve_direction
from .errors import InvariantViolation, NotFound
from .grid import Arena, Position, Size
from .timing import FixedTimestep
from .world import World

logger = logging.getLogger(__name__)

# ---------- Components ----------
@dataclass
class SnakeHead:
    direction: Direction

class SnakeSegment:
    """Marker: entity is part of the snake body (the head is segment 0)."""

class Food:
    """Marker: entity can be eaten."""

# ---------- Events ----------
@dataclass
class GrowthEvent:
    pass

@dataclass
class GameOverEvent:
    wall: bool
    self_hit: bool

# ---------- State ----------
@dataclass
class GameState:
    cfg: Config
    arena: Arena
    world: World
    rng: random.Random
    segments: List[int] = field(default_factory=list)   # head first
    last_tail_position: Optional[Position] = None
    growth_events: List[GrowthEvent] = field(default_factory=list)
    game_over_events: List[GameOverEvent] = field(default_factory=list)
    move_timer: Optional[FixedTimestep] = None
    food_timer: Optional[FixedTimestep] = None
    ticks: int = 0

def new_game_state(cfg: Config = CFG) -> GameState:
    state = GameState(
        cfg=cfg,
        arena=Arena(cfg.arena_width, cfg.arena_height),
        world=World(),
        rng=random.Random(cfg.seed),
        move_timer=FixedTimestep(cfg.move_every_s, cfg.max_ticks_per_frame),
        food_timer=FixedTimestep(cfg.food_every_s, cfg.max_ticks_per_frame),
    )
    spawn_snake(state)
    return state

# ---------- Helpers ----------
def head_entity(state: GameState) -> int:
    heads = state.world.query(SnakeHead)
    if not heads:
        raise InvariantViolation("no SnakeHead entity outside of a reset")
    return heads[0]

def head_position(state: GameState) -> Position:
    return state.world.get(head_entity(state), Position)

def heading(state: GameState) -> Direction:
    return state.world.get(head_entity(state), SnakeHead).direction

def segment_positions(state: GameState) -> List[Position]:
    return [state.world.get(h, Position) for h in state.segments]

def food_positions(state: GameState) -> List[Position]:
    return [state.world.get(h, Position) for h in state.world.query(Food)]

def spawn_segment(state: GameState, pos: Position) -> int:
    return state.world.spawn(SnakeSegment(), pos, Size.square(SEGMENT_SIZE))

def spawn_snake(state: GameState) -> None:
    """Spawn the two-segment starting snake heading UP."""
    head = state.world.spawn(
        SnakeHead(Direction.UP),
        SnakeSegment(),
        Position(*HEAD_START),
        Size.square(HEAD_SIZE),
    )
    tail = spawn_segment(state, Position(*TAIL_START))
    state.segments = [head, tail]

# ---------- Systems ----------
def snake_movement_input(state: GameState, pressed: Iterable[Direction]) -> None:
    """Apply one input sample to the head's heading (no 180° turns)."""
    head = state.world.get(head_entity(state), SnakeHead)
    head.direction = resolve_direction(head.direction, pressed)

def _snapshot(state: GameState) -> List[Tuple[int, Position]]:
    """
    (handle, position) for every live segment, in registry order.
    Stale handles are dropped from the registry.
    """
    out = []
    for h in state.segments:
        try:
            out.append((h, state.world.get(h, Position)))
        except NotFound:
            if state.cfg.debug:
                raise
            logger.warning("Dropping stale segment handle %d", h)
    if len(out) != len(state.segments):
        state.segments = [h for h, _ in out]
    return out

def snake_movement(state: GameState) -> None:
    """
    Advance the head one cell, check collisions, shift the body.
    - wall and self checks both run against the new head; either queues
      a single GameOverEvent
    - segment i takes the pre-move position of segment i-1
    - records the pre-move tail cell for growth
    """
    head = head_entity(state)
    snap = _snapshot(state)
    before = [p for _, p in snap]

    old = state.world.get(head, Position)
    new = old.step(state.world.get(head, SnakeHead).direction)
    state.world.insert(head, new)

    wall = not state.arena.in_bounds(new)
    self_hit = new in before
    if wall or self_hit:
        state.game_over_events.append(GameOverEvent(wall=wall, self_hit=self_hit))

    for i in range(1, len(snap)):
        state.world.insert(snap[i][0], before[i - 1])

    state.last_tail_position = before[-1] if before else old

def snake_eating(state: GameState) -> None:
    pos = head_position(state)
    for h in state.world.query(Food):
        if state.world.get(h, Position) == pos:
            state.world.despawn(h)
            state.growth_events.append(GrowthEvent())

def snake_growth(state: GameState) -> None:
    """At most one new segment per tick, however many growth events queued."""
    if not state.growth_events:
        return
    if state.last_tail_position is None:
        raise InvariantViolation("growth before any movement recorded a tail position")
    state.growth_events.clear()
    state.segments.append(spawn_segment(state, state.last_tail_position))
    logger.debug("Grew to %d segments", len(state.segments))

def reset_game(state: GameState) -> None:
    """Despawn all food and snake entities, then respawn the starting snake."""
    for h in state.world.query(Food) + state.world.query(SnakeSegment):
        state.world.despawn(h)
    state.segments = []
    state.last_tail_position = None
    # food cadence restarts with the new snake
    if state.food_timer is not None:
        state.food_timer.reset()
    spawn_snake(state)

def game_over(state: GameState) -> bool:
    """Drain queued collisions; hard reset if there were any. Returns True on reset."""
    if not state.game_over_events:
        return False
    ev = state.game_over_events[0]
    state.game_over_events.clear()
    kind = " & ".join(k for k, hit in (("wall", ev.wall), ("self", ev.self_hit)) if hit)
    logger.info("Game over (%s) at tick %d, length %d", kind, state.ticks, len(state.segments))
    reset_game(state)
    return True

def food_spawner(state: GameState) -> int:
    pos = Position(
        state.rng.randrange(state.arena.width),
        state.rng.randrange(state.arena.height),
    )
    logger.debug("Food spawned at (%d, %d)", pos.x, pos.y)
    return state.world.spawn(Food(), pos, Size.square(FOOD_SIZE))

# ---------- Tick / Update ----------
def run_tick(state: GameState) -> bool:
    """
    One simulation tick in fixed stage order:
    movement -> eating -> growth -> game over.
    Event queues start empty every tick. Returns True if the game reset.
    """
    state.growth_events.clear()
    state.game_over_events.clear()

    snake_movement(state)
    snake_eating(state)
    snake_growth(state)
    reset = game_over(state)

    state.ticks += 1
    return reset

def step_game(state: GameState, dt: float, pressed: Optional[Iterable[Direction]] = None) -> int:
    """
    Advance by dt seconds of wall-clock time.
    - pressed (if given) is resolved into the heading every call
    - movement ticks and food ticks fire on their own fixed timers
    Returns the number of simulation ticks run.
    """
    if pressed is not None:
        snake_movement_input(state, pressed)

    n = state.move_timer.advance(dt)
    for _ in range(n):
        run_tick(state)

    for _ in range(state.food_timer.advance(dt)):
        food_spawner(state)
    return n

# ---------- Render hand-off ----------
@dataclass(frozen=True)
class EntityView:
    handle: int
    kind: str   # "head", "segment" or "food"
    position: Position
    size: Size

def entities_for_render(state: GameState) -> List[EntityView]:
    """Every positioned entity with its logical grid position and size."""
    out = []
    world = state.world
    for h in world.query(Position, Size):
        if world.has(h, SnakeHead):
            kind = "head"
        elif world.has(h, SnakeSegment):
            kind = "segment"
        else:
            kind = "food"
        out.append(EntityView(h, kind, world.get(h, Position), world.get(h, Size)))
    return out
