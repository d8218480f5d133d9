# main.py
import argparse
import logging

import pygame # type: ignore
from .config import WIDTH, HEIGHT, FPS, ARENA_WIDTH, ARENA_HEIGHT, Config
from .direction import Direction
from .game import new_game_state, step_game
from .render import draw_game

KEYMAP = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
}

def pressed_directions(keys) -> set:
    """Directional keys currently held, from pygame.key.get_pressed()."""
    return {d for k, d in KEYMAP.items() if keys[k]}

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--arena-width", type=int, default=ARENA_WIDTH)
    parser.add_argument("--arena-height", type=int, default=ARENA_HEIGHT)
    parser.add_argument("--tick", type=float, default=0.15, help="seconds per movement tick")
    parser.add_argument("--food-every", type=float, default=1.0, help="seconds between food spawns")
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--debug", action="store_true", help="stale entity references are fatal")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)

def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        seed=args.seed,
        move_every_s=args.tick,
        food_every_s=args.food_every,
        arena_width=args.arena_width,
        arena_height=args.arena_height,
        debug=args.debug,
    )

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = config_from_args(args)
    except ValueError as e:
        raise SystemExit(f"[SNAKE] Invalid settings: {e}")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Snake!")
    clock = pygame.time.Clock()

    state = new_game_state(cfg)
    print(f"[SNAKE] {cfg.arena_width}x{cfg.arena_height} arena, seed={cfg.seed}")
    running = True

    while running:
        # 1) window events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        if not running:
            break

        # 2) update; movement and food gated inside step_game
        dt = clock.tick(args.fps) / 1000.0
        step_game(state, dt, pressed_directions(pygame.key.get_pressed()))

        # 3) render
        draw_game(screen, state)
        pygame.display.flip()

    print(f"[SNAKE] Quit after {state.ticks} ticks")
    pygame.quit()

if __name__ == "__main__":
    main()
