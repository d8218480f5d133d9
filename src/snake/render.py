# render.py
from typing import List, Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import BG, HEAD_COLOR, SEGMENT_COLOR, FOOD_COLOR
from .game import GameState, entities_for_render

COLORS = {
    "head": HEAD_COLOR,
    "segment": SEGMENT_COLOR,
    "food": FOOD_COLOR,
}

# ---------- Grid -> pixels ----------
def grid_to_pixel(p, arena_extent: int, viewport_extent: float):
    """
    Centre of cell p, in pixels, with the origin at the middle of the viewport.
    Works on scalars and numpy arrays alike.
    """
    tile = viewport_extent / arena_extent
    return p / arena_extent * viewport_extent - viewport_extent / 2 + tile / 2

def sprite_extent(fraction, arena_extent: int, viewport_extent: float):
    return fraction * viewport_extent / arena_extent

def render_items(state: GameState, viewport: Tuple[int, int]) -> List[Tuple[str, pygame.Rect]]:
    """
    (kind, rect) for every entity, in screen coordinates.
    Centre-origin y points up, so it is flipped for pygame.
    """
    views = entities_for_render(state)
    if not views:
        return []
    vw, vh = viewport
    aw, ah = state.arena.width, state.arena.height

    pos = np.array([(v.position.x, v.position.y) for v in views], dtype=np.float64)
    size = np.array([(v.size.width, v.size.height) for v in views], dtype=np.float64)

    cx = grid_to_pixel(pos[:, 0], aw, vw) + vw / 2
    cy = vh / 2 - grid_to_pixel(pos[:, 1], ah, vh)
    w = sprite_extent(size[:, 0], aw, vw)
    h = sprite_extent(size[:, 1], ah, vh)

    items = []
    for i, v in enumerate(views):
        rect = pygame.Rect(0, 0, int(round(w[i])), int(round(h[i])))
        rect.center = (int(round(cx[i])), int(round(cy[i])))
        items.append((v.kind, rect))
    return items

# ---------- Draw ----------
def draw_game(screen: pygame.Surface, state: GameState) -> None:
    screen.fill(BG)
    items = render_items(state, screen.get_size())
    # food under the snake, head on top
    order = {"food": 0, "segment": 1, "head": 2}
    for kind, rect in sorted(items, key=lambda it: order[it[0]]):
        pygame.draw.rect(screen, COLORS[kind], rect)
