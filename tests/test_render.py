"""
Tests for render.py - grid to pixel mapping.
"""

import numpy as np
import pytest

from src.snake.config import Config
from src.snake.game import new_game_state
from src.snake.render import grid_to_pixel, render_items, sprite_extent


class TestGridToPixel:
    """Tests for grid_to_pixel() and sprite_extent()."""

    def test_first_cell_centre(self):
        # 10 cells over 500 px: cell 0 centre sits 25 px right of the left edge
        assert grid_to_pixel(0, 10, 500) == pytest.approx(-225.0)

    def test_last_cell_centre(self):
        assert grid_to_pixel(9, 10, 500) == pytest.approx(225.0)

    def test_vectorised(self):
        out = grid_to_pixel(np.array([0, 3, 9]), 10, 500)
        assert out == pytest.approx([-225.0, -75.0, 225.0])

    def test_sprite_extent(self):
        assert sprite_extent(0.8, 10, 500) == pytest.approx(40.0)
        assert sprite_extent(0.65, 10, 500) == pytest.approx(32.5)


class TestRenderItems:
    """Tests for render_items()."""

    def test_head_rect_in_screen_space(self):
        state = new_game_state(Config())
        items = dict(render_items(state, (500, 500)))
        head = items["head"]
        # cell (3,3): x centre 175, y counted up from the bottom -> 500 - 175
        assert head.center == (175, 325)
        assert head.size == (40, 40)

    def test_segment_below_head_on_screen(self):
        state = new_game_state(Config())
        items = dict(render_items(state, (500, 500)))
        assert items["segment"].centery > items["head"].centery
