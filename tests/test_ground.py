"""Tests for the recycled ground tile strip."""
from __future__ import annotations

import math

import pygame
import pytest

from asteroid_belt.ground import GroundStrip, tiles_needed
from asteroid_belt.settings import SCREEN_WIDTH


@pytest.fixture
def tile() -> pygame.Surface:
    return pygame.Surface((128, 40), pygame.SRCALPHA)


class TestTilesNeeded:
    def test_covers_screen_plus_two_tiles(self) -> None:
        count = tiles_needed(128)
        assert count * 128 >= SCREEN_WIDTH + 256
        assert (count - 1) * 128 < SCREEN_WIDTH + 256

    def test_custom_width(self) -> None:
        assert tiles_needed(100, screen_width=300) == 5


class TestGroundStrip:
    def test_initial_layout_is_contiguous(self, tile: pygame.Surface) -> None:
        strip = GroundStrip(tile, y=680)
        xs = [t.x for t in strip]
        assert xs == [128 * i for i in range(len(strip))]
        assert all(t.y == 680 for t in strip)

    def test_ceiling_is_flipped(self, tile: pygame.Surface) -> None:
        strip = GroundStrip(tile, flipped=True)
        assert all(t.rotation == pytest.approx(math.pi) for t in strip)

    def test_scrolls_left_by_speed(self, tile: pygame.Surface) -> None:
        strip = GroundStrip(tile)
        strip.update(3)
        assert [t.x for t in strip][:3] == [-3, 125, 253]

    def test_leading_tile_is_recycled_not_reallocated(self, tile: pygame.Surface) -> None:
        strip = GroundStrip(tile)
        before = list(strip.tiles)
        size = len(strip)

        strip.update(128)

        assert len(strip) == size
        assert strip.tiles[-1] is before[0]
        assert {id(t) for t in strip} == {id(t) for t in before}
        assert strip.tiles[-1].x == strip.tiles[-2].x + 128

    def test_floor_stays_continuous_over_time(self, tile: pygame.Surface) -> None:
        strip = GroundStrip(tile)
        for _ in range(2000):
            strip.update(7)
            xs = [t.x for t in strip]
            assert all(b - a == 128 for a, b in zip(xs, xs[1:]))
            assert xs[0] <= 0
            assert xs[-1] + 128 >= SCREEN_WIDTH

    def test_reset_with_offset(self, tile: pygame.Surface) -> None:
        strip = GroundStrip(tile)
        for _ in range(50):
            strip.update(5)
        strip.reset(offset=10)
        assert strip.tiles[0].x == -10
        assert all(t.vx == 0 for t in strip)
