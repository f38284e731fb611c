"""Tests for the sprite utility layer: movement, AABB overlap, transients, factories."""
from __future__ import annotations

import math
import random

import pygame
import pytest

from asteroid_belt.sprite import Sprite, SpriteFactory, TransientSprite


def _surface(w: int = 10, h: int = 10) -> pygame.Surface:
    return pygame.Surface((w, h), pygame.SRCALPHA)


class TestSprite:
    def test_update_adds_velocity(self) -> None:
        sprite = Sprite(_surface(), x=10, y=20, vx=-3, vy=1.5)
        sprite.update()
        assert sprite.x == 7
        assert sprite.y == 21.5
        assert sprite.rect.topleft == (7, 21)

    def test_apply_impulse_accumulates(self) -> None:
        sprite = Sprite(_surface())
        sprite.apply_impulse(-12, 2)
        sprite.apply_impulse(1, -1)
        assert (sprite.vx, sprite.vy) == (-11, 1)

    def test_setting_position_moves_rect(self) -> None:
        sprite = Sprite(_surface())
        sprite.x = 42.7
        sprite.y = 8
        assert sprite.rect.topleft == (42, 8)

    def test_negative_positions_round_down(self) -> None:
        sprite = Sprite(_surface(), x=-0.5, y=-10.25)
        assert sprite.rect.topleft == (-1, -11)
        sprite.vx = 0.75
        sprite.update()
        assert sprite.rect.x == 0
        sprite.x = -199.5
        assert sprite.rect.x == -200

    def test_hitbox_width_constant_across_origin(self) -> None:
        wall = Sprite(_surface(), x=-10, y=0)
        assert not wall.is_colliding(Sprite(_surface(), x=0.0, y=0))
        assert wall.is_colliding(Sprite(_surface(), x=-0.5, y=0))

    def test_overlap_is_collision(self) -> None:
        a = Sprite(_surface(), x=0, y=0)
        b = Sprite(_surface(), x=5, y=5)
        assert a.is_colliding(b)
        assert b.is_colliding(a)

    def test_touching_edges_is_no_collision(self) -> None:
        a = Sprite(_surface(), x=0, y=0)
        b = Sprite(_surface(), x=10, y=0)
        assert not a.is_colliding(b)

    def test_rotation_does_not_change_hitbox(self) -> None:
        sprite = Sprite(_surface(40, 10), rotation=math.pi / 2)
        assert sprite.rect.size == (40, 10)

    def test_draw_rotated(self) -> None:
        target = pygame.Surface((50, 50))
        image = _surface(20, 10)
        image.fill((255, 0, 0))
        Sprite(image, x=10, y=10, rotation=math.pi / 4).draw(target)
        assert target.get_at((20, 15))[:3] == (255, 0, 0)


class TestTransientSprite:
    def test_expires_after_lifetime(self) -> None:
        transient = TransientSprite(Sprite(_surface(), vx=-2), created_at=1.0, lifetime=0.1)
        transient.update(1.05)
        assert not transient.is_expired
        transient.update(1.2)
        assert transient.is_expired

    def test_moves_while_alive(self) -> None:
        transient = TransientSprite(Sprite(_surface(), x=100, vx=-2), created_at=0.0, lifetime=1.0)
        transient.update(0.0)
        transient.update(0.0)
        assert transient.sprite.x == 96


class TestSpriteFactory:
    def test_positions_within_inclusive_bounds(self) -> None:
        factory = SpriteFactory([_surface()], min_x=5, max_x=7, min_y=-200, max_y=0,
                                rng=random.Random(7))
        for _ in range(200):
            sprite = factory.generate_sprite()
            assert 5 <= sprite.x <= 7
            assert -200 <= sprite.y <= 0
            assert (sprite.vx, sprite.vy) == (0, 0)

    def test_fixed_position_when_min_equals_max(self) -> None:
        factory = SpriteFactory([_surface()], min_x=1178, max_x=1178, min_y=100, max_y=100)
        sprite = factory.generate_sprite()
        assert (sprite.x, sprite.y) == (1178, 100)

    def test_picks_from_all_images(self) -> None:
        images = [_surface(), _surface(), _surface()]
        factory = SpriteFactory(images, 0, 0, 0, 0, rng=random.Random(3))
        seen = {id(factory.generate_sprite().image) for _ in range(100)}
        assert seen == {id(img) for img in images}

    def test_requires_images(self) -> None:
        with pytest.raises(ValueError):
            SpriteFactory([], 0, 0, 0, 0)
