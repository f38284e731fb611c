"""Shared fixtures: headless pygame, placeholder assets and a seeded game."""
from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from asteroid_belt.assets import Assets
from asteroid_belt.game import Game
from asteroid_belt.modes import Mode


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(scope="session")
def assets(tmp_path_factory: pytest.TempPathFactory) -> Assets:
    # empty directory: every image falls back to its placeholder
    return Assets.load(images_dir=str(tmp_path_factory.mktemp("images")))


@pytest.fixture
def game(assets: Assets) -> Game:
    return Game(assets, rng=random.Random(1234))


@pytest.fixture
def playing(game: Game) -> Game:
    """A game already in GAME mode with spawning and speed ramps pushed out of reach."""
    game.mode = Mode.GAME
    game.speed_increase_threshold = 10**9
    game.spire_spawn_threshold = 10**9
    game.asteroid_spawn_threshold = 10**9
    game.star_spawn_threshold = 10**9
    return game


def hover(game: Game, y: float = 300.0) -> None:
    """Pin the ship mid-screen so it never reaches the floor or ceiling."""
    game.ship.y = y
    game.ship.vy = 0.0
