# asteroid_belt/modes.py
from enum import Enum


class Mode(Enum):
    """Estados do jogo; cada um tem seu próprio ramo de update/draw."""
    TITLE = "title"
    GAME = "game"
    GAME_OVER = "game_over"
