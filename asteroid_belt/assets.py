# asteroid_belt/assets.py
# Carrega todas as imagens e fontes uma única vez na inicialização.
# O objeto Assets é passado para o Game e não muda depois disso.
#
# Arquivos de imagem (opcionais, em assets/images/):
#   background.png, spaceship.png, shield.png, groundDirt.png,
#   rock-top.png, rock-bottom.png, meteorBrown_big1..4.png,
#   meteorExplosion.png, starGold.png
# Se um arquivo não existir, desenhamos um placeholder procedural.
# Se existir mas não puder ser lido, o erro (pygame.error) sobe: é fatal.

import math
import os

import pygame

from asteroid_belt.settings import (
    IMAGES_DIR, FONT_NAME, FONT_SIZE, TITLE_FONT_SIZE, SMALL_FONT_SIZE,
)

SHIP_SIZE = (64, 40)
SHIELD_SIZE = (98, 70)
FLOOR_SIZE = (128, 40)
SPIRE_SIZE = (108, 240)
ASTEROID_SIZES = [(96, 84), (110, 92), (88, 82), (98, 96)]
EXPLOSION_SIZE = (96, 96)
STAR_SIZE = (32, 32)


def load_image(path, size, placeholder):
    """
    path: caminho do arquivo
    size: tamanho do placeholder (a imagem carregada mantém o tamanho original)
    placeholder: função (size) -> Surface usada quando o arquivo não existe
    """
    if os.path.isfile(path):
        img = pygame.image.load(path)
        # convert_alpha exige modo de vídeo já criado
        if pygame.display.get_surface() is not None:
            img = img.convert_alpha()
        return img
    return placeholder(size)


# ----------------- placeholders procedurais -----------------
def _ship_placeholder(size):
    surf = pygame.Surface(size, pygame.SRCALPHA)
    w, h = size
    pygame.draw.polygon(surf, (200, 200, 220), [(0, 4), (w - 1, h // 2), (0, h - 5)])
    pygame.draw.polygon(surf, (90, 140, 220), [(w // 3, h // 2 - 6), (w * 2 // 3, h // 2), (w // 3, h // 2 + 6)])
    pygame.draw.rect(surf, (255, 150, 40), (0, h // 2 - 5, 6, 10))
    return surf


def _shield_placeholder(size):
    surf = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.ellipse(surf, (80, 180, 255, 90), surf.get_rect())
    pygame.draw.ellipse(surf, (140, 220, 255), surf.get_rect(), 3)
    return surf


def _floor_placeholder(size):
    surf = pygame.Surface(size, pygame.SRCALPHA)
    w, h = size
    surf.fill((110, 72, 40))
    pygame.draw.rect(surf, (70, 150, 60), (0, 0, w, 8))
    for i in range(0, w, 16):
        pygame.draw.circle(surf, (85, 55, 30), (i + 8, h // 2 + (i % 3) * 4), 3)
    return surf


def _spire_placeholder(pointing_down):
    def build(size):
        surf = pygame.Surface(size, pygame.SRCALPHA)
        w, h = size
        if pointing_down:
            points = [(0, 0), (w - 1, 0), (w // 2, h - 1)]
        else:
            points = [(w // 2, 0), (w - 1, h - 1), (0, h - 1)]
        pygame.draw.polygon(surf, (120, 110, 100), points)
        pygame.draw.polygon(surf, (80, 72, 66), points, 3)
        return surf
    return build


def _asteroid_placeholder(size):
    surf = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.ellipse(surf, (140, 100, 70), surf.get_rect())
    w, h = size
    pygame.draw.circle(surf, (110, 78, 52), (w // 3, h // 3), min(size) // 8)
    pygame.draw.circle(surf, (110, 78, 52), (w * 2 // 3, h * 3 // 5), min(size) // 6)
    return surf


def _explosion_placeholder(size):
    surf = pygame.Surface(size, pygame.SRCALPHA)
    w, h = size
    pygame.draw.circle(surf, (255, 140, 30), (w // 2, h // 2), min(size) // 2)
    pygame.draw.circle(surf, (255, 230, 120), (w // 2, h // 2), min(size) // 4)
    return surf


def _star_placeholder(size):
    surf = pygame.Surface(size, pygame.SRCALPHA)
    w, h = size
    cx, cy = w / 2, h / 2
    points = []
    for i in range(10):
        r = (min(size) / 2 - 1) if i % 2 == 0 else min(size) / 5
        angle = -math.pi / 2 + i * math.pi / 5
        points.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
    pygame.draw.polygon(surf, (255, 210, 40), points)
    return surf


class Assets:
    """Imagens e fontes do jogo."""
    def __init__(self, ship, shield, floor, top_spire, bottom_spire, asteroids,
                 asteroid_explosion, star, title_font, normal_font, small_font, background=None):
        self.background = background
        self.ship = ship
        self.shield = shield
        self.floor = floor
        self.top_spire = top_spire
        self.bottom_spire = bottom_spire
        self.asteroids = list(asteroids)
        self.asteroid_explosion = asteroid_explosion
        self.star = star
        self.title_font = title_font
        self.normal_font = normal_font
        self.small_font = small_font

    @classmethod
    def load(cls, images_dir=IMAGES_DIR):
        def path(name):
            return os.path.join(images_dir, name)

        if not pygame.font.get_init():
            pygame.font.init()

        background_path = path("background.png")
        background = pygame.image.load(background_path) if os.path.isfile(background_path) else None

        return cls(
            background=background,
            ship=load_image(path("spaceship.png"), SHIP_SIZE, _ship_placeholder),
            shield=load_image(path("shield.png"), SHIELD_SIZE, _shield_placeholder),
            floor=load_image(path("groundDirt.png"), FLOOR_SIZE, _floor_placeholder),
            top_spire=load_image(path("rock-top.png"), SPIRE_SIZE, _spire_placeholder(True)),
            bottom_spire=load_image(path("rock-bottom.png"), SPIRE_SIZE, _spire_placeholder(False)),
            asteroids=[load_image(path(f"meteorBrown_big{i + 1}.png"), size, _asteroid_placeholder)
                       for i, size in enumerate(ASTEROID_SIZES)],
            asteroid_explosion=load_image(path("meteorExplosion.png"), EXPLOSION_SIZE, _explosion_placeholder),
            star=load_image(path("starGold.png"), STAR_SIZE, _star_placeholder),
            title_font=pygame.font.SysFont(FONT_NAME, TITLE_FONT_SIZE, bold=True),
            normal_font=pygame.font.SysFont(FONT_NAME, FONT_SIZE),
            small_font=pygame.font.SysFont(FONT_NAME, SMALL_FONT_SIZE),
        )
