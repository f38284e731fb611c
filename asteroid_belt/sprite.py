# asteroid_belt/sprite.py
# Utilitários de sprite usados por todas as entidades do jogo:
# - Sprite: posição float (top-left), velocidade por frame, rotação (radianos)
# - TransientSprite: sprite com tempo de vida (ex.: explosões)
# - SpriteFactory: gera sprites em posições aleatórias dentro de limites
#
# A colisão é AABB sobre o rect sem rotação.

import math
import random

import pygame


class Sprite(pygame.sprite.Sprite):
    def __init__(self, image, x=0.0, y=0.0, vx=0.0, vy=0.0, rotation=0.0):
        """
        image: pygame.Surface
        x, y: posição do canto superior esquerdo (float)
        vx, vy: velocidade em px/frame
        rotation: radianos, sentido horário na tela
        """
        super().__init__()
        self.image = image
        self.pos = pygame.math.Vector2(x, y)
        self.vx = float(vx)
        self.vy = float(vy)
        self.rotation = float(rotation)
        self.rect = self.image.get_rect(topleft=(math.floor(x), math.floor(y)))

    @property
    def x(self):
        return self.pos.x

    @x.setter
    def x(self, value):
        self.pos.x = value
        self.rect.x = math.floor(value)

    @property
    def y(self):
        return self.pos.y

    @y.setter
    def y(self, value):
        self.pos.y = value
        self.rect.y = math.floor(value)

    def apply_impulse(self, dx, dy):
        self.vx += dx
        self.vy += dy

    def update(self):
        """Passo de Euler: posição += velocidade."""
        self.pos.x += self.vx
        self.pos.y += self.vy
        # sincroniza rect
        self.rect.x = math.floor(self.pos.x)
        self.rect.y = math.floor(self.pos.y)

    def is_colliding(self, other):
        return self.rect.colliderect(other.rect)

    def draw(self, surface):
        if self.rotation:
            # pygame gira anti-horário em graus; mantemos o centro do rect
            rotated = pygame.transform.rotate(self.image, -math.degrees(self.rotation))
            surface.blit(rotated, rotated.get_rect(center=self.rect.center))
        else:
            surface.blit(self.image, self.rect)


class TransientSprite:
    """Sprite que expira após `lifetime` segundos de tempo de jogo."""
    def __init__(self, sprite, created_at, lifetime):
        self.sprite = sprite
        self.created_at = created_at
        self.lifetime = lifetime
        self.is_expired = False

    def update(self, game_time):
        self.sprite.update()
        if game_time - self.created_at > self.lifetime:
            self.is_expired = True

    def draw(self, surface):
        if not self.is_expired:
            self.sprite.draw(surface)


class SpriteFactory:
    """Gera sprites com imagem aleatória e posição aleatória (limites inclusivos)."""
    def __init__(self, images, min_x, max_x, min_y, max_y, rng=None):
        if not images:
            raise ValueError("SpriteFactory precisa de pelo menos uma imagem")
        self.images = list(images)
        self.min_x, self.max_x = int(min_x), int(max_x)
        self.min_y, self.max_y = int(min_y), int(max_y)
        self.rng = rng if rng is not None else random.Random()

    def generate_sprite(self):
        image = self.rng.choice(self.images)
        x = self.rng.randint(self.min_x, self.max_x)
        y = self.rng.randint(self.min_y, self.max_y)
        return Sprite(image, x=x, y=y)
