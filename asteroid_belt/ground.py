# asteroid_belt/ground.py
# Faixa de chão (teto ou piso) feita de tiles que rolam para a esquerda.
# O número de tiles é fixo: quando o primeiro tile sai da tela ele é
# reaproveitado no fim da fila, então o chão nunca tem buracos.

import math

from asteroid_belt.settings import SCREEN_WIDTH
from asteroid_belt.sprite import Sprite


def tiles_needed(tile_width, screen_width=SCREEN_WIDTH):
    """Menor n tal que n * tile_width cobre a tela mais dois tiles de folga."""
    count = 0
    while count * tile_width < screen_width + tile_width * 2:
        count += 1
    return count


class GroundStrip:
    def __init__(self, image, y=0, flipped=False):
        """
        image: surface de um tile
        y: posição vertical da faixa (top-left)
        flipped: True para o teto (tile desenhado girado 180°)
        """
        self.image = image
        self.y = y
        self.rotation = math.pi if flipped else 0.0
        self.tile_width = image.get_width()
        self.tiles = [Sprite(image, y=y, rotation=self.rotation)
                      for _ in range(tiles_needed(self.tile_width))]
        self.reset()

    def reset(self, offset=0):
        for i, tile in enumerate(self.tiles):
            tile.x = self.tile_width * i - offset
            tile.y = self.y
            tile.vx = 0.0
            tile.vy = 0.0

    def update(self, speed):
        for tile in self.tiles:
            tile.vx = -speed
            tile.update()

        # recicla o tile da frente (mesmo objeto) para o fim da fila
        leading = self.tiles[0]
        if leading.x <= -self.tile_width:
            self.tiles.pop(0)
            leading.x = self.tiles[-1].x + self.tile_width
            self.tiles.append(leading)

    def draw(self, surface):
        for tile in self.tiles:
            tile.draw(surface)

    def __iter__(self):
        return iter(self.tiles)

    def __len__(self):
        return len(self.tiles)
