# asteroid_belt/ship.py
# Nave do jogador: empuxo para cima (SPACE ou botão esquerdo) contra gravidade constante.
# - a cada frame: vy -= THRUST (se empuxo), vy += GRAVITY, integra posição
# - a nave inclina um pouco conforme vy para dar sensação de "flutuação"
#
# Ajuste GRAVITY / THRUST / TILT_DIVISOR em settings.py para calibrar a sensação.

import math

from asteroid_belt.settings import GRAVITY, THRUST, TILT_DIVISOR, SHIELD_OFFSET
from asteroid_belt.sprite import Sprite


class Ship(Sprite):
    def __init__(self, image, x, y):
        super().__init__(image, x=x, y=y)

    def steer(self, thrust):
        """
        Chamado uma vez por frame no modo de jogo.
        thrust: True enquanto o jogador segura o empuxo.
        """
        if thrust:
            self.vy -= THRUST

        # gravidade
        self.vy += GRAVITY

        self.update()

        self.rotation = self.vy / TILT_DIVISOR * math.pi / 2


def make_shield(image, ship):
    """Escudo desenhado em volta da nave; só existe enquanto há boost."""
    dx, dy = SHIELD_OFFSET
    return Sprite(image, x=ship.x + dx, y=ship.y + dy)
