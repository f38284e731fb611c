
# Ponto de entrada do jogo
# Mantemos esse arquivo mínimo: janela + assets aqui, lógica em asteroid_belt/game.py.

import sys

import pygame

from asteroid_belt.assets import Assets
from asteroid_belt.game import Game
from asteroid_belt.settings import SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE


def main():
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)

    # falha ao carregar um asset existente é fatal
    try:
        assets = Assets.load()
    except pygame.error as e:
        print(f"Erro: falha ao carregar assets: {e}")
        pygame.quit()
        return 1

    game = Game(assets, screen=screen)
    game.run()
    return 0


if __name__ == "__main__":
    # Isso permite importar Game em outros testes sem disparar o loop automaticamente.
    sys.exit(main())
