# asteroid_belt/controls.py
# Leitura de entrada por frame.
# A lógica do jogo só enxerga FrameInput, então pode ser testada sem janela.
#
# Controles:
#   SPACE / botão esquerdo (segurar) : empuxo
#   SPACE (pressionar)               : iniciar na tela de título
#   R                                : reiniciar após game over
#   ESC / fechar janela              : sair

from dataclasses import dataclass

import pygame


@dataclass
class FrameInput:
    thrust: bool = False
    start: bool = False
    restart: bool = False
    quit: bool = False


def poll_input(events, keys=None, mouse_buttons=None):
    """
    events: lista de eventos do frame (pygame.event.get())
    keys / mouse_buttons: estado atual das teclas/botões; se None, lê do pygame.
    """
    frame_input = FrameInput()
    for event in events:
        if event.type == pygame.QUIT:
            frame_input.quit = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                frame_input.quit = True
            elif event.key == pygame.K_SPACE:
                frame_input.start = True
            elif event.key == pygame.K_r:
                frame_input.restart = True

    if keys is None:
        keys = pygame.key.get_pressed()
    if mouse_buttons is None:
        mouse_buttons = pygame.mouse.get_pressed()
    frame_input.thrust = bool(keys[pygame.K_SPACE] or mouse_buttons[0])
    return frame_input
