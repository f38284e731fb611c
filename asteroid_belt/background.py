# asteroid_belt/background.py
# Fundo do jogo.
# - Se houver imagem (assets/images/background.png), ela é escalada para cobrir a tela e fica parada.
# - Senão, usa fallback procedural: campo de estrelas em duas camadas (parallax horizontal)
#   que rola para a esquerda proporcional à velocidade do mundo.
#
# Uso:
#   bg = ScrollingBackground(screen_size=(1028, 720), image=assets.background)
#   no loop principal (modo de jogo):
#       bg.update(speed)
#       bg.draw(screen)
#
import random

import pygame

BACKGROUND_COLOR = (8, 10, 28)


class StarLayer:
    """Uma camada de estrelas procedurais que rola horizontalmente com wrap."""
    def __init__(self, screen_size, count, factor, radius, color, rng):
        """
        factor: fração da velocidade do mundo aplicada a esta camada (parallax)
        """
        self.screen_w, self.screen_h = screen_size
        self.factor = factor
        self.radius = radius
        self.color = color
        self.offset = 0.0
        self.stars = [(rng.uniform(0, self.screen_w), rng.uniform(0, self.screen_h)) for _ in range(count)]

    def update(self, speed):
        # modularizamos o offset para evitar crescimento infinito
        self.offset = (self.offset + speed * self.factor) % self.screen_w

    def draw(self, surface):
        for sx, sy in self.stars:
            x = (sx - self.offset) % self.screen_w
            pygame.draw.circle(surface, self.color, (int(x), int(sy)), self.radius)


class ScrollingBackground:
    def __init__(self, screen_size=(1028, 720), image=None, rng=None):
        self.screen_size = screen_size
        rng = rng if rng is not None else random.Random()

        self.image = None
        if image is not None:
            # escala para cobrir toda a tela (mantém proporção)
            sw, sh = screen_size
            iw, ih = image.get_size()
            scale = max(sw / iw, sh / ih)
            self.image = pygame.transform.smoothscale(image, (int(iw * scale) + 1, int(ih * scale) + 1))

        # camadas de fallback: distantes (lentas, pequenas) e próximas (rápidas)
        self.layers = [
            StarLayer(screen_size, 90, 0.25, 1, (120, 120, 150), rng),
            StarLayer(screen_size, 40, 0.6, 2, (220, 220, 255), rng),
        ]

    def update(self, speed):
        if self.image is None:
            for layer in self.layers:
                layer.update(speed)

    def draw(self, surface):
        if self.image is not None:
            surface.blit(self.image, (0, 0))
            return
        surface.fill(BACKGROUND_COLOR)
        for layer in self.layers:
            layer.draw(surface)
