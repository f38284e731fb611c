# asteroid_belt/settings.py
# Configurações do jogo: tela, física da nave, spawn e boost.
# Todos os valores de física são por frame (passo fixo a FPS).

import os

# ----------------- tela -----------------
SCREEN_WIDTH = 1028
SCREEN_HEIGHT = 720
FPS = 60
WINDOW_TITLE = "Galactic Asteroid Belt"

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "..", "assets")
IMAGES_DIR = os.path.join(ASSETS_DIR, "images")

# ----------------- texto -----------------
FONT_NAME = "arial"
FONT_SIZE = 24
TITLE_FONT_SIZE = int(FONT_SIZE * 1.5)
SMALL_FONT_SIZE = FONT_SIZE // 2
TEXT_COLOR = (255, 255, 255)
HINT_COLOR = (200, 200, 200)

# sprites com x <= este valor saem do jogo
OUT_OF_BOUNDS_X = -200

# ----------------- nave -----------------
GRAVITY = 0.25
THRUST = 0.5
# inclinação visual: rotation = vy / TILT_DIVISOR * pi / 2
TILT_DIVISOR = 96.0
SHIELD_OFFSET = (-17, -15)

# ----------------- velocidade / boost -----------------
INITIAL_SPEED = 1
INITIAL_SPEED_THRESHOLD = 500
BOOST_AMOUNT = 2
BOOST_SECONDS = 5

# ----------------- spawn (distância) -----------------
SPIRE_SPAWN_START = 600
SPIRE_SPAWN_STEP = 600
ASTEROID_SPAWN_START = 200
ASTEROID_SPAWN_STEP = 200
STAR_SPAWN_START = 50
STAR_SPAWN_STEP = 2000

# impulso aleatório dos asteroides (intervalos inclusivos)
ASTEROID_IMPULSE_X = (-15, -6)
ASTEROID_IMPULSE_Y = (-3, 2)

# explosões duram isso em segundos de tempo de jogo
EXPLOSION_LIFETIME = 0.1
