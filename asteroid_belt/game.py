# asteroid_belt/game.py
# Jogo principal:
# - Modos: TITLE -> GAME -> GAME_OVER -> TITLE (tabela de despacho por modo)
# - Distância percorrida é a pontuação; a velocidade sobe quando a distância passa do limiar
# - Estrelas dão boost (velocidade + escudo que destrói asteroides) por BOOST_SECONDS
# - Tudo é por frame (passo fixo); o tempo de jogo é frame_count / FPS
#
import math
import random

import pygame

from asteroid_belt.background import ScrollingBackground
from asteroid_belt.controls import FrameInput, poll_input
from asteroid_belt.ground import GroundStrip
from asteroid_belt.modes import Mode
from asteroid_belt.settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, WINDOW_TITLE, TEXT_COLOR, HINT_COLOR, FONT_SIZE, TITLE_FONT_SIZE,
    OUT_OF_BOUNDS_X, INITIAL_SPEED, INITIAL_SPEED_THRESHOLD, BOOST_AMOUNT, BOOST_SECONDS,
    SPIRE_SPAWN_START, SPIRE_SPAWN_STEP, ASTEROID_SPAWN_START, ASTEROID_SPAWN_STEP,
    STAR_SPAWN_START, STAR_SPAWN_STEP, ASTEROID_IMPULSE_X, ASTEROID_IMPULSE_Y, EXPLOSION_LIFETIME,
)
from asteroid_belt.ship import Ship, make_shield
from asteroid_belt.sprite import Sprite, SpriteFactory, TransientSprite


# ----------------- Game class -----------------
class Game:
    def __init__(self, assets, screen=None, rng=None):
        """
        assets: Assets já carregado (imagens e fontes)
        screen: surface da janela; só é necessária para run()
        rng: random.Random opcional (testes usam um com seed fixa)
        """
        self.assets = assets
        self.screen = screen
        self.rng = rng if rng is not None else random.Random()
        self.clock = pygame.time.Clock()
        self.running = True

        self.background = ScrollingBackground(screen_size=(SCREEN_WIDTH, SCREEN_HEIGHT),
                                              image=assets.background, rng=self.rng)

        # chão fixo: teto (girado) e piso
        floor_height = assets.floor.get_height()
        self.top_ground = GroundStrip(assets.floor, y=0, flipped=True)
        self.bottom_ground = GroundStrip(assets.floor, y=SCREEN_HEIGHT - floor_height)

        # despacho por modo
        self._updates = {
            Mode.TITLE: self._update_title,
            Mode.GAME: self._update_game,
            Mode.GAME_OVER: self._update_game_over,
        }
        self._overlays = {
            Mode.TITLE: self._draw_title,
            Mode.GAME: self._draw_hud,
            Mode.GAME_OVER: self._draw_game_over,
        }

        self.mode = Mode.TITLE
        self.reset_game()

    # ----------------- reset -----------------
    def reset_game(self):
        self.ship = Ship(self.assets.ship, x=SCREEN_WIDTH / 4, y=SCREEN_HEIGHT / 2)
        self.shield = None

        self.distance_travelled = 0
        self.frame_count = 0
        self.is_boosting = False
        self.boost_factor = BOOST_AMOUNT
        self.boost_seconds = BOOST_SECONDS
        self.last_boost_frame = 0
        self.speed = INITIAL_SPEED
        self.speed_increase_threshold = INITIAL_SPEED_THRESHOLD
        self.spire_spawn_threshold = SPIRE_SPAWN_START
        self.asteroid_spawn_threshold = ASTEROID_SPAWN_START
        self.star_spawn_threshold = STAR_SPAWN_START

        self.spires = []
        self.asteroids = []
        self.stars = []
        self.asteroid_explosions = []

        self.top_ground.reset(self.distance_travelled)
        self.bottom_ground.reset(self.distance_travelled)
        self._build_factories()

    def _build_factories(self):
        spire_height = self.assets.top_spire.get_height()
        self.top_spire_factory = SpriteFactory([self.assets.top_spire],
                                               min_x=SCREEN_WIDTH + 150, max_x=SCREEN_WIDTH + 150,
                                               min_y=-200, max_y=0, rng=self.rng)
        self.bottom_spire_factory = SpriteFactory([self.assets.bottom_spire],
                                                  min_x=SCREEN_WIDTH + 150, max_x=SCREEN_WIDTH + 150,
                                                  min_y=SCREEN_HEIGHT - spire_height,
                                                  max_y=SCREEN_HEIGHT - spire_height + 200, rng=self.rng)
        self.asteroid_factory = SpriteFactory(self.assets.asteroids,
                                              min_x=SCREEN_WIDTH + 100, max_x=SCREEN_WIDTH + 100,
                                              min_y=100, max_y=SCREEN_HEIGHT - 100, rng=self.rng)
        self.star_factory = SpriteFactory([self.assets.star],
                                          min_x=SCREEN_WIDTH + 100, max_x=SCREEN_WIDTH + 100,
                                          min_y=100, max_y=SCREEN_HEIGHT - 100, rng=self.rng)

    @property
    def game_time(self):
        """Segundos de jogo desde o reset (passo fixo)."""
        return self.frame_count / FPS

    @property
    def last_boost_time(self):
        """Tempo de jogo (s) da última estrela coletada."""
        return self.last_boost_frame / FPS

    # ----------------- main loop -----------------
    def run(self):
        if self.screen is None:
            raise RuntimeError("Game.run() precisa de uma janela (screen)")
        while self.running:
            self.clock.tick(FPS)

            frame_input = self.handle_events()
            if not self.running:
                break

            self.update(frame_input)

            self.draw(self.screen)
            pygame.display.set_caption(f"{WINDOW_TITLE} - FPS: {int(self.clock.get_fps())}")
            pygame.display.flip()

        self.quit()

    # ----------------- events -----------------
    def handle_events(self):
        frame_input = poll_input(pygame.event.get())
        if frame_input.quit:
            self.running = False
        return frame_input

    # ----------------- update -----------------
    def update(self, frame_input=None):
        if frame_input is None:
            frame_input = FrameInput()
        self._updates[self.mode](frame_input)

    def _update_title(self, frame_input):
        if frame_input.start:
            self.mode = Mode.GAME

    def _update_game_over(self, frame_input):
        if frame_input.restart:
            self.reset_game()
            self.mode = Mode.TITLE

    def _update_game(self, frame_input):
        # aumenta a velocidade periodicamente
        self.distance_travelled += int(self.speed)
        if self.distance_travelled > self.speed_increase_threshold:
            self.speed_increase_threshold += self.speed_increase_threshold
            self.speed += 1

        # fim do boost (contado em frames inteiros)
        if self.is_boosting and self.frame_count - self.last_boost_frame > self.boost_seconds * FPS:
            self.speed -= self.boost_factor
            self.is_boosting = False

        self.ship.steer(frame_input.thrust)
        self._sync_shield()

        self.background.update(self.speed)
        self.top_ground.update(self.speed)
        self.bottom_ground.update(self.speed)
        self.spires = self._scroll(self.spires, with_world=True)
        self.asteroids = self._scroll(self.asteroids, with_world=False)
        self.stars = self._scroll(self.stars, with_world=True)

        self.check_collisions()

        self._spawn()

        # explosões: atualiza e remove as expiradas
        for explosion in self.asteroid_explosions:
            explosion.update(self.game_time)
        self.asteroid_explosions = [e for e in self.asteroid_explosions if not e.is_expired]

        self.frame_count += 1

    def _sync_shield(self):
        if self.is_boosting:
            self.shield = make_shield(self.assets.shield, self.ship)
        else:
            self.shield = None

    def _scroll(self, sprites, with_world):
        """Move os sprites e descarta os que passaram de OUT_OF_BOUNDS_X."""
        for sprite in sprites:
            if with_world:
                sprite.vx = -self.speed
            sprite.update()
        return [s for s in sprites if s.x > OUT_OF_BOUNDS_X]

    # ----------------- spawn -----------------
    def _spawn(self):
        if self.distance_travelled > self.spire_spawn_threshold:
            if self.rng.randrange(2) == 0:
                self.spires.append(self.top_spire_factory.generate_sprite())
            else:
                self.spires.append(self.bottom_spire_factory.generate_sprite())
            self.spire_spawn_threshold += SPIRE_SPAWN_STEP

        # asteroides recebem um impulso aleatório para a esquerda
        if self.distance_travelled > self.asteroid_spawn_threshold:
            asteroid = self.asteroid_factory.generate_sprite()
            asteroid.apply_impulse(self.rng.randint(*ASTEROID_IMPULSE_X), self.rng.randint(*ASTEROID_IMPULSE_Y))
            self.asteroids.append(asteroid)
            self.asteroid_spawn_threshold += ASTEROID_SPAWN_STEP

        if self.distance_travelled > self.star_spawn_threshold:
            self.stars.append(self.star_factory.generate_sprite())
            self.star_spawn_threshold += STAR_SPAWN_STEP

    # ----------------- collisions -----------------
    def check_collisions(self):
        obstacles = list(self.top_ground) + list(self.bottom_ground) + self.spires
        ship_hit = any(self.ship.is_colliding(obstacle) for obstacle in obstacles)

        # asteroides: chão/spire ou escudo destroem; o que sobra pode bater na nave
        surviving = []
        for asteroid in self.asteroids:
            destroyed = any(asteroid.is_colliding(obstacle) for obstacle in obstacles)
            if not destroyed and self.shield is not None:
                destroyed = self.shield.is_colliding(asteroid)
            if destroyed:
                self.asteroid_explosions.append(self.create_asteroid_explosion(asteroid))
                continue
            if self.ship.is_colliding(asteroid):
                ship_hit = True
            surviving.append(asteroid)
        self.asteroids = surviving

        # estrelas: coleta ativa (ou renova) o boost
        remaining = []
        for star in self.stars:
            if self.ship.is_colliding(star):
                self.is_boosting = True
                self.last_boost_frame = self.frame_count
                self.speed += self.boost_factor
            else:
                remaining.append(star)
        self.stars = remaining

        if ship_hit:
            self._trigger_game_over()

    def _trigger_game_over(self):
        if self.mode == Mode.GAME_OVER:
            return
        self.mode = Mode.GAME_OVER
        print(f"Game over! Distância percorrida: {self.distance_travelled} m")

    def create_asteroid_explosion(self, asteroid):
        sprite = Sprite(self.assets.asteroid_explosion, x=asteroid.x, y=asteroid.y,
                        vx=-self.speed, rotation=self.rng.random() * math.pi)
        return TransientSprite(sprite, created_at=self.game_time, lifetime=EXPLOSION_LIFETIME)

    # ----------------- draw -----------------
    def draw(self, surface):
        self.background.draw(surface)

        for star in self.stars:
            star.draw(surface)
        for spire in self.spires:
            spire.draw(surface)
        self.top_ground.draw(surface)
        self.bottom_ground.draw(surface)
        for asteroid in self.asteroids:
            asteroid.draw(surface)
        for explosion in self.asteroid_explosions:
            explosion.draw(surface)

        self.ship.draw(surface)
        if self.shield is not None:
            self.shield.draw(surface)

        self._overlays[self.mode](surface)

    def _draw_lines(self, surface, font, lines, line_height, first_row):
        for i, line in enumerate(lines):
            if not line:
                continue
            surf = font.render(line, True, TEXT_COLOR)
            y = SCREEN_HEIGHT // 4 + (i + first_row) * line_height
            surface.blit(surf, surf.get_rect(midbottom=(SCREEN_WIDTH // 2, y)))

    def _draw_title(self, surface):
        self._draw_lines(surface, self.assets.title_font, ["GALACTIC ASTEROID BELT"], TITLE_FONT_SIZE, 4)
        self._draw_lines(surface, self.assets.normal_font,
                         [""] * 7 + ["PRESS SPACE KEY"], FONT_SIZE, 4)
        hint = self.assets.small_font.render("HOLD SPACE OR LEFT CLICK TO THRUST - COLLECT STARS FOR A SHIELD",
                                             True, HINT_COLOR)
        surface.blit(hint, hint.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT - 70)))

    def _draw_hud(self, surface):
        score_surf = self.assets.normal_font.render(f"Distance: {self.distance_travelled:8d} m", True, TEXT_COLOR)
        surface.blit(score_surf, score_surf.get_rect(topright=(SCREEN_WIDTH - 12, 8)))

    def _draw_game_over(self, surface):
        self._draw_lines(surface, self.assets.title_font, ["GAME OVER!"], TITLE_FONT_SIZE, 4)
        self._draw_lines(surface, self.assets.normal_font,
                         [""] * 6 + [f"DISTANCE TRAVELLED: {self.distance_travelled} M", "", "", "",
                                     "PRESS 'R' KEY TO RESTART"], FONT_SIZE, 4)

    # ----------------- quit -----------------
    def quit(self):
        pygame.quit()
