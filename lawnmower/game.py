"""The timed mowing round and the window that runs it."""

from __future__ import annotations

import argparse
import random
import sys

import pygame

from lawnmower.enemy import EnemyFactory, Grass, Weed, draw_enemies
from lawnmower.player import Player

WIDTH, HEIGHT = 1920, 1080
TITLE = "Lawn Mower Revolution"
FONT_PATH = "fonts/kenney_mini.ttf"
MUSIC_PATH = "audio/background.wav"

DURATION = 60.0
START_GRASS = 20
MAX_GRASS = 30
MAX_WEEDS = 20
GRASS_INTERVAL = 1.0
WEED_INTERVAL = 1.5
WEED_DELAY = 10.0
DAMAGE_INTERVAL = 10.0
DAMAGE_STEP = 2
ALERT_DURATION = 2.5

LAWN_COLOR = (17, 112, 42)
OVER_COLOR = (17, 100, 42)
TEXT_COLOR = (255, 255, 255)


class Game:
    """State of one round: the patches, the score and the clocks."""

    def __init__(self, player: Player | None = None, rng: random.Random | None = None) -> None:
        self.player = player if player is not None else Player.instance()
        self.rng = rng if rng is not None else random.Random()
        self.grass: list[Grass] = [EnemyFactory.grass(self.rng) for _ in range(START_GRASS)]
        self.weeds: list[Weed] = []
        self.score = 0
        self.elapsed = 0.0
        self._grass_clock = 0.0
        self._weed_clock = 0.0
        self._damage_clock = 0.0
        self._fonts: dict[tuple[str | None, int], pygame.font.Font] = {}

    def advance(self, dt: float, mouse_position: tuple[float, float]) -> None:
        """Run one frame of ``dt`` seconds with the mouse at ``mouse_position``."""
        if self.is_over():
            return
        self.elapsed += dt
        self._grass_clock += dt
        self._weed_clock += dt
        self._damage_clock += dt

        self.player.follow_mouse(mouse_position)
        self.player.update(dt)
        mower = self.player.bounds()
        for patch in (*self.grass, *self.weeds):
            patch.update(dt)
            if patch.bounds().intersects(mower):
                patch.take_damage(self.player.damage)

        cut_grass = sum(patch.is_dead() for patch in self.grass)
        cut_weeds = sum(patch.is_dead() for patch in self.weeds)
        self.grass = [patch for patch in self.grass if not patch.is_dead()]
        self.weeds = [patch for patch in self.weeds if not patch.is_dead()]
        self.score += cut_grass + 2 * cut_weeds

        if len(self.grass) < MAX_GRASS and self._grass_clock >= GRASS_INTERVAL:
            self.grass.append(EnemyFactory.grass(self.rng))
            self._grass_clock = 0.0

        if (
            self.elapsed >= WEED_DELAY
            and len(self.weeds) < MAX_WEEDS
            and self._weed_clock >= WEED_INTERVAL
        ):
            self.weeds.append(EnemyFactory.weed(self.rng))
            self._weed_clock = 0.0

        if self._damage_clock >= DAMAGE_INTERVAL:
            self.player.plus_damage(DAMAGE_STEP)
            self._damage_clock = 0.0

    def time_remaining(self) -> float:
        return max(0.0, DURATION - self.elapsed)

    def is_over(self) -> bool:
        return self.elapsed >= DURATION

    def show_damage_alert(self) -> bool:
        """True shortly after the mower's damage has been raised."""
        return self._damage_clock <= ALERT_DURATION and self.player.damage > 5

    def _font(self, path: str | None, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        key = (path, size)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(path, size)
        return self._fonts[key]

    def _text(self, surface, font_path, size, text, position) -> None:
        rendered = self._font(font_path, size).render(text, True, TEXT_COLOR)
        surface.blit(rendered, position)

    def render(self, surface: pygame.Surface, font: str | None) -> None:
        """Draw the current frame; ``font`` is a font file path, or None for the default."""
        if self.is_over():
            surface.fill(OVER_COLOR)
            lines = ("Time's Up!", f"Score: {self.score}")
            big = self._font(font, 160)
            x, y = 610, 300
            for line in lines:
                self._text(surface, font, 160, line, (x, y))
                y += big.get_linesize()
            return

        surface.fill(LAWN_COLOR)
        draw_enemies(self.grass, surface)
        draw_enemies(self.weeds, surface)
        self.player.draw(surface)
        self._text(surface, font, 32, f"Score: {self.score}", (1705, 10))
        self._text(surface, font, 32, f"Time remaining: {self.time_remaining():f}", (1569, 40))
        if self.show_damage_alert():
            self._text(surface, font, 38, "Damage increased!", (830, 10))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play one round."""
    parser = argparse.ArgumentParser(prog="lawnmower", description=TITLE)
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)

        try:
            pygame.font.Font(FONT_PATH, 32)
        except (pygame.error, OSError, FileNotFoundError):
            print("Failed to load font: kenney_mini.ttf", file=sys.stderr)
            return 1

        try:
            pygame.mixer.music.load(MUSIC_PATH)
            pygame.mixer.music.play(loops=-1)
        except pygame.error as exc:
            print(f"[Audio Error] {exc}", file=sys.stderr)

        game = Game()
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            dt = clock.tick(60) / 1000.0
            game.advance(dt, pygame.mouse.get_pos())
            game.render(screen, FONT_PATH)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0