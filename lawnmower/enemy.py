"""Patches of grass and weeds that the mower cuts down."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import ClassVar

import pygame

from lawnmower.entity import Entity, Rect, _load_image

X_RANGE = (100.0, 1820.0)
Y_RANGE = (100.0, 980.0)


class Enemy(Entity):
    """A patch placed at a random spot on the lawn, with hit points."""

    initial_hp: ClassVar[int] = 0
    image_path: ClassVar[str | None] = None
    error_message: ClassVar[str] = ""

    def __init__(
        self,
        rng: random.Random | None = None,
        image: pygame.Surface | None = None,
    ) -> None:
        if rng is None:
            rng = random.Random()
        super().__init__((rng.uniform(*X_RANGE), rng.uniform(*Y_RANGE)))
        self.hp = self.initial_hp
        if image is None and self.image_path is not None:
            image = _load_image(self.image_path, self.error_message)
        self.image = image

    def update(self, dt: float) -> None:
        """Patches do not change on their own."""

    def draw(self, surface: pygame.Surface) -> None:
        if self.image is not None:
            box = self.bounds()
            surface.blit(self.image, (box.x, box.y))

    def bounds(self) -> Rect:
        if self.image is None:
            return Rect()
        return Rect.centered(self.position, self.image.get_size())

    def take_damage(self, amount: int = 1) -> None:
        self.hp -= amount

    def is_dead(self) -> bool:
        return self.hp <= 0

    def set_image(self, image: pygame.Surface) -> None:
        self.image = image


class Grass(Enemy):
    """Ordinary grass, worth one point."""

    initial_hp = 225
    image_path = "sprites/Grass.png"
    error_message = "[Grass Texture Error] Failed to load grass texture."


class Weed(Enemy):
    """A tougher weed, worth two points."""

    initial_hp = 350
    image_path = "sprites/Weed.png"
    error_message = "[Weed Texture Error] Failed to load weed texture."


class EnemyFactory:
    """Creates the patches that appear on the lawn."""

    @staticmethod
    def grass(rng: random.Random | None = None) -> Grass:
        return Grass(rng)

    @staticmethod
    def weed(rng: random.Random | None = None) -> Weed:
        return Weed(rng)


def draw_enemies(patches: Iterable[Enemy], surface: pygame.Surface) -> None:
    """Draw every patch onto ``surface``."""
    for patch in patches:
        patch.draw(surface)