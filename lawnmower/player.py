"""The lawn mower that follows the mouse."""

from __future__ import annotations

from typing import ClassVar

import pygame

from lawnmower.entity import Entity, Rect, _load_image

PLAYER_IMAGE = "sprites/Player.png"


class Player(Entity):
    """The mower; a single shared instance is available through ``instance``."""

    _instance: ClassVar[Player | None] = None

    def __init__(self, image: pygame.Surface | None = None) -> None:
        super().__init__()
        if image is None:
            image = _load_image(PLAYER_IMAGE, "[Texture Error] Failed to load texture: ")
        self.image = image
        self.damage = 5

    @classmethod
    def instance(cls) -> Player:
        """Return the shared player, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def follow_mouse(self, position: tuple[float, float]) -> None:
        self.position = (float(position[0]), float(position[1]))

    def update(self, dt: float) -> None:
        """The mower has no time-driven behaviour."""

    def draw(self, surface: pygame.Surface) -> None:
        if self.image is not None:
            box = self.bounds()
            surface.blit(self.image, (box.x, box.y))

    def bounds(self) -> Rect:
        if self.image is None:
            return Rect()
        return Rect.centered(self.position, self.image.get_size())

    def plus_damage(self, amount: int = 1) -> None:
        self.damage += amount