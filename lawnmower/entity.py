"""Geometry and the common base of everything drawn on the lawn."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass

import pygame

_image_cache: dict[str, pygame.Surface] = {}


def _load_image(path: str, error_message: str) -> pygame.Surface | None:
    """Load an image, reusing earlier successful loads; report failures on stderr."""
    key = os.path.abspath(path)
    cached = _image_cache.get(key)
    if cached is not None:
        return cached
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError, FileNotFoundError):
        print(error_message, file=sys.stderr)
        return None
    _image_cache[key] = image
    return image


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles share an area larger than zero."""
        left = max(self.x, other.x)
        right = min(self.x + self.width, other.x + other.width)
        top = max(self.y, other.y)
        bottom = min(self.y + self.height, other.y + other.height)
        return left < right and top < bottom

    @classmethod
    def centered(cls, center: tuple[float, float], size: tuple[float, float]) -> Rect:
        """Build a rectangle of the given size whose centre is ``center``."""
        width, height = size
        cx, cy = center
        return cls(cx - width / 2.0, cy - height / 2.0, float(width), float(height))


class Entity(ABC):
    """Something with a position that is updated and drawn every frame."""

    def __init__(self, position: tuple[float, float] = (0.0, 0.0)) -> None:
        self.position = position

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the entity by ``dt`` seconds."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the entity onto ``surface``."""

    @abstractmethod
    def bounds(self) -> Rect:
        """The area the entity occupies on screen."""