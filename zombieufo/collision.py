"""Collision tests between drawables: bounding box, midpoint distance, per pixel."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from itertools import product
from typing import Any, Protocol

import pygame

from .drawable import Drawable
from .vector2f import Vector2f
from .viewport import Viewport

LABEL_X = 500
LABEL_Y = 30
_UINT16 = 0xFFFF


class SurfaceSource(Protocol):
    """Anything that hands out source images by sprite name."""

    def get_surface(self, name: str) -> pygame.Surface: ...


def scale_surface(surface: pygame.Surface, width: int, height: int) -> pygame.Surface:
    """A copy of ``surface`` stretched to ``width`` by ``height`` pixels."""
    if width <= 0 or height <= 0:
        flags = surface.get_flags() & pygame.SRCALPHA
        return pygame.Surface((max(0, width), max(0, height)), flags, surface)
    return pygame.transform.scale(surface, (width, height))


class CollisionStrategy(ABC):
    """Decides whether two drawables touch."""

    label = ""

    @abstractmethod
    def execute(self, obj1: Drawable, obj2: Drawable) -> bool:
        """True if the two objects collide."""

    def draw(self, target: pygame.Surface, writer: Any) -> None:
        """Write the strategy's name onto ``target``."""
        writer.write_text(target, f"Strategy: {self.label}", LABEL_X, LABEL_Y)


class RectangularCollisionStrategy(CollisionStrategy):
    """Collision of the scaled bounding boxes."""

    label = "Rectangular"

    def execute(self, obj1: Drawable, obj2: Drawable) -> bool:
        left1, left2 = obj1.x, obj2.x
        scale1, scale2 = obj1.scale, obj2.scale
        right1 = left1 + scale1 * obj1.frame.width
        right2 = left2 + scale2 * obj2.frame.width
        if right1 < left2 or left1 > right2:
            return False
        top1, top2 = obj1.y, obj2.y
        bottom1 = top1 + scale1 * obj1.frame.height
        bottom2 = top2 + scale2 * obj2.frame.height
        if bottom1 < top2 or bottom2 < top1:
            return False
        return True


class MidPointCollisionStrategy(CollisionStrategy):
    """Collision when the centres are closer than the mean of the widths."""

    label = "Distance"

    def distance(self, x1: float, y1: float, x2: float, y2: float) -> float:
        return math.hypot(x1 - x2, y1 - y2)

    def execute(self, obj1: Drawable, obj2: Drawable) -> bool:
        width1 = int(obj1.scale * obj1.frame.width)
        width2 = int(obj2.scale * obj2.frame.width)
        height1 = int(obj1.scale * obj1.frame.height)
        height2 = int(obj2.scale * obj2.frame.height)
        limit = int(width1 / 2) + int(width2 / 2)
        x1 = obj1.x + int(width1 / 2)
        y1 = obj1.y + int(height1 / 2)
        x2 = obj2.x + int(width2 / 2)
        y2 = obj2.y + int(height2 / 2)
        return self.distance(x1, y1, x2, y2) < limit


def _visible(surface: pygame.Surface, x: int, y: int) -> bool:
    if not (0 <= x < surface.get_width() and 0 <= y < surface.get_height()):
        return False
    if surface.get_bitsize() != 32:
        return True
    alpha_mask = surface.get_masks()[3]
    return (surface.get_at_mapped((x, y)) & alpha_mask) != 0


class PerPixelCollisionStrategy(CollisionStrategy):
    """Collision when both objects have a visible pixel in the same place."""

    label = "Per-Pixel "

    def __init__(self, surfaces: SurfaceSource, viewport: Viewport | None = None) -> None:
        self.surfaces = surfaces
        self.viewport = viewport

    def _relative(self, obj: Drawable) -> Vector2f:
        if self.viewport is None:
            return Vector2f(obj.x, obj.y)
        return obj.position - self.viewport.position

    def execute(self, obj1: Drawable, obj2: Drawable) -> bool:
        if not RectangularCollisionStrategy().execute(obj1, obj2):
            return False

        p1 = self._relative(obj1)
        p2 = self._relative(obj2)
        width1 = int(obj1.scale * obj1.frame.width) & _UINT16
        height1 = int(obj1.scale * obj1.frame.height) & _UINT16
        width2 = int(obj2.scale * obj2.frame.width) & _UINT16
        height2 = int(obj2.scale * obj2.frame.height) & _UINT16

        left1, left2 = int(p1.x), int(p2.x)
        sides = sorted((left1, left1 + width1, left2, left2 + width2))
        top1, top2 = int(p1.y), int(p2.y)
        lids = sorted((top1, top1 + height1, top2, top2 + height2))

        surface1 = scale_surface(self.surfaces.get_surface(obj1.name), width1, height1)
        surface2 = scale_surface(self.surfaces.get_surface(obj2.name), width2, height2)

        return any(
            _visible(surface1, int(x - p1.x), int(y - p1.y))
            and _visible(surface2, int(x - p2.x), int(y - p2.y))
            for x, y in product(range(sides[1], sides[2]), range(lids[1], lids[2]))
        )