"""The visible window onto the game world, following one object."""

from __future__ import annotations

from typing import Any

import pygame

from .gamedata import Gamedata
from .vector2f import Vector2f


def _half(n: int) -> int:
    return int(n / 2)


class Viewport:
    """Keeps a view-sized window centred on a tracked object, within the world."""

    def __init__(self, gamedata: Gamedata) -> None:
        self.position = Vector2f(0, 0)
        self.world_width = gamedata.get_int("world/width")
        self.world_height = gamedata.get_int("world/height")
        self.view_width = gamedata.get_int("view/width")
        self.view_height = gamedata.get_int("view/height")
        self.object_to_track: Any = None
        self._obj_width = 0
        self._obj_height = 0

    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position.x = float(value)

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = float(value)

    def track(self, obj: Any) -> None:
        """Follow ``obj``, which must have ``x``, ``y`` and a ``frame``."""
        self.object_to_track = obj
        frame = obj.frame
        self._obj_width = int(frame.width)
        self._obj_height = int(frame.height)

    def update(self) -> None:
        """Centre on the tracked object, clamped to the world's edges."""
        obj = self.object_to_track
        if obj is None:
            raise RuntimeError("Viewport has no object to track")
        x = (obj.x + _half(self._obj_width)) - _half(self.view_width)
        y = (obj.y + _half(self._obj_height)) - _half(self.view_height)
        if x < 0:
            x = 0
        if y < 0:
            y = 0
        if x > self.world_width - self.view_width:
            x = self.world_width - self.view_width
        if y > self.world_height - self.view_height:
            y = self.world_height - self.view_height
        self.position = Vector2f(x, y)

    def draw(self, target: pygame.Surface) -> None:
        """The viewport draws no overlay of its own."""