"""A scrolling background layer drawn twice side by side."""

from __future__ import annotations

import math
from typing import Any

import pygame

from .gamedata import Gamedata
from .viewport import Viewport


class World:
    """A background image scrolling at ``1/factor`` of the viewport's speed."""

    def __init__(
        self,
        name: str,
        factor: int,
        gamedata: Gamedata,
        frames: Any,
        viewport: Viewport,
    ) -> None:
        if factor == 0:
            raise ValueError("scroll factor must not be zero")
        self.frame = frames.get_frame(name)
        self.factor = factor
        self.world_width = gamedata.get_int("world/width")
        self.frame_width = self.frame.width
        self.viewport = viewport
        self.view_x = 0.0
        self.view_y = 0.0

    def update(self) -> None:
        """Follow the viewport, wrapping horizontally every frame width."""
        offset = int(self.viewport.x / self.factor)
        self.view_x = float(int(math.fmod(offset, self.frame_width)))
        self.view_y = self.viewport.y

    def draw(self, target: pygame.Surface) -> None:
        self.frame.blit_region(target, 0, 0, -self.view_x, -self.view_y)
        self.frame.blit_region(
            target, 0, 0, self.frame_width - self.view_x, -self.view_y
        )