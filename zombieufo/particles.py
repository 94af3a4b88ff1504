"""Bullets, explosion chunks and exploding sprites."""

from __future__ import annotations

import math
import random
from typing import Iterable

import pygame

from .frame import Frame
from .gamedata import Gamedata
from .sprites import Sprite
from .viewport import Viewport

CHUNK_BASE_SPEED = 40


class Bullet(Sprite):
    """A sprite that marks itself too far once it has travelled its range."""

    def __init__(
        self,
        name: str,
        gamedata: Gamedata,
        frame: Frame,
        viewport: Viewport | None = None,
    ) -> None:
        super().__init__(name, gamedata, frame, viewport=viewport)
        self.distance = 0.0
        self.max_distance = float(gamedata.get_int(f"{name}/distance"))
        self.too_far = False

    def update(self, ticks: int) -> None:
        old_x, old_y = self.x, self.y
        super().update(ticks)
        self.distance += math.hypot(self.x - old_x, self.y - old_y)
        if self.distance > self.max_distance:
            self.too_far = True

    def reset(self) -> None:
        self.too_far = False
        self.distance = 0.0


class Chunk(Sprite):
    """A piece of an exploding sprite flying away from where it was."""

    def __init__(
        self,
        position: Iterable[float],
        velocity: Iterable[float],
        name: str,
        frame: Frame,
        gamedata: Gamedata,
        viewport: Viewport | None = None,
    ) -> None:
        super().__init__(
            name, gamedata, frame, position=position, velocity=velocity,
            viewport=viewport,
        )
        self.distance = 0.0
        self.max_distance = float(gamedata.get_int(f"{name}/chunk/distance"))
        self.too_far = False

    def update(self, ticks: int) -> None:
        y_incr = self.velocity_y * ticks * 0.001
        self.y = self.y - y_incr
        x_incr = self.velocity_x * ticks * 0.001
        self.x = self.x - x_incr
        self.distance += math.hypot(x_incr, y_incr)
        if self.distance > self.max_distance:
            self.too_far = True

    def reset(self) -> None:
        self.too_far = False
        self.distance = 0.0


class ExplodingSprite(Sprite):
    """A sprite broken into chunks that scatter until they fly out of range."""

    def __init__(
        self,
        sprite: Sprite,
        gamedata: Gamedata,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(
            sprite.name,
            gamedata,
            sprite.frame,
            position=sprite.position,
            velocity=sprite.velocity,
            viewport=sprite.viewport,
        )
        self._rng = rng if rng is not None else random.Random()
        self.chunks: list[Chunk] = []
        self.free_list: list[Chunk] = []
        self.make_chunks(gamedata.get_int(f"{sprite.name}/chunk/size"))

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)

    @property
    def free_count(self) -> int:
        return len(self.free_list)

    def draw(self, target: pygame.Surface) -> None:
        for chunk in self.chunks:
            chunk.draw(target)

    def update(self, ticks: int) -> None:
        remaining = []
        for chunk in self.chunks:
            chunk.update(ticks)
            if chunk.too_far:
                self.free_list.append(chunk)
            else:
                remaining.append(chunk)
        self.chunks = remaining

    def _chunk_speed(self, speed: int) -> float:
        magnitude = self._rng.randrange(abs(speed)) + CHUNK_BASE_SPEED
        return float(-magnitude if self._rng.randrange(2) else magnitude)

    def make_chunks(self, n: int) -> None:
        """Cut the frame into an n-by-n grid of chunks, each with its own speed."""
        if n <= 0:
            raise ValueError("chunk count must be positive")
        proto = self.frame
        chunk_width = max(1, proto.width // n)
        chunk_height = max(1, proto.height // n)
        speed_x = int(self.velocity_x) or 1
        speed_y = int(self.velocity_y) or 1

        source_y = 0
        while source_y + chunk_height < proto.height:
            source_x = 0
            while source_x + chunk_width < proto.width:
                sx = self._chunk_speed(speed_x)
                sy = self._chunk_speed(speed_y)
                frame = proto.crop((source_x, source_y, chunk_width, chunk_height))
                self.chunks.append(
                    Chunk(
                        (self.x + source_x, self.y + source_y),
                        (sx, sy),
                        self.name,
                        frame,
                        self.gamedata,
                        self.viewport,
                    )
                )
                source_x += chunk_width
            source_y += chunk_height