"""A pool of bullets that are recycled once they fly out of range."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable

import pygame

from .collision import (
    CollisionStrategy,
    MidPointCollisionStrategy,
    PerPixelCollisionStrategy,
    RectangularCollisionStrategy,
)
from .drawable import Drawable
from .gamedata import Gamedata
from .particles import Bullet
from .viewport import Viewport

TEXT_COLOR = (255, 0, 255, 0)
TEXT_X = 610
ACTIVE_Y = 30
POOL_Y = 60


def get_strategy(name: str, gamedata: Gamedata, context: Any) -> CollisionStrategy:
    """The collision strategy named by ``name/strategy``."""
    strategy = gamedata.get_str(f"{name}/strategy")
    if strategy == "midpoint":
        return MidPointCollisionStrategy()
    if strategy == "rectangular":
        return RectangularCollisionStrategy()
    if strategy == "perpixel":
        return PerPixelCollisionStrategy(context)
    raise ValueError("No strategy in getStrategy")


class BulletPool:
    """Fired bullets plus a free list of spent ones ready for reuse."""

    def __init__(
        self,
        name: str,
        gamedata: Gamedata,
        context: Any,
        viewport: Viewport | None = None,
        writer: Any = None,
        strategy: CollisionStrategy | None = None,
    ) -> None:
        self.name = name
        self.gamedata = gamedata
        self.context = context
        self.viewport = viewport
        self.writer = writer
        self.strategy = (
            strategy if strategy is not None else get_strategy(name, gamedata, context)
        )
        self.frame_interval = float(gamedata.get_int(f"{name}/interval"))
        self.time_since_last_frame = 0.0
        self.bullets: list[Bullet] = []
        self.free_list: deque[Bullet] = deque()

    @property
    def bullet_count(self) -> int:
        return len(self.bullets)

    @property
    def free_count(self) -> int:
        return len(self.free_list)

    @property
    def shooting(self) -> bool:
        """True when no bullet is in flight."""
        return not self.bullets

    def collided_with(self, obj: Drawable) -> bool:
        """Retire the first bullet that hits ``obj``; True if one did."""
        for bullet in self.bullets:
            if self.strategy.execute(bullet, obj):
                self.bullets.remove(bullet)
                self.free_list.append(bullet)
                return True
        return False

    def shoot(
        self, position: Iterable[float], velocity: Iterable[float]
    ) -> Bullet | None:
        """Fire a bullet if the firing interval has passed; return it."""
        if self.time_since_last_frame <= self.frame_interval:
            return None
        if self.free_list:
            bullet = self.free_list.popleft()
            bullet.reset()
        else:
            bullet = Bullet(
                self.name, self.gamedata, self.context.get_frame(self.name),
                self.viewport,
            )
        bullet.velocity = velocity
        bullet.position = position
        self.bullets.append(bullet)
        self.time_since_last_frame = 0.0
        return bullet

    def draw(self, target: pygame.Surface) -> None:
        if self.writer is not None:
            self.writer.write_text(
                target, f"Active bullets: {self.bullet_count}", TEXT_X, ACTIVE_Y,
                TEXT_COLOR,
            )
            self.writer.write_text(
                target, f"Bullet pool: {self.free_count}", TEXT_X, POOL_Y, TEXT_COLOR
            )
        for bullet in self.bullets:
            bullet.draw(target)

    def update(self, ticks: int) -> None:
        self.time_since_last_frame += ticks
        in_flight = []
        for bullet in self.bullets:
            bullet.update(ticks)
            if bullet.too_far:
                self.free_list.append(bullet)
            else:
                in_flight.append(bullet)
        self.bullets = in_flight