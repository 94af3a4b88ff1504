"""The player sprite: it shoots and tells its observers where it is."""

from __future__ import annotations

from typing import Any

import pygame

from .bulletpool import BulletPool
from .drawable import Drawable
from .gamedata import Gamedata
from .sprites import MultiSprite
from .vector2f import Vector2f
from .viewport import Viewport


class SubjectSprite(MultiSprite):
    """An animated sprite with a bullet pool and position observers."""

    def __init__(
        self,
        name: str,
        gamedata: Gamedata,
        context: Any,
        viewport: Viewport | None = None,
        writer: Any = None,
    ) -> None:
        super().__init__(name, gamedata, context, viewport)
        self.observers: list[Any] = []
        self.bullet_name = gamedata.get_str(f"{name}/bullet")
        self.bullets = BulletPool(
            self.bullet_name, gamedata, context, viewport, writer
        )
        self.min_speed = float(gamedata.get_int(f"{self.bullet_name}/speedX"))

    def attach(self, observer: Any) -> None:
        self.observers.append(observer)

    def detach(self, observer: Any) -> None:
        """Stop notifying ``observer``."""
        for index, candidate in enumerate(self.observers):
            if candidate is observer:
                del self.observers[index]
                return

    def shoot(self) -> None:
        """Fire a bullet in the direction the sprite faces."""
        x = self.x + self.frame.width // 2
        y = self.y + self.frame.height // 3
        speed = -self.min_speed if self.is_left else self.min_speed
        self.bullets.shoot(Vector2f(x, y), Vector2f(speed + self.velocity_x, 0))

    def collided_with(self, obj: Drawable) -> bool:
        return self.bullets.collided_with(obj)

    def draw(self, target: pygame.Surface) -> None:
        super().draw(target)
        self.bullets.draw(target)

    def update(self, ticks: int) -> None:
        super().update(ticks)
        self.bullets.update(ticks)
        for observer in self.observers:
            observer.player_pos = Vector2f(*self.position)