"""Base class for everything that has a position, a velocity and a frame."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

import pygame

from .frame import Frame
from .vector2f import Vector2f


class Drawable(ABC):
    """A named object in the world that is updated and drawn each frame."""

    scale: float = 0.0

    def __init__(
        self, name: str, position: Iterable[float], velocity: Iterable[float]
    ) -> None:
        self.name = name
        self.position = position
        self.velocity = velocity

    @property
    def position(self) -> Vector2f:
        return self._position

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._position = Vector2f(*value)

    @property
    def velocity(self) -> Vector2f:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Iterable[float]) -> None:
        self._velocity = Vector2f(*value)

    @property
    def x(self) -> float:
        return self._position.x

    @x.setter
    def x(self, value: float) -> None:
        self._position.x = float(value)

    @property
    def y(self) -> float:
        return self._position.y

    @y.setter
    def y(self, value: float) -> None:
        self._position.y = float(value)

    @property
    def velocity_x(self) -> float:
        return self._velocity.x

    @velocity_x.setter
    def velocity_x(self, value: float) -> None:
        self._velocity.x = float(value)

    @property
    def velocity_y(self) -> float:
        return self._velocity.y

    @velocity_y.setter
    def velocity_y(self, value: float) -> None:
        self._velocity.y = float(value)

    @property
    @abstractmethod
    def frame(self) -> Frame:
        """The frame currently shown."""

    @abstractmethod
    def draw(self, target: pygame.Surface) -> None:
        """Draw onto ``target``."""

    @abstractmethod
    def update(self, ticks: int) -> None:
        """Advance by ``ticks`` milliseconds."""