"""Static, animated, player-seeking and homing sprites."""

from __future__ import annotations

import math
from typing import Iterable, Protocol

import pygame

from .drawable import Drawable
from .frame import Frame
from .gamedata import Gamedata
from .vector2f import Vector2f
from .viewport import Viewport

ENEMY_SPEED = 270.0
ENEMY_OFFSET = 64.0
DEAD_PLAYER_POSITION = (800.0, 205.0)
PLAYER_MARGIN = 55.0
GROUND_GAP = 20.0
BACKGROUND_JUMP = 4
UFO_HIT_POINTS = 5


class FrameSource(Protocol):
    """Anything that hands out animation frames by name."""

    def get_frames(self, name: str) -> list[Frame]: ...


def _screen_position(obj: Drawable, viewport: Viewport | None) -> tuple[float, float]:
    x, y = int(obj.x), int(obj.y)
    if viewport is None:
        return x, y
    return x - viewport.x, y - viewport.y


class Sprite(Drawable):
    """A single-frame sprite that moves in a straight line."""

    def __init__(
        self,
        name: str,
        gamedata: Gamedata,
        frame: Frame,
        position: Iterable[float] | None = None,
        velocity: Iterable[float] | None = None,
        viewport: Viewport | None = None,
    ) -> None:
        if position is None:
            position = (
                gamedata.get_int(f"{name}/startLoc/x"),
                gamedata.get_int(f"{name}/startLoc/y"),
            )
        if velocity is None:
            velocity = (
                gamedata.get_int(f"{name}/speedX"),
                gamedata.get_int(f"{name}/speedY"),
            )
        super().__init__(name, position, velocity)
        self.gamedata = gamedata
        self.viewport = viewport
        self._frame = frame
        self.world_width = gamedata.get_int("world/width")
        self.world_height = gamedata.get_int("world/height")
        self.frame_width = frame.width
        self.frame_height = frame.height

    @property
    def frame(self) -> Frame:
        return self._frame

    @frame.setter
    def frame(self, value: Frame) -> None:
        self._frame = value

    def draw(self, target: pygame.Surface) -> None:
        self._frame.draw(target, *_screen_position(self, self.viewport))

    def update(self, ticks: int) -> None:
        self.position = self.position + self.velocity * (ticks * 0.001)


class _AnimatedSprite(Drawable):
    """Shared frame cycling for sprites cut from a sprite sheet."""

    def __init__(
        self,
        name: str,
        gamedata: Gamedata,
        frames_source: FrameSource,
        position: Iterable[float],
        velocity: Iterable[float],
        viewport: Viewport | None,
    ) -> None:
        super().__init__(name, position, velocity)
        self.gamedata = gamedata
        self.frames_source = frames_source
        self.viewport = viewport
        self.frames = list(frames_source.get_frames(name))
        if not self.frames:
            raise ValueError(f"{name} has no frames")
        self.current_frame = 0
        self.number_of_frames = gamedata.get_int(f"{name}/frames")
        self.frame_interval = gamedata.get_int(f"{name}/frameInterval")
        self.time_since_last_frame = 0.0
        self.world_width = gamedata.get_int("world/width")
        self.world_height = gamedata.get_int("world/height")
        self.frame_width = self.frames[0].width
        self.frame_height = self.frames[0].height
        self.scale = 1.0

    @property
    def frame(self) -> Frame:
        return self.frames[self.current_frame]

    def advance_frame(self, ticks: int) -> None:
        self.time_since_last_frame += ticks
        if self.time_since_last_frame > self.frame_interval:
            self.current_frame = (self.current_frame + 1) % self.number_of_frames
            self.time_since_last_frame = 0.0

    def draw(self, target: pygame.Surface) -> None:
        self.frame.draw(target, *_screen_position(self, self.viewport), self.scale)

    def _move(self, ticks: int) -> None:
        self.position = self.position + self.velocity * (ticks * 0.001)


class MultiSprite(_AnimatedSprite):
    """An animated sprite that either drifts and bounces or walks under gravity."""

    def __init__(
        self,
        name: str,
        gamedata: Gamedata,
        frames_source: FrameSource,
        viewport: Viewport | None = None,
    ) -> None:
        position = (
            gamedata.rand_float(0.0, 2000.0),
            gamedata.rand_float(0.0, 570.0),
        )
        velocity = (
            gamedata.rand_float(-20.0, 20.0),
            gamedata.rand_float(-20.0, 20.0),
        )
        super().__init__(name, gamedata, frames_source, position, velocity, viewport)
        self.is_left = False
        self.jump_time = 0

    def draw(self, target: pygame.Surface) -> None:
        """Draw the current animation frame at this sprite's scale."""
        self.frame.draw(target, *_screen_position(self, self.viewport), self.scale)

    def change_frames(self, name: str) -> None:
        """Switch to the animation frames registered under ``name``."""
        self.frames = list(self.frames_source.get_frames(name))

    def set_back(self) -> None:
        """Make this a background sprite that drifts and bounces freely."""
        self.jump_time = BACKGROUND_JUMP

    def jump(self) -> None:
        self.jump_time += 1

    def left(self) -> None:
        self.is_left = True
        self.change_frames("zombieLeft")
        self.velocity_x = -self.gamedata.get_float("zombie/speedX")

    def right(self) -> None:
        self.is_left = False
        self.change_frames("zombie")
        self.velocity_x = self.gamedata.get_float("zombie/speedX")

    def update(self, ticks: int) -> None:
        self.advance_frame(ticks)
        if self.jump_time == BACKGROUND_JUMP:
            self._move(ticks)
            if self.y < 0:
                self.velocity_y = abs(self.velocity_y)
            if self.y > self.world_height - self.frame_height:
                self.velocity_y = -abs(self.velocity_y)
            if self.x < 0:
                self.velocity_x = abs(self.velocity_x)
            if self.x > self.world_width - self.frame_width:
                self.velocity_x = -abs(self.velocity_x)
            return

        gravity = self.gamedata.get_float("zombie/gravity")
        if self.velocity_y != 0:
            self.velocity_y = self.velocity_y + gravity * ticks * 0.001
        self._move(ticks)

        if self.y < 0:
            self.velocity_y = abs(self.velocity_y)
        if self.y > self.world_height - self.frame_height:
            self.jump_time = 0
            self.velocity_y = 0.0
            self.y = self.world_height - self.frame_height - GROUND_GAP
        if self.x < 0:
            self.velocity_x = 0.0
            self.x = 0.0
        if self.x > self.world_width - self.frame_width:
            self.velocity_x = 0.0
            self.x = self.world_width - self.frame_width


class SmartSprite(MultiSprite):
    """A sprite that follows the player horizontally and can be worn down."""

    def __init__(
        self,
        name: str,
        gamedata: Gamedata,
        frames_source: FrameSource,
        viewport: Viewport | None = None,
    ) -> None:
        super().__init__(name, gamedata, frames_source, viewport)
        self.hp = UFO_HIT_POINTS
        self.player_pos = Vector2f()
        self.player_dead = False

    @property
    def is_dead(self) -> bool:
        return self.hp == 0

    def damage(self) -> None:
        self.hp -= 1

    def go_left(self) -> None:
        self.velocity_x = -self.gamedata.get_float("ufo/speedX")

    def go_right(self) -> None:
        self.velocity_x = self.gamedata.get_float("ufo/speedX")

    def update(self, ticks: int) -> None:
        self.advance_frame(ticks)
        self._move(ticks)
        if self.player_dead:
            self.player_pos = Vector2f(*DEAD_PLAYER_POSITION)
        if self.player_pos.x - PLAYER_MARGIN < self.x:
            self.go_left()
        else:
            self.go_right()


class Enemy(_AnimatedSprite):
    """A projectile that flies at constant speed from a start towards a target."""

    def __init__(
        self,
        name: str,
        gamedata: Gamedata,
        frames_source: FrameSource,
        start: Iterable[float],
        target: Iterable[float],
        viewport: Viewport | None = None,
    ) -> None:
        start = Vector2f(*start)
        target = Vector2f(*target)
        dx = target.x - start.x
        dy = target.y - start.y
        distance = math.hypot(dx, dy)
        if distance == 0:
            vx = vy = 0.0
        else:
            vx = ENEMY_SPEED * abs(dx) / distance
            vy = ENEMY_SPEED * abs(dy) / distance
        if target.x < start.x:
            vx = -vx
        if target.y < start.y:
            vy = -vy
        position = start + Vector2f(ENEMY_OFFSET, ENEMY_OFFSET)
        super().__init__(
            name, gamedata, frames_source, position, (vx, vy), viewport
        )
        self.target_position = target

    def draw(self, target: pygame.Surface) -> None:
        self.frame.draw(target, *_screen_position(self, self.viewport))

    def update(self, ticks: int) -> None:
        self.advance_frame(ticks)
        self._move(ticks)