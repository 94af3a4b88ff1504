"""Image frames and sprite sheets built on pygame surfaces."""

from __future__ import annotations

from typing import Iterator

import pygame

RectLike = "pygame.Rect | tuple[int, int, int, int]"


def crop_surface(surface: pygame.Surface, rect) -> pygame.Surface:
    """Copy a rectangular region of a surface into a new surface.

    Parts of the region outside the source stay fully transparent (or black).
    """
    rect = pygame.Rect(rect)
    flags = surface.get_flags() & pygame.SRCALPHA
    sub = pygame.Surface(rect.size, flags, surface)
    colorkey = surface.get_colorkey()
    if colorkey is not None:
        sub.set_colorkey(colorkey)
    clip = rect.clip(surface.get_rect())
    if clip.width and clip.height:
        # Adding onto a zeroed surface copies the pixels exactly, alpha included.
        sub.blit(
            surface,
            (clip.x - rect.x, clip.y - rect.y),
            clip,
            special_flags=pygame.BLEND_RGBA_ADD,
        )
    return sub


class Frame:
    """A rectangular region of an image that can be drawn to a target."""

    __slots__ = ("texture", "rect")

    def __init__(self, texture: pygame.Surface, rect=None) -> None:
        self.texture = texture
        self.rect = pygame.Rect(rect) if rect is not None else texture.get_rect()

    @property
    def width(self) -> int:
        return self.rect.width

    @property
    def height(self) -> int:
        return self.rect.height

    def __repr__(self) -> str:
        return f"Frame(rect={tuple(self.rect)!r})"

    def draw(
        self, target: pygame.Surface, x: float, y: float, scale: float = 1.0
    ) -> pygame.Rect:
        """Draw the frame at screen position (x, y), scaled by ``scale``."""
        x, y = int(x), int(y)
        width = int(scale * self.rect.width)
        height = int(scale * self.rect.height)
        if width <= 0 or height <= 0:
            return pygame.Rect(x, y, 0, 0)
        source = self.rect.clip(self.texture.get_rect())
        if (width, height) == source.size:
            return target.blit(self.texture, (x, y), source)
        region = self.texture.subsurface(source)
        return target.blit(pygame.transform.scale(region, (width, height)), (x, y))

    def blit_region(
        self, target: pygame.Surface, sx: int, sy: int, dx: int, dy: int
    ) -> pygame.Rect:
        """Copy a frame-sized area starting at (sx, sy) of the image to (dx, dy)."""
        area = pygame.Rect(int(sx), int(sy), self.rect.width, self.rect.height)
        return target.blit(self.texture, (int(dx), int(dy)), area)

    def crop(self, rect) -> Frame:
        """A new frame sharing this image, showing only ``rect``."""
        sub = pygame.Rect(rect)
        if sub.x + sub.width > self.rect.width or sub.y + sub.height > self.rect.height:
            raise ValueError(
                "Attempted to crop image with invalid geometry: "
                f"(0,0 + {self.rect.width}x{self.rect.height}) --> "
                f"({sub.x},{sub.y} + {sub.width}x{sub.height})"
            )
        return Frame(self.texture, sub)


class SpriteSheet:
    """A grid of equally sized cells cut from one surface."""

    def __init__(self, surface: pygame.Surface, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("sprite sheet cells must have a positive size")
        self.surface = surface
        self.width = width
        self.height = height
        self.rows = surface.get_height() // height
        self.columns = surface.get_width() // width
        self.frames = self.rows * self.columns

    def __len__(self) -> int:
        return self.frames

    def get(self, column: int, row: int) -> pygame.Surface | None:
        """The cell at (column, row), or None if it lies outside the grid."""
        if not (0 <= column < self.columns and 0 <= row < self.rows):
            return None
        rect = pygame.Rect(
            column * self.width, row * self.height, self.width, self.height
        )
        return crop_surface(self.surface, rect)

    def __getitem__(self, index: int) -> pygame.Surface:
        """The cell at ``index`` counting row by row."""
        if index < 0 or self.columns == 0:
            raise IndexError(f"sprite sheet index out of range: {index}")
        cell = self.get(index % self.columns, index // self.columns)
        if cell is None:
            raise IndexError(f"sprite sheet index out of range: {index}")
        return cell

    def __iter__(self) -> Iterator[pygame.Surface]:
        for index in range(self.frames):
            yield self[index]