"""Window, image loading, text output and cached frames."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pygame

from .frame import Frame, SpriteSheet
from .gamedata import Gamedata

WIDTH = 854
HEIGHT = 480
DELAY = 1000

ImageLoader = Callable[[str], pygame.Surface]


def _load_image(filename: str | Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(filename))
    except (pygame.error, OSError) as exc:
        raise OSError(f"Couldn't load {filename}") from exc


class TextWriter:
    """Loads images and writes text with the configured font."""

    def __init__(self, gamedata: Gamedata, font: pygame.font.Font | None = None) -> None:
        if font is None:
            try:
                pygame.font.init()
            except pygame.error as exc:
                raise RuntimeError("error: Couldn't init font") from exc
            try:
                font = pygame.font.Font(
                    gamedata.get_str("font/file"), gamedata.get_int("font/size")
                )
            except (OSError, pygame.error) as exc:
                raise OSError("error: font not found") from exc
        self.font = font
        self.text_color = pygame.Color(
            gamedata.get_int("font/red"),
            gamedata.get_int("font/green"),
            gamedata.get_int("font/blue"),
            gamedata.get_int("font/alpha"),
        )

    def read_surface(self, filename: str | Path) -> pygame.Surface:
        """Load an image file; raises OSError if it cannot be read."""
        return _load_image(filename)

    def write_text(
        self,
        target: pygame.Surface,
        msg: str,
        x: int,
        y: int,
        color=None,
    ) -> pygame.Rect:
        """Render ``msg`` at (x, y) in ``color`` or the configured colour."""
        rendered = self.font.render(
            msg, False, pygame.Color(color) if color is not None else self.text_color
        )
        return target.blit(rendered, (int(x), int(y)))


class FrameFactory:
    """Loads and caches images, single frames and sprite-sheet frames by name."""

    def __init__(
        self, gamedata: Gamedata, load_image: ImageLoader = _load_image
    ) -> None:
        self.gamedata = gamedata
        self._load = load_image
        self._surfaces: dict[str, pygame.Surface] = {}
        self._frames: dict[str, Frame] = {}
        self._multi_frames: dict[str, list[Frame]] = {}

    def get_surface(self, name: str) -> pygame.Surface:
        """The image for ``name``, loaded from ``name/file`` on first use."""
        surface = self._surfaces.get(name)
        if surface is None:
            surface = self._load(self.gamedata.get_str(f"{name}/file"))
            self._surfaces[name] = surface
        return surface

    def get_frame(self, name: str) -> Frame:
        """A single frame covering the whole image for ``name``."""
        frame = self._frames.get(name)
        if frame is None:
            frame = Frame(self._load(self.gamedata.get_str(f"{name}/file")))
            self._frames[name] = frame
        return frame

    def get_frames(self, name: str) -> list[Frame]:
        """The animation frames cut from the sprite sheet for ``name``."""
        cached = self._multi_frames.get(name)
        if cached is not None:
            return list(cached)
        data = self.gamedata
        surface = self._load(data.get_str(f"{name}/file"))
        count = data.get_int(f"{name}/frames")
        if count < 1:
            raise ValueError(f"{name} must have at least one frame")
        width = surface.get_width() // count
        height = surface.get_height()
        if data.has_tag(f"{name}/frameWidth") and data.has_tag(f"{name}/frameHeight"):
            width = data.get_int(f"{name}/frameWidth")
            height = data.get_int(f"{name}/frameHeight")
        sheet = SpriteSheet(surface, width, height)
        frames = [Frame(sheet[index]) for index in range(count)]
        self._multi_frames[name] = frames
        return list(frames)


class RenderContext:
    """The game window together with the frame cache."""

    def __init__(
        self,
        gamedata: Gamedata,
        factory: FrameFactory | None = None,
        size: tuple[int, int] = (WIDTH, HEIGHT),
    ) -> None:
        self.factory = factory if factory is not None else FrameFactory(gamedata)
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"Could not init SDL: {exc}") from exc
        title = gamedata.get_str("title")
        try:
            self.screen = pygame.display.set_mode(size)
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError(f"Couldn't make a window: {exc}") from exc
        pygame.display.set_caption(title)

    def __enter__(self) -> RenderContext:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_surface(self, name: str) -> pygame.Surface:
        return self.factory.get_surface(name)

    def get_frame(self, name: str) -> Frame:
        return self.factory.get_frame(name)

    def get_frames(self, name: str) -> list[Frame]:
        return self.factory.get_frames(name)

    def close(self) -> None:
        """Close the window."""
        pygame.display.quit()