"""Save numbered screenshots of the game window as BMP files."""

from __future__ import annotations

from pathlib import Path

import pygame

from .gamedata import Gamedata


class FrameGenerator:
    """Captures the screen into ``<directory>/<username>.NNNN.bmp`` files."""

    def __init__(self, gamedata: Gamedata, directory: str | Path = "frames") -> None:
        self.width = gamedata.get_int("view/width")
        self.height = gamedata.get_int("view/height")
        self.username = gamedata.get_str("username")
        self.max_frames = gamedata.get_int("maxFrames")
        self.directory = Path(directory)
        self.frame_count = 0

    def frame_filename(self, index: int) -> str:
        """The file name used for capture number ``index``."""
        return str(self.directory / f"{self.username}.{index:04d}.bmp")

    def make_frame(self, target: pygame.Surface) -> str | None:
        """Save ``target`` as the next frame; None once the limit is passed."""
        if self.frame_count > self.max_frames:
            return None
        capture = pygame.Surface((self.width, self.height), 0, 32)
        capture.blit(target, (0, 0))
        filename = self.frame_filename(self.frame_count)
        self.frame_count += 1
        print(f"Making frame: {filename}")
        self.directory.mkdir(parents=True, exist_ok=True)
        pygame.image.save(capture, filename)
        return filename