"""The heads-up display: frame rate, time, boss health and controls."""

from __future__ import annotations

from typing import Any

import pygame

from .gamedata import Gamedata

TEXT_COLOR = (255, 0, 255, 0)
PANEL_COLOR = (255, 255, 255, 255 // 2)
BORDER_COLOR = (255, 0, 0, 255)


class Hud:
    """Two translucent panels with status and help text; can be hidden."""

    def __init__(self, writer: Any, gamedata: Gamedata, credits: str = "") -> None:
        self.writer = writer
        self.gamedata = gamedata
        self.credits = credits
        self.on = True

    def _panel(self, prefix: str) -> pygame.Rect:
        data = self.gamedata
        return pygame.Rect(
            data.get_int(f"{prefix}/startLoc/x"),
            data.get_int(f"{prefix}/startLoc/y"),
            data.get_int(f"{prefix}/width"),
            data.get_int(f"{prefix}/height"),
        )

    def lines(
        self, fps: int, avg: int, time: int, hp: int, is_over: bool, is_god: bool
    ) -> list[tuple[str, int, int]]:
        """The text lines and their positions."""
        lines = [
            (f"fps: {fps}", 30, 30),
            (f"avg fps: {avg}", 30, 60),
            (f"time: {time}s", 30, 90),
        ]
        if not is_over:
            lines.append(("Boss HP: " + "||" * max(0, hp), 610, 90))
        lines += [
            ("move left : <--", 30, 120),
            ("move right : -->", 30, 150),
            ("double jump : [space]", 30, 180),
            ("shoot : [s]", 30, 210),
            (
                "turn off godMode : [g]" if is_god else "turn on godMode : [g]",
                30,
                240,
            ),
        ]
        if self.credits:
            lines.append((self.credits, 320, 30))
        if is_over:
            lines.append(("You Win! Press [r] to restart.", 285, 190))
        return lines

    def draw(
        self,
        target: pygame.Surface,
        fps: int,
        avg: int,
        time: int,
        hp: int,
        is_over: bool,
        is_god: bool,
    ) -> None:
        if not self.on:
            return
        panels = [self._panel("hud"), self._panel("hud1")]
        for panel in panels:
            overlay = pygame.Surface(panel.size, pygame.SRCALPHA, 32)
            overlay.fill(PANEL_COLOR)
            target.blit(overlay, panel.topleft)
        for panel in panels:
            pygame.draw.rect(target, BORDER_COLOR, panel, 1)
        for text, x, y in self.lines(fps, avg, time, hp, is_over, is_god):
            self.writer.write_text(target, text, x, y, TEXT_COLOR)

    def hide(self) -> None:
        """Toggle the display on or off."""
        self.on = not self.on