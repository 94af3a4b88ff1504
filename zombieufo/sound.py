"""Background music and sound effects."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Any

import pygame

MAX_VOLUME = 128
AUDIO_RATE = 22050
AUDIO_CHANNELS = 2
AUDIO_BUFFERS = 4096
AUDIO_SIZE = -16
MUSIC_FILE = "music.wav"


class Effect(IntEnum):
    """Sound effects, in the order their files are loaded."""

    BUG = 0
    UFO_DEAD = 1
    DAMAGE = 2
    SHOOT = 3
    JUMP = 4
    DEAD = 5
    REVIVE = 6
    LARC = 7


EFFECT_FILES = {
    Effect.BUG: "bug.wav",
    Effect.UFO_DEAD: "ufodead.wav",
    Effect.DAMAGE: "damage.wav",
    Effect.SHOOT: "shoot.wav",
    Effect.JUMP: "jump.wav",
    Effect.DEAD: "dead.wav",
    Effect.REVIVE: "revive.wav",
    Effect.LARC: "Larc.wav",
}


class SoundBoard:
    """Loops the music and plays one effect at a time."""

    def __init__(self, directory: str | Path = "sound", mixer: Any = None) -> None:
        self._mixer = mixer if mixer is not None else pygame.mixer
        self.directory = Path(directory)
        self.volume = MAX_VOLUME // 3
        self.current_sound = -1
        self.music_paused = False
        try:
            self._mixer.init(
                frequency=AUDIO_RATE,
                size=AUDIO_SIZE,
                channels=AUDIO_CHANNELS,
                buffer=AUDIO_BUFFERS,
            )
        except pygame.error as exc:
            raise RuntimeError("Unable to open audio!") from exc
        music_path = str(self.directory / MUSIC_FILE)
        try:
            self._mixer.music.load(music_path)
        except (pygame.error, OSError) as exc:
            raise RuntimeError(f"Couldn't load {music_path}: {exc}") from exc
        self.start_music()
        self.sounds = [self._load(EFFECT_FILES[effect]) for effect in Effect]
        self.channels = list(range(len(self.sounds)))

    def _load(self, filename: str) -> Any:
        try:
            return self._mixer.Sound(str(self.directory / filename))
        except (pygame.error, OSError):
            return None

    def __enter__(self) -> SoundBoard:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def play(self, effect: Effect | int) -> None:
        """Stop the previous effect and play ``effect``."""
        index = Effect(effect).value
        if self.current_sound >= 0:
            self._mixer.Channel(self.current_sound).stop()
        self.current_sound = index
        sound = self.sounds[index]
        if sound is None:
            return
        sound.set_volume(self.volume / MAX_VOLUME)
        self._mixer.Channel(self.channels[index]).play(sound)

    def start_music(self) -> None:
        self._mixer.music.set_volume(self.volume / MAX_VOLUME)
        self._mixer.music.play(-1)
        self.music_paused = False

    def stop_music(self) -> None:
        self._mixer.music.stop()
        self._mixer.music.unload()

    def toggle_music(self) -> None:
        if self.music_paused:
            self._mixer.music.unpause()
        else:
            self._mixer.music.pause()
        self.music_paused = not self.music_paused

    def close(self) -> None:
        """Stop everything and shut the audio device."""
        self._mixer.music.stop()
        self._mixer.music.unload()
        self._mixer.quit()