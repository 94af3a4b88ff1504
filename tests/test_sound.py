from pathlib import Path

import pygame
import pytest

from zombieufo.sound import Effect, SoundBoard


class FakeMusic:
    def __init__(self, log, fail=False):
        self.log = log
        self.fail = fail

    def load(self, path):
        if self.fail:
            raise pygame.error("missing")
        self.log.append(("load", path))

    def set_volume(self, value):
        self.log.append(("music_volume", value))

    def play(self, loops=0):
        self.log.append(("music_play", loops))

    def pause(self):
        self.log.append(("pause",))

    def unpause(self):
        self.log.append(("unpause",))

    def stop(self):
        self.log.append(("music_stop",))

    def unload(self):
        self.log.append(("unload",))


class FakeSound:
    def __init__(self, path):
        self.path = path
        self.volume = None

    def set_volume(self, value):
        self.volume = value


class FakeChannel:
    def __init__(self, log, index):
        self.log = log
        self.index = index

    def play(self, sound):
        self.log.append(("play", self.index, sound.path))

    def stop(self):
        self.log.append(("stop", self.index))


class FakeMixer:
    def __init__(self, fail_init=False, fail_music=False):
        self.log = []
        self.fail_init = fail_init
        self.music = FakeMusic(self.log, fail_music)
        self.init_args = None
        self.loaded = []

    def init(self, **kwargs):
        if self.fail_init:
            raise pygame.error("no audio")
        self.init_args = kwargs

    def quit(self):
        self.log.append(("quit",))

    def Sound(self, path):
        sound = FakeSound(path)
        self.loaded.append(sound)
        return sound

    def Channel(self, index):
        return FakeChannel(self.log, index)


def test_setup_loads_music_and_effects():
    mixer = FakeMixer()
    board = SoundBoard("sfx", mixer=mixer)
    assert mixer.init_args["frequency"] == 22050
    assert mixer.init_args["buffer"] == 4096
    assert ("load", str(Path("sfx") / "music.wav")) in mixer.log
    assert ("music_play", -1) in mixer.log
    assert len(board.sounds) == len(Effect)
    assert mixer.loaded[Effect.SHOOT].path == str(Path("sfx") / "shoot.wav")
    assert board.channels == list(range(len(Effect)))


def test_play_stops_previous_effect():
    mixer = FakeMixer()
    board = SoundBoard("sfx", mixer=mixer)
    mixer.log.clear()
    board.play(Effect.SHOOT)
    board.play(Effect.JUMP)
    assert mixer.log == [
        ("play", 3, str(Path("sfx") / "shoot.wav")),
        ("stop", 3),
        ("play", 4, str(Path("sfx") / "jump.wav")),
    ]
    assert board.current_sound == Effect.JUMP
    assert 0 < mixer.loaded[Effect.JUMP].volume <= 1


def test_play_rejects_unknown_effect():
    board = SoundBoard("sfx", mixer=FakeMixer())
    with pytest.raises(ValueError):
        board.play(42)


def test_toggle_music():
    mixer = FakeMixer()
    board = SoundBoard("sfx", mixer=mixer)
    board.toggle_music()
    assert board.music_paused is True
    board.toggle_music()
    assert board.music_paused is False
    assert mixer.log[-2:] == [("pause",), ("unpause",)]


def test_init_failure():
    with pytest.raises(RuntimeError, match="Unable to open audio"):
        SoundBoard("sfx", mixer=FakeMixer(fail_init=True))


def test_music_failure():
    with pytest.raises(RuntimeError, match="Couldn't load"):
        SoundBoard("sfx", mixer=FakeMixer(fail_music=True))


def test_close_and_stop_music():
    mixer = FakeMixer()
    with SoundBoard("sfx", mixer=mixer) as board:
        board.stop_music()
        assert mixer.log[-2:] == [("music_stop",), ("unload",)]
    assert mixer.log[-1] == ("quit",)