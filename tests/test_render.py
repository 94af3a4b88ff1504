import pygame
import pytest

from zombieufo.gamedata import Gamedata, GamedataError
from zombieufo.render import (
    HEIGHT,
    WIDTH,
    FrameFactory,
    RenderContext,
    TextWriter,
)

CLEAR = (0, 0, 0, 0)


def strip_surface(count, cell_w, cell_h):
    surface = pygame.Surface((count * cell_w, cell_h), pygame.SRCALPHA)
    for i in range(count):
        surface.fill((i * 50, 10, 20, 255), (i * cell_w, 0, cell_w, cell_h))
    return surface


class Loader:
    def __init__(self, images):
        self.images = images
        self.calls = []

    def __call__(self, filename):
        self.calls.append(filename)
        return self.images[filename]


def make_factory(extra=None):
    data = {
        "ufo/file": "ufo.png",
        "ufo/frames": "4",
        "back/file": "back.png",
        "title": "Game",
    }
    data.update(extra or {})
    loader = Loader(
        {"ufo.png": strip_surface(4, 3, 2), "back.png": strip_surface(1, 5, 5)}
    )
    return FrameFactory(Gamedata(data), loader), loader


def font_gamedata(font_file="unused.ttf"):
    return Gamedata(
        {
            "font/file": font_file,
            "font/size": "12",
            "font/red": "0",
            "font/green": "255",
            "font/blue": "0",
            "font/alpha": "255",
        }
    )


def test_get_surface_is_cached():
    factory, loader = make_factory()
    first = factory.get_surface("back")
    assert factory.get_surface("back") is first
    assert loader.calls == ["back.png"]


def test_get_frame_covers_image_and_is_cached():
    factory, loader = make_factory()
    frame = factory.get_frame("back")
    assert (frame.width, frame.height) == loader.images["back.png"].get_size()
    assert factory.get_frame("back") is frame


def test_missing_file_tag_raises():
    factory, _ = make_factory()
    with pytest.raises(GamedataError):
        factory.get_frame("nothing")


def test_get_frames_splits_strip():
    factory, loader = make_factory()
    frames = factory.get_frames("ufo")
    assert len(frames) == 4
    for index, frame in enumerate(frames):
        assert (frame.width, frame.height) == (3, 2)
        assert frame.texture.get_at((0, 0)) == (index * 50, 10, 20, 255)


def test_get_frames_is_cached():
    factory, loader = make_factory()
    first = factory.get_frames("ufo")
    second = factory.get_frames("ufo")
    assert first == second
    assert all(a is b for a, b in zip(first, second))
    assert loader.calls == ["ufo.png"]


def test_get_frames_uses_explicit_frame_size():
    factory, _ = make_factory(
        {"ufo/frames": "2", "ufo/frameWidth": "3", "ufo/frameHeight": "1"}
    )
    frames = factory.get_frames("ufo")
    assert [(f.width, f.height) for f in frames] == [(3, 1), (3, 1)]
    assert frames[1].texture.get_at((0, 0)) == (50, 10, 20, 255)


def test_get_frames_rejects_zero_frames():
    factory, _ = make_factory({"ufo/frames": "0"})
    with pytest.raises(ValueError):
        factory.get_frames("ufo")


def test_text_writer_reads_color():
    pygame.font.init()
    writer = TextWriter(font_gamedata(), pygame.font.Font(None, 20))
    assert writer.text_color == pygame.Color(0, 255, 0, 255)


def test_text_writer_missing_font_raises(tmp_path):
    with pytest.raises(OSError):
        TextWriter(font_gamedata(str(tmp_path / "missing.ttf")))


def test_write_text_draws_at_position():
    pygame.font.init()
    writer = TextWriter(font_gamedata(), pygame.font.Font(None, 24))
    target = pygame.Surface((200, 60), pygame.SRCALPHA)
    target.fill(CLEAR)
    drawn = writer.write_text(target, "Hi", 5, 6, (255, 0, 0, 255))
    assert drawn.topleft == (5, 6)
    assert drawn.width > 0
    colors = {
        tuple(target.get_at((px, py)))[:3]
        for px in range(drawn.left, drawn.right)
        for py in range(drawn.top, drawn.bottom)
    }
    assert (255, 0, 0) in colors


def test_read_surface_round_trip(tmp_path):
    pygame.font.init()
    writer = TextWriter(font_gamedata(), pygame.font.Font(None, 12))
    surface = pygame.Surface((3, 2), pygame.SRCALPHA)
    surface.fill((1, 2, 3, 255))
    path = tmp_path / "image.png"
    pygame.image.save(surface, str(path))
    loaded = writer.read_surface(path)
    assert loaded.get_size() == (3, 2)
    assert loaded.get_at((0, 0)) == (1, 2, 3, 255)


def test_read_surface_missing_raises(tmp_path):
    pygame.font.init()
    writer = TextWriter(font_gamedata(), pygame.font.Font(None, 12))
    with pytest.raises(OSError):
        writer.read_surface(tmp_path / "nope.png")


def test_render_context_window_and_delegation(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    factory, _ = make_factory()
    with RenderContext(factory.gamedata, factory) as context:
        assert context.screen.get_size() == (WIDTH, HEIGHT)
        assert pygame.display.get_caption()[0] == "Game"
        assert context.get_frame("back") is factory.get_frame("back")
        assert context.get_surface("back") is factory.get_surface("back")
        assert len(context.get_frames("ufo")) == 4
    assert not pygame.display.get_init()