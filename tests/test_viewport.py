from types import SimpleNamespace

import pytest

from zombieufo.gamedata import Gamedata, GamedataError
from zombieufo.vector2f import Vector2f
from zombieufo.viewport import Viewport

WORLD_W, WORLD_H = 2000, 600
VIEW_W, VIEW_H = 854, 480


def make_gamedata():
    return Gamedata(
        {
            "world/width": str(WORLD_W),
            "world/height": str(WORLD_H),
            "view/width": str(VIEW_W),
            "view/height": str(VIEW_H),
        }
    )


def make_object(x, y, width=64, height=64):
    return SimpleNamespace(
        x=x, y=y, frame=SimpleNamespace(width=width, height=height)
    )


def test_starts_at_origin():
    viewport = Viewport(make_gamedata())
    assert viewport.position == Vector2f(0, 0)


def test_update_without_object_raises():
    viewport = Viewport(make_gamedata())
    with pytest.raises(RuntimeError):
        viewport.update()


def test_missing_setting_raises():
    with pytest.raises(GamedataError):
        Viewport(Gamedata({"world/width": "10"}))


def test_centres_on_object_in_middle():
    viewport = Viewport(make_gamedata())
    obj = make_object(1000, 300, 64, 64)
    viewport.track(obj)
    viewport.update()
    assert viewport.x + VIEW_W // 2 == obj.x + 64 // 2
    assert viewport.y + VIEW_H // 2 == obj.y + 64 // 2
    assert viewport.object_to_track is obj


def test_clamps_to_world_origin():
    viewport = Viewport(make_gamedata())
    viewport.track(make_object(10, 5))
    viewport.update()
    assert (viewport.x, viewport.y) == (0, 0)


def test_clamps_to_far_edge():
    viewport = Viewport(make_gamedata())
    viewport.track(make_object(WORLD_W, WORLD_H))
    viewport.update()
    assert viewport.x == WORLD_W - VIEW_W
    assert viewport.y == WORLD_H - VIEW_H


def test_follows_object_as_it_moves():
    viewport = Viewport(make_gamedata())
    obj = make_object(800, 300)
    viewport.track(obj)
    viewport.update()
    before = viewport.x
    obj.x += 50
    viewport.update()
    assert viewport.x - before == 50


def test_position_setters():
    viewport = Viewport(make_gamedata())
    viewport.x = 12
    viewport.y = 34
    assert viewport.position == Vector2f(12, 34)