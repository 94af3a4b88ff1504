import pygame

from zombieufo.gamedata import Gamedata
from zombieufo.hud import Hud


class Writer:
    def __init__(self):
        self.calls = []

    def write_text(self, target, msg, x, y, color=None):
        self.calls.append((msg, x, y, color))


def make_gamedata():
    return Gamedata(
        {
            "hud/startLoc/x": "10",
            "hud/startLoc/y": "10",
            "hud/width": "200",
            "hud/height": "100",
            "hud1/startLoc/x": "300",
            "hud1/startLoc/y": "10",
            "hud1/width": "100",
            "hud1/height": "50",
        }
    )


def texts(lines):
    return [line[0] for line in lines]


def test_lines_while_playing():
    hud = Hud(Writer(), make_gamedata())
    lines = hud.lines(60, 58, 12, 3, False, False)
    assert lines[0] == ("fps: 60", 30, 30)
    assert lines[1] == ("avg fps: 58", 30, 60)
    assert lines[2] == ("time: 12s", 30, 90)
    assert ("Boss HP: ||||||", 610, 90) in lines
    assert "turn on godMode : [g]" in texts(lines)
    assert "You Win! Press [r] to restart." not in texts(lines)


def test_lines_when_won_and_god_mode():
    hud = Hud(Writer(), make_gamedata())
    lines = texts(hud.lines(60, 58, 12, 0, True, True))
    assert "turn off godMode : [g]" in lines
    assert "You Win! Press [r] to restart." in lines
    assert not any(line.startswith("Boss HP") for line in lines)


def test_credits_line_optional():
    with_credits = Hud(Writer(), make_gamedata(), credits="Made for fun")
    without = Hud(Writer(), make_gamedata())
    assert ("Made for fun", 320, 30) in with_credits.lines(1, 1, 1, 1, False, False)
    assert len(without.lines(1, 1, 1, 1, False, False)) == 9


def test_draw_writes_lines_and_borders():
    writer = Writer()
    hud = Hud(writer, make_gamedata())
    target = pygame.Surface((854, 480))
    hud.draw(target, 60, 58, 12, 3, False, False)
    expected = hud.lines(60, 58, 12, 3, False, False)
    assert [call[:3] for call in writer.calls] == expected
    assert all(call[3] == (255, 0, 255, 0) for call in writer.calls)
    assert tuple(target.get_at((10, 10))) == (255, 0, 0, 255)
    assert tuple(target.get_at((300, 10))) == (255, 0, 0, 255)


def test_hide_toggles_drawing():
    writer = Writer()
    hud = Hud(writer, make_gamedata())
    hud.hide()
    assert hud.on is False
    hud.draw(pygame.Surface((854, 480)), 1, 1, 1, 1, False, False)
    assert writer.calls == []
    hud.hide()
    assert hud.on is True
    hud.draw(pygame.Surface((854, 480)), 1, 1, 1, 1, False, False)
    assert len(writer.calls) == len(hud.lines(1, 1, 1, 1, False, False))