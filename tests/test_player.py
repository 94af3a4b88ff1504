import pygame

from zombieufo.drawable import Drawable
from zombieufo.frame import Frame
from zombieufo.gamedata import Gamedata
from zombieufo.player import SubjectSprite
from zombieufo.render import FrameFactory
from zombieufo.vector2f import Vector2f


def make_gamedata():
    return Gamedata(
        {
            "world/width": "2000",
            "world/height": "600",
            "zombie/file": "zombie.png",
            "zombie/frames": "2",
            "zombie/frameInterval": "50",
            "zombie/bullet": "bullet",
            "zombie/speedX": "100",
            "zombie/gravity": "900",
            "zombieLeft/file": "zombieLeft.png",
            "zombieLeft/frames": "2",
            "bullet/file": "bullet.png",
            "bullet/startLoc/x": "0",
            "bullet/startLoc/y": "0",
            "bullet/speedX": "300",
            "bullet/speedY": "0",
            "bullet/distance": "500",
            "bullet/interval": "10",
            "bullet/strategy": "rectangular",
        }
    )


def load(path):
    if path.startswith("bullet"):
        return pygame.Surface((4, 4), pygame.SRCALPHA, 32)
    return pygame.Surface((20, 10), pygame.SRCALPHA, 32)


class Observer:
    def __init__(self):
        self.player_pos = Vector2f()


class Writer:
    def __init__(self):
        self.messages = []

    def write_text(self, target, msg, x, y, color=None):
        self.messages.append(msg)


class Box(Drawable):
    def __init__(self, x, y, size):
        super().__init__("box", (x, y), (0, 0))
        self._frame = Frame(pygame.Surface((size, size)))
        self.scale = 1.0

    @property
    def frame(self):
        return self._frame

    def draw(self, target):
        self._frame.draw(target, self.x, self.y)

    def update(self, ticks):
        self.position = self.position + self.velocity * (ticks * 0.001)


def make_player(writer=None):
    gamedata = make_gamedata()
    player = SubjectSprite("zombie", gamedata, FrameFactory(gamedata, load), writer=writer)
    player.position = (100, 100)
    player.velocity = (0, 0)
    return player


def test_observers_receive_position_copy():
    player = make_player()
    observer = Observer()
    player.attach(observer)
    player.update(16)
    assert observer.player_pos == player.position
    assert observer.player_pos is not player.position


def test_detached_observer_is_not_updated():
    player = make_player()
    observer = Observer()
    player.attach(observer)
    player.detach(observer)
    player.update(16)
    assert observer.player_pos == Vector2f()
    assert player.observers == []


def test_shoot_right_from_inside_frame():
    player = make_player()
    player.update(20)
    player.shoot()
    assert player.bullets.bullet_count == 1
    bullet = player.bullets.bullets[0]
    assert bullet.velocity_x == player.min_speed
    assert bullet.velocity_y == 0.0
    assert player.x <= bullet.x <= player.x + player.frame.width
    assert player.y <= bullet.y <= player.y + player.frame.height


def test_shoot_left_goes_left():
    player = make_player()
    player.left()
    player.update(20)
    player.shoot()
    bullet = player.bullets.bullets[0]
    assert player.is_left is True
    assert bullet.velocity_x < 0


def test_shoot_respects_interval():
    player = make_player()
    player.shoot()
    assert player.bullets.bullet_count == 0


def test_collided_with_uses_bullets():
    player = make_player()
    player.update(20)
    player.shoot()
    bullet = player.bullets.bullets[0]
    assert player.collided_with(Box(bullet.x + 500, bullet.y, 5)) is False
    assert player.collided_with(Box(bullet.x - 1, bullet.y - 1, 5)) is True
    assert player.bullets.free_count == 1


def test_draw_includes_bullet_pool_text():
    writer = Writer()
    player = make_player(writer)
    player.draw(pygame.Surface((400, 300)))
    assert writer.messages == ["Active bullets: 0", "Bullet pool: 0"]