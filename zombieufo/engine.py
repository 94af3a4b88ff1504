"""The game loop: player, boss, background, enemies, collisions and the HUD."""

from __future__ import annotations

import argparse
import random
from typing import Any

import pygame

from .clock import Clock, ClockError
from .collision import PerPixelCollisionStrategy
from .drawable import Drawable
from .framegen import FrameGenerator
from .gamedata import DEFAULT_SPEC, Gamedata, GamedataError
from .hud import Hud
from .particles import ExplodingSprite
from .player import SubjectSprite
from .render import RenderContext, TextWriter
from .sound import Effect, SoundBoard
from .sprites import Enemy, MultiSprite, SmartSprite, Sprite
from .viewport import Viewport
from .world import World
from .xmlspec import XmlSpecError

BACKGROUND_SPRITES = 15
PLAYER_START = (120.0, 461.33)
BOSS_START = (800.0, 205.0)
BOSS_SCALE = 1.5
REVIVE_DELAY = 80
MAX_JUMPS = 2


class Engine:
    """Owns the game objects and runs the event, update and draw loop."""

    def __init__(
        self,
        gamedata: Gamedata,
        context: Any,
        writer: Any,
        sound: Any,
        clock: Clock | None = None,
        frame_generator: FrameGenerator | None = None,
        make_video: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.gamedata = gamedata
        self.context = context
        self.writer = writer
        self.sound = sound
        self.clock = clock if clock is not None else Clock(gamedata)
        self.frame_generator = (
            frame_generator if frame_generator is not None else FrameGenerator(gamedata)
        )
        self.make_video = make_video
        self._rng = rng if rng is not None else random.Random()
        self.hud = Hud(writer, gamedata)
        self.viewport = Viewport(gamedata)
        self.world = World(
            "back", gamedata.get_int("back/factor"), gamedata, context, self.viewport
        )
        self.sky = World(
            "sky", gamedata.get_int("sky/factor"), gamedata, context, self.viewport
        )
        self.strategy = PerPixelCollisionStrategy(context, self.viewport)
        self.current_sprite = -1
        self.done = False
        self.is_player_dead = False
        self.you_win = False
        self.is_god = False
        self.dead_time = 0
        self.enemies: list[Drawable] = []
        self.player: Drawable
        self.boss: Drawable
        self.background: list[MultiSprite] = []
        self._populate()
        self.switch_sprite()
        print("Loading complete")

    @property
    def sprites(self) -> list[Drawable]:
        """Player, boss and background sprites, in that order."""
        return [self.player, self.boss, *self.background]

    def _populate(self) -> None:
        data, context, viewport = self.gamedata, self.context, self.viewport
        player = SubjectSprite("zombie", data, context, viewport, self.writer)
        boss = SmartSprite("ufo", data, context, viewport)
        player.attach(boss)
        background = []
        for _ in range(BACKGROUND_SPRITES):
            sprite = MultiSprite("ufo", data, context, viewport)
            sprite.scale = data.rand_float(0.35, 0.6)
            sprite.set_back()
            background.append(sprite)
        boss.velocity = (0.0, 0.0)
        boss.scale = BOSS_SCALE
        player.position = PLAYER_START
        boss.position = BOSS_START
        self.player, self.boss, self.background = player, boss, background

    def _explode(self, sprite: Drawable, name: str) -> ExplodingSprite:
        remains = Sprite(
            name,
            self.gamedata,
            sprite.frame,
            position=sprite.position,
            viewport=self.viewport,
        )
        return ExplodingSprite(remains, self.gamedata, self._rng)

    def switch_sprite(self) -> None:
        """Make the viewport follow the next sprite."""
        sprites = self.sprites
        self.current_sprite = (self.current_sprite + 1) % len(sprites)
        self.viewport.track(sprites[self.current_sprite])

    def restart(self) -> None:
        """Start a fresh round with new sprites and no enemies."""
        self.enemies.clear()
        self._populate()
        self.is_player_dead = False
        self.you_win = False
        self.viewport.track(self.player)

    def draw(self) -> None:
        target = self.context.screen
        target.fill((0, 0, 0))
        self.sky.draw(target)
        for sprite in self.background:
            sprite.draw(target)
        self.world.draw(target)
        self.player.draw(target)
        self.boss.draw(target)
        for enemy in self.enemies:
            enemy.draw(target)
        self.viewport.draw(target)
        hp = self.boss.hp if isinstance(self.boss, SmartSprite) else 0
        self.hud.draw(
            target,
            self.clock.fps(),
            self.clock.avg_fps(),
            self.clock.seconds(),
            hp,
            self.you_win,
            self.is_god,
        )
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()

    def update(self, ticks: int) -> None:
        for sprite in self.sprites:
            sprite.update(ticks)
        for enemy in self.enemies:
            enemy.update(ticks)
        self.sky.update()
        self.world.update()
        self.viewport.update()  # always last

    def check_for_collisions(self) -> None:
        """Blow the player up if any enemy touches it."""
        for enemy in self.enemies:
            if self.strategy.execute(self.player, enemy):
                print("collision: ")
                self.player = self._explode(self.player, "zombie")
                self.is_player_dead = True
                self.sound.play(Effect.DEAD)
                self.dead_time = self.clock.frames
                self.viewport.track(self.player)
                break

    def _handle_event(self, event: pygame.event.Event, pressed: Any) -> None:
        player = self.player
        alive = not self.is_player_dead and isinstance(player, SubjectSprite)
        player.velocity_x = 0.0
        if pressed[pygame.K_LEFT] and alive:
            player.left()
        if pressed[pygame.K_RIGHT] and alive:
            player.right()
        if pressed[pygame.K_SPACE] and alive and player.jump_time <= MAX_JUMPS:
            player.velocity_y = -self.gamedata.get_float("zombie/speedY")
            player.jump()
            self.sound.play(Effect.JUMP)
        if event.type != pygame.KEYDOWN:
            return
        if pressed[pygame.K_ESCAPE] or pressed[pygame.K_q]:
            self.done = True
            return
        if pressed[pygame.K_r]:
            self.restart()
        if pressed[pygame.K_p]:
            if self.clock.paused:
                self.clock.unpause()
            else:
                self.clock.pause()
        if pressed[pygame.K_s] and not self.is_player_dead and isinstance(
            self.player, SubjectSprite
        ):
            self.player.shoot()
            self.sound.play(Effect.SHOOT)
        if pressed[pygame.K_g]:
            self.is_god = not self.is_god
        if pressed[pygame.K_F1]:
            self.hud.hide()
        if pressed[pygame.K_F4]:
            print(
                "Terminating frame capture"
                if self.make_video
                else "Initiating frame capture"
            )
            self.make_video = not self.make_video

    def _revive(self) -> None:
        self.enemies.clear()
        self.sound.play(Effect.REVIVE)
        zombie = SubjectSprite(
            "zombie", self.gamedata, self.context, self.viewport, self.writer
        )
        zombie.position = self.player.position
        self.player = zombie
        self.is_player_dead = False
        if isinstance(self.boss, SmartSprite):
            zombie.attach(self.boss)
        self.viewport.track(self.player)

    def _hit_boss(self) -> None:
        player, boss = self.player, self.boss
        if not isinstance(boss, SmartSprite) or not isinstance(player, SubjectSprite):
            return
        if not player.collided_with(boss):
            return
        boss.damage()
        if boss.is_dead:
            self.you_win = True
            self.sound.play(Effect.UFO_DEAD)
            player.detach(boss)
            self.boss = self._explode(boss, "ufo")
        else:
            self.sound.play(Effect.DAMAGE)

    def _advance(self, ticks: int) -> None:
        frames = self.clock.frames
        if (
            frames % 10 == 0
            and not self.is_player_dead
            and (frames // 100) % 2 == 0
            and not self.you_win
        ):
            self.sound.play(Effect.BUG)
            self.enemies.append(
                Enemy(
                    "enemy",
                    self.gamedata,
                    self.context,
                    self.boss.position,
                    self.player.position,
                    self.viewport,
                )
            )
        if self.is_player_dead and frames - self.dead_time > REVIVE_DELAY:
            self._revive()
        self.clock.increment_frame()
        self.clock.add_fps(self.clock.fps())
        self.draw()
        self.update(ticks)
        if not self.is_player_dead:
            if not self.is_god:
                self.check_for_collisions()
            if not self.is_player_dead:
                self._hit_boss()
            if not self.you_win and isinstance(self.boss, SmartSprite):
                self.boss.player_dead = False
        elif not self.you_win and isinstance(self.boss, SmartSprite):
            self.boss.player_dead = True
        if self.make_video:
            self.frame_generator.make_frame(self.context.screen)

    def play(self) -> None:
        """Run until the window is closed or the player quits."""
        self.clock.elapsed_ticks()
        while not self.done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.done = True
                    break
                self._handle_event(event, pygame.key.get_pressed())
                if self.done:
                    break
            ticks = self.clock.elapsed_ticks()
            if ticks > 0:
                self._advance(ticks)

    def close(self) -> None:
        """Release the sound device."""
        print("Terminating program")
        self.sound.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="zombieufo", description="Shoot down the UFO while dodging its bugs."
    )
    parser.add_argument("--spec", default=DEFAULT_SPEC, help="game specification XML")
    parser.add_argument("--sound-dir", default="sound", help="directory of sound files")
    args = parser.parse_args(argv)
    try:
        gamedata = Gamedata.from_file(args.spec)
        with RenderContext(gamedata) as context:
            engine = Engine(
                gamedata, context, TextWriter(gamedata), SoundBoard(args.sound_dir)
            )
            try:
                engine.play()
            finally:
                engine.close()
    except (
        XmlSpecError,
        GamedataError,
        ClockError,
        OSError,
        RuntimeError,
        ValueError,
        pygame.error,
    ) as exc:
        print(exc)
        return 1
    return 0