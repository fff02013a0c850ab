"""A top-down zombie shooter played with the keyboard and mouse."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

import pygame

from .animation import SpriteAnim
from .graphics import Graphics
from .input import Input
from .texture import Texture
from .timer import FrameTimer
from .vertex import Color

PLAYER_SPEED = 200.0
PLAYER_HP = 100.0
BULLET_SPEED = 500.0
BULLET_SPREAD = 0.3
BULLET_HIT_RADIUS = 10.0
CONTACT_RADIUS = 15.0
FLASH_TIME = 0.1
MAX_SPREAD = 20
RECOLOR_INTERVAL = 1.0
SPRITE_SIZE = 64.0

LEFT_MOUSE_BUTTON = 1
PLAYER_TEXTURE = 0
ZOMBIE_TEXTURE = 1

_RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
_LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
_DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)
_UP_KEYS = (pygame.K_w, pygame.K_UP)


@dataclass(slots=True)
class Bullet:
    """A bullet in flight."""

    x: float
    y: float
    vx: float
    vy: float


@dataclass(slots=True)
class Zombie:
    """An enemy that walks straight at the player."""

    x: float
    y: float
    speed: float
    hp: float
    flash: float = 0.0


@dataclass(slots=True)
class Soldier:
    """The player."""

    x: float = 0.0
    y: float = 0.0
    hp: float = PLAYER_HP
    flash: float = 0.0


def spawn_wave(
    cx: float,
    cy: float,
    count: int,
    speed: tuple[float, float],
    hp: float,
    rng: random.Random,
) -> list[Zombie]:
    """Place ``count`` zombies on a ring 300 to 800 units around ``(cx, cy)``."""
    low, high = speed
    zombies = []
    for _ in range(count):
        angle = rng.uniform(0.0, math.tau)
        distance = rng.uniform(300.0, 800.0)
        zombies.append(
            Zombie(
                x=cx + math.cos(angle) * distance,
                y=cy + math.sin(angle) * distance,
                speed=rng.uniform(low, high),
                hp=hp,
            )
        )
    return zombies


def spawn_bullets(px: float, py: float, tx: float, ty: float, count: int) -> list[Bullet]:
    """Fire ``count`` bullets from ``(px, py)`` fanned out around the direction to the target."""
    angle = math.atan2(ty - py, tx - px)
    half = (count - 1.0) / 2.0
    bullets = []
    for i in range(count):
        a = angle + (i - half) * BULLET_SPREAD / max(half, 1.0)
        bullets.append(
            Bullet(x=px, y=py, vx=math.cos(a) * BULLET_SPEED, vy=math.sin(a) * BULLET_SPEED)
        )
    return bullets


def recolor_image(pixels: bytearray, rng: random.Random) -> tuple[int, int, int]:
    """Paint every RGBA pixel one random colour, keeping alpha; return the colour."""
    if len(pixels) % 4:
        raise ValueError(f"RGBA data length {len(pixels)} is not a multiple of 4")
    r, g, b = rng.randbytes(3)
    count = len(pixels) // 4
    pixels[0::4] = bytes([r]) * count
    pixels[1::4] = bytes([g]) * count
    pixels[2::4] = bytes([b]) * count
    return (r, g, b)


class ShooterGame:
    """Game state advanced one frame at a time by :meth:`update`.

    Texture 0 is expected to hold the soldier sheet and texture 1 the zombie
    sheet. When ``zombie_image`` is given, the zombie texture is recoloured
    every second.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        zombie_image: Texture | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.game_over = False
        self.wave = 1
        self.hp = 1.0
        self.fire_cd = 0.0
        self.fire_rate = 2.0
        self.spread = 1
        self.kills = 0
        self.player = Soldier()
        self.player_anim = SpriteAnim(1, 17, 17, 0.2)
        self.enemies = spawn_wave(0.0, 0.0, 5, (50.0, 125.0), self.hp, self.rng)
        self.enemy_anim = SpriteAnim(1, 11, 11, 0.2)
        self.bullets: list[Bullet] = []
        self.zombie_size: tuple[int, int] | None = None
        self.zombie_pixels: bytearray | None = None
        if zombie_image is not None:
            self.zombie_size = (zombie_image.width, zombie_image.height)
            self.zombie_pixels = bytearray(zombie_image.pixels)
        self.time_since_recolor = 0.0

    def _hit(self, bullet: Bullet) -> bool:
        for enemy in self.enemies:
            if math.hypot(bullet.x - enemy.x, bullet.y - enemy.y) < BULLET_HIT_RADIUS:
                enemy.hp -= 1.0
                enemy.flash = FLASH_TIME
                return True
        return False

    def update(self, timer: FrameTimer, graphics: Graphics, input: Input) -> None:
        """Advance the game by one frame and queue its drawing."""
        w, h = graphics.screen_size()
        dt = timer.delta
        player = self.player

        if self.game_over:
            graphics.text("GAME OVER").color(Color.RED).at(w / 2.0 - 40.0, h / 2.0).draw()
            return

        graphics.clear(Color.WHITE)

        mx, my = input.mouse_position()
        cx, cy = player.x - w / 2.0 + mx, player.y - h / 2.0 + my

        dx = int(input.keys_held(_RIGHT_KEYS)) - int(input.keys_held(_LEFT_KEYS))
        dy = int(input.keys_held(_DOWN_KEYS)) - int(input.keys_held(_UP_KEYS))
        moving = dx != 0 or dy != 0

        player.x += dx * PLAYER_SPEED * dt
        player.y += dy * PLAYER_SPEED * dt
        graphics.camera().target(player.x, player.y)

        self.fire_cd -= dt
        if input.mouse_held(LEFT_MOUSE_BUTTON) and self.fire_cd <= 0.0:
            self.bullets.extend(spawn_bullets(player.x, player.y, cx, cy, self.spread))
            self.fire_cd = 1.0 / self.fire_rate

        for enemy in self.enemies:
            ex, ey = player.x - enemy.x, player.y - enemy.y
            dist = max(math.hypot(ex, ey), 0.001)
            enemy.x += ex / dist * enemy.speed * dt
            enemy.y += ey / dist * enemy.speed * dt

        kept = []
        for bullet in self.bullets:
            hit = self._hit(bullet)
            offscreen = abs(bullet.x - player.x) > w / 2.0 or abs(bullet.y - player.y) > h / 2.0
            if not hit and not offscreen:
                kept.append(bullet)
        self.bullets = kept

        survivors = [e for e in self.enemies if not e.hp <= 0.0]
        self.kills += len(self.enemies) - len(survivors)
        self.enemies = survivors

        for bullet in self.bullets:
            bullet.x += bullet.vx * dt
            bullet.y += bullet.vy * dt
            graphics.rect().at(bullet.x, bullet.y).size(5.0, 10.0).color(Color.BLUE).draw()

        self.time_since_recolor += dt
        if self.time_since_recolor > RECOLOR_INTERVAL:
            self.time_since_recolor = 0.0
            if self.zombie_pixels is not None and self.zombie_size is not None:
                recolor_image(self.zombie_pixels, self.rng)
                zw, zh = self.zombie_size
                graphics.update_texture_raw(ZOMBIE_TEXTURE, zw, zh, bytes(self.zombie_pixels))

        self.enemy_anim.update(dt)
        for enemy in self.enemies:
            angle = math.atan2(player.y - enemy.y, player.x - enemy.x)
            if math.hypot(player.x - enemy.x, player.y - enemy.y) < CONTACT_RADIUS:
                player.hp -= 1.0
                player.flash = FLASH_TIME
            enemy.flash = max(enemy.flash - dt, 0.0)
            (
                graphics.rect()
                .at(enemy.x, enemy.y)
                .size(SPRITE_SIZE, SPRITE_SIZE)
                .rotation(angle + math.pi / 2.0)
                .color(Color.RED if enemy.flash > 0.0 else Color.WHITE)
                .texture(ZOMBIE_TEXTURE)
                .uv(self.enemy_anim.uv())
                .draw()
            )

        if player.hp <= 0.0:
            self.game_over = True

        player.flash = max(player.flash - dt, 0.0)
        rot = math.atan2(cy - player.y, cx - player.x) + math.pi / 2.0
        if moving:
            self.player_anim.update(dt)
            uv = self.player_anim.uv()
        else:
            uv = self.player_anim.frame_uv(0)

        (
            graphics.rect()
            .at(player.x, player.y)
            .size(SPRITE_SIZE, SPRITE_SIZE)
            .rotation(rot)
            .color(Color.RED if player.flash > 0.0 else Color.WHITE)
            .texture(PLAYER_TEXTURE)
            .uv(uv)
            .draw()
        )

        if not self.enemies:
            self._next_wave()

        graphics.text(f"Wave: {self.wave}").at(10.0, 10.0).draw()
        graphics.text(f"Zombies killed: {self.kills}").at(10.0, 30.0).draw()
        graphics.text(f"HP: {player.hp:.0f}").at(10.0, 50.0).draw()
        graphics.text(f"Fire rate: {self.fire_rate:.1f}/s").at(10.0, 70.0).draw()
        graphics.text(f"Bullet Spread: {self.spread}").at(10.0, 90.0).draw()

    def _next_wave(self) -> None:
        self.wave += 1
        if self.wave % 3 == 0:
            self.hp *= 1.1
            self.spread = min(self.spread + 1, MAX_SPREAD)
        self.fire_rate += 0.1
        self.enemies = spawn_wave(
            self.player.x,
            self.player.y,
            (self.wave + 2) * 3,
            (50.0 + self.wave * 3.0, 125.0 + self.wave * 3.0),
            self.hp,
            self.rng,
        )