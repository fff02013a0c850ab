import math
import random

import pygame
import pytest

from egor.graphics import Graphics
from egor.input import ElementState, Input
from egor.renderer import Renderer
from egor.shooter import (
    Bullet,
    ShooterGame,
    Zombie,
    recolor_image,
    spawn_bullets,
    spawn_wave,
)
from egor.texture import Texture
from egor.timer import FrameTimer


def _frame(delta):
    timer = FrameTimer()
    timer.delta = delta
    return timer


def _setup(delta=0.016):
    renderer = Renderer(800, 600)
    return renderer, Graphics(renderer), Input(), _frame(delta)


def test_single_bullet_flies_straight_at_target():
    (bullet,) = spawn_bullets(0.0, 0.0, 10.0, 0.0, 1)
    assert (bullet.x, bullet.y) == (0.0, 0.0)
    assert bullet.vx == pytest.approx(500.0)
    assert bullet.vy == pytest.approx(0.0, abs=1e-9)


def test_bullet_fan_is_symmetric_with_fixed_speed():
    bullets = spawn_bullets(1.0, 2.0, 1.0, 50.0, 3)
    angles = [math.atan2(b.vy, b.vx) for b in bullets]
    for b in bullets:
        assert math.hypot(b.vx, b.vy) == pytest.approx(500.0)
    assert angles[1] == pytest.approx(math.pi / 2)
    assert angles[1] - angles[0] == pytest.approx(0.3)
    assert angles[2] - angles[1] == pytest.approx(0.3)


def test_no_bullets_for_zero_count():
    assert spawn_bullets(0.0, 0.0, 1.0, 1.0, 0) == []


def test_spawn_wave_ring_and_stats():
    zombies = spawn_wave(10.0, -5.0, 40, (50.0, 125.0), 2.5, random.Random(7))
    assert len(zombies) == 40
    for z in zombies:
        assert 300.0 - 1e-6 <= math.hypot(z.x - 10.0, z.y + 5.0) <= 800.0 + 1e-6
        assert 50.0 <= z.speed <= 125.0
        assert z.hp == 2.5
        assert z.flash == 0.0


def test_spawn_wave_is_deterministic_for_a_seed():
    a = spawn_wave(0.0, 0.0, 5, (1.0, 2.0), 1.0, random.Random(3))
    b = spawn_wave(0.0, 0.0, 5, (1.0, 2.0), 1.0, random.Random(3))
    assert a == b


def test_recolor_keeps_alpha_and_uses_one_colour():
    pixels = bytearray([1, 2, 3, 10, 4, 5, 6, 20, 7, 8, 9, 30])
    rgb = recolor_image(pixels, random.Random(1))
    assert bytes(pixels[3::4]) == bytes([10, 20, 30])
    assert [tuple(pixels[i : i + 3]) for i in range(0, 12, 4)] == [rgb] * 3


def test_recolor_rejects_partial_pixels():
    with pytest.raises(ValueError):
        recolor_image(bytearray(5), random.Random(1))


def test_new_game_starts_with_first_wave():
    game = ShooterGame(rng=random.Random(0))
    assert game.wave == 1
    assert len(game.enemies) == 5
    assert game.player.hp == 100.0
    assert not game.game_over


def test_holding_d_moves_player_right():
    game = ShooterGame(rng=random.Random(0))
    renderer, graphics, inp, timer = _setup(delta=1.0)
    inp.keyboard(pygame.K_d, ElementState.PRESSED)
    game.update(timer, graphics, inp)
    assert game.player.x == pytest.approx(200.0)
    assert game.player.y == 0.0
    assert graphics.camera().x == pytest.approx(game.player.x)


def test_left_mouse_fires_and_sets_cooldown():
    game = ShooterGame(rng=random.Random(0))
    renderer, graphics, inp, timer = _setup()
    inp.mouse(1, ElementState.PRESSED)
    game.update(timer, graphics, inp)
    assert len(game.bullets) == game.spread
    assert game.fire_cd == pytest.approx(1.0 / game.fire_rate)


def test_bullet_kill_advances_wave():
    game = ShooterGame(rng=random.Random(0))
    game.enemies = [Zombie(50.0, 0.0, speed=0.0, hp=1.0)]
    game.bullets = [Bullet(50.0, 0.0, 0.0, 0.0)]
    renderer, graphics, inp, timer = _setup(delta=0.01)
    game.update(timer, graphics, inp)
    assert game.kills == 1
    assert game.bullets == []
    assert game.wave == 2
    assert len(game.enemies) == 12
    texts = [e.text for e in renderer.text.entries]
    assert "Wave: 2" in texts
    assert "Zombies killed: 1" in texts


def test_contact_hurts_player_and_ends_game():
    game = ShooterGame(rng=random.Random(0))
    game.enemies = [Zombie(5.0, 0.0, speed=0.0, hp=1.0)]
    game.player.hp = 1.0
    renderer, graphics, inp, timer = _setup(delta=0.01)
    game.update(timer, graphics, inp)
    assert game.player.hp <= 0.0
    assert game.game_over

    renderer.text.entries.clear()
    game.update(timer, graphics, inp)
    (entry,) = renderer.text.entries
    assert entry.text == "GAME OVER"
    assert entry.color == (255, 0, 0, 255)


def test_frame_queues_hud_and_sprites():
    game = ShooterGame(rng=random.Random(0))
    renderer, graphics, inp, timer = _setup()
    game.update(timer, graphics, inp)
    texts = [e.text for e in renderer.text.entries]
    assert "HP: 100" in texts
    assert "Bullet Spread: 1" in texts
    by_texture = {b.texture_index: b for b in renderer.batches}
    assert len(by_texture[0].vertices) == 4
    assert len(by_texture[1].vertices) == 4 * len(game.enemies)


def test_zombie_texture_is_recoloured_after_a_second():
    original = bytes([9, 9, 9, 100, 9, 9, 9, 200])
    game = ShooterGame(rng=random.Random(0), zombie_image=Texture.from_rgba(original, 2, 1))
    renderer, graphics, inp, timer = _setup(delta=1.5)
    renderer.add_texture_raw(1, 1, b"\x00\x00\x00\xff")
    renderer.add_texture_raw(2, 1, original)
    game.update(timer, graphics, inp)
    updated = renderer.textures[1]
    assert updated.pixels == bytes(game.zombie_pixels)
    assert updated.pixels[3::4] == bytes([100, 200])
    assert updated.pixels[0:3] == updated.pixels[4:7]
    assert game.time_since_recolor == 0.0