"""Particles drifting across a wrapping screen."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .app import App
from .graphics import Graphics
from .input import Input
from .timer import FrameTimer
from .vertex import Color

TITLE = "Egor ECS Particles Demo"
DEFAULT_COUNT = 9999
DEFAULT_SPEED = 100.0
SPAWN_EXTENT = 300.0
PARTICLE_SIZE = 10.0


@dataclass(slots=True)
class Particle:
    """A particle's position and direction of travel."""

    x: float
    y: float
    vx: float
    vy: float


def spawn_particles(count: int, rng: random.Random) -> list[Particle]:
    """Scatter ``count`` particles around the origin with random velocities."""
    if count < 0:
        raise ValueError(f"particle count must not be negative, got {count}")
    return [
        Particle(
            x=rng.uniform(-SPAWN_EXTENT, SPAWN_EXTENT),
            y=rng.uniform(-SPAWN_EXTENT, SPAWN_EXTENT),
            vx=rng.uniform(-1.0, 1.0),
            vy=rng.uniform(-1.0, 1.0),
        )
        for _ in range(count)
    ]


def step_particles(
    particles: Iterable[Particle],
    delta: float,
    width: float,
    height: float,
    speed: float,
) -> None:
    """Move particles in place, wrapping them around a screen centred on the origin."""
    hw, hh = width / 2.0, height / 2.0
    for p in particles:
        p.x += p.vx * delta * speed
        p.y += p.vy * delta * speed
        if p.x < -hw:
            p.x += width
        if p.x > hw:
            p.x -= width
        if p.y < -hh:
            p.y += height
        if p.y > hh:
            p.y -= height


def _count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window full of wrapping particles."""
    parser = argparse.ArgumentParser(description="Particles drifting across the window.")
    parser.add_argument("--count", type=_count, default=DEFAULT_COUNT, help="number of particles")
    parser.add_argument("--speed", type=float, default=DEFAULT_SPEED, help="units per second")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    particles = spawn_particles(args.count, random.Random(args.seed))

    def update(timer: FrameTimer, graphics: Graphics, _input: Input) -> None:
        w, h = graphics.screen_size()
        step_particles(particles, timer.delta, w, h, args.speed)
        for p in particles:
            (
                graphics.rect()
                .at(p.x, p.y)
                .size(PARTICLE_SIZE, PARTICLE_SIZE)
                .color(Color.WHITE)
                .draw()
            )

    App(lambda ctx: ctx.set_title(TITLE)).run(update)
    return 0