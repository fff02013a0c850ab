"""Textures: RGBA pixel data decoded from images or supplied raw."""

from __future__ import annotations

import io
import math
from dataclasses import dataclass, field

import pygame

from .vertex import Color

RGBA8 = tuple[int, int, int, int]


def _channel(value: float) -> int:
    if value != value:  # NaN saturates to zero
        return 0
    return min(255, max(0, math.floor(value * 255.0 + 0.5)))


def to_rgba8(color: Color) -> RGBA8:
    """Convert a float :class:`Color` to 8-bit RGBA, rounding half away from zero."""
    return (
        _channel(color.r),
        _channel(color.g),
        _channel(color.b),
        _channel(color.a),
    )


@dataclass(eq=False)
class Texture:
    """An RGBA8 image of ``width`` x ``height`` pixels, rows top to bottom."""

    width: int
    height: int
    pixels: bytes
    _surface: pygame.Surface | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"texture size must be positive, got {self.width}x{self.height}")
        expected = 4 * self.width * self.height
        if len(self.pixels) < expected:
            raise ValueError(
                f"texture data holds {len(self.pixels)} bytes, "
                f"{self.width}x{self.height} RGBA needs {expected}"
            )
        self.pixels = bytes(self.pixels[:expected])

    @staticmethod
    def from_rgba(data: bytes, width: int, height: int) -> Texture:
        """Build a texture from raw RGBA8 bytes."""
        return Texture(int(width), int(height), bytes(data))

    @staticmethod
    def decode(data: bytes) -> Texture:
        """Decode an encoded image (such as PNG) into a texture."""
        try:
            image = pygame.image.load(io.BytesIO(bytes(data)))
        except pygame.error as exc:
            raise ValueError(f"cannot decode image: {exc}") from exc
        width, height = image.get_size()
        return Texture(width, height, pygame.image.tobytes(image, "RGBA"))

    @staticmethod
    def default() -> Texture:
        """A single opaque white pixel."""
        return Texture(1, 1, b"\xff\xff\xff\xff")

    def to_surface(self) -> pygame.Surface:
        """The texture as a pygame surface with per-pixel alpha."""
        if self._surface is None:
            self._surface = pygame.image.frombytes(
                self.pixels, (self.width, self.height), "RGBA"
            )
        return self._surface

    def sample(self, u: float, v: float) -> RGBA8:
        """Nearest-texel lookup with coordinates clamped to the edges."""
        x = min(self.width - 1, max(0, math.floor(u * self.width)))
        y = min(self.height - 1, max(0, math.floor(v * self.height)))
        start = (y * self.width + x) * 4
        r, g, b, a = self.pixels[start : start + 4]
        return (r, g, b, a)