"""Colours and the packed vertex format sent to the renderer."""

from __future__ import annotations

import dataclasses
import struct
from dataclasses import dataclass
from typing import ClassVar, NamedTuple


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0

    TRANSPARENT: ClassVar[Color]
    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]


Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.GREEN = Color(0.0, 1.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)


class VertexAttribute(NamedTuple):
    """Where one attribute lives inside a packed vertex."""

    offset: int
    shader_location: int
    components: int


_LAYOUT = struct.Struct("<8f")


@dataclass(frozen=True)
class Vertex:
    """A vertex with a position in NDC, an RGBA colour and texture coordinates."""

    position: tuple[float, float]
    color: tuple[float, float, float, float]
    tex_coords: tuple[float, float]

    STRIDE: ClassVar[int] = 32
    ATTRIBUTES: ClassVar[tuple[VertexAttribute, ...]] = (
        VertexAttribute(offset=0, shader_location=0, components=2),
        VertexAttribute(offset=8, shader_location=1, components=4),
        VertexAttribute(offset=24, shader_location=2, components=2),
    )

    @staticmethod
    def from_color(
        position: tuple[float, float],
        color: Color,
        tex_coords: tuple[float, float],
    ) -> Vertex:
        """Build a vertex from a position, a :class:`Color` and texture coordinates."""
        px, py = position
        u, v = tex_coords
        return Vertex(
            position=(float(px), float(py)),
            color=tuple(float(c) for c in dataclasses.astuple(color)),
            tex_coords=(float(u), float(v)),
        )

    def to_bytes(self) -> bytes:
        """Pack the vertex as eight little-endian 32-bit floats."""
        return _LAYOUT.pack(*self.position, *self.color, *self.tex_coords)