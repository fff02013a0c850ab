"""Triangle and rectangle builders that turn shapes into renderer geometry."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence

from .camera import Camera
from .renderer import Renderer
from .vertex import Color, Vertex

UNTEXTURED = (-1.0, -1.0)
_NO_UV = (UNTEXTURED, UNTEXTURED, UNTEXTURED, UNTEXTURED)
_FULL_UV = ((1.0, 0.0), (0.0, 0.0), (0.0, 1.0), (1.0, 1.0))

_TRIANGLE_INDICES = (0, 1, 2)
_QUAD_INDICES = (0, 1, 2, 2, 3, 0)


class Anchor(enum.Enum):
    """Which point of a shape its position refers to."""

    CENTER = enum.auto()
    TOP_LEFT = enum.auto()


def _transform(renderer: Renderer, camera: Camera, x: float, y: float) -> tuple[float, float]:
    sx, sy = camera.world_to_screen(x, y, renderer.screen_width, renderer.screen_height)
    return renderer.to_ndc(sx, sy)


def _rotate_and_transform(
    x: float,
    y: float,
    cx: float,
    cy: float,
    angle: float,
    renderer: Renderer,
    camera: Camera,
) -> tuple[float, float]:
    dx, dy = x - cx, y - cy
    sin, cos = math.sin(angle), math.cos(angle)
    rx = cos * dx - sin * dy + cx
    ry = sin * dx + cos * dy + cy
    return _transform(renderer, camera, rx, ry)


class TriangleBuilder:
    """An upward-pointing triangle; :meth:`draw` submits it.

    The rotation is recorded but not applied to triangles.
    """

    def __init__(self, renderer: Renderer, camera: Camera) -> None:
        self._renderer = renderer
        self._camera = camera
        self.anchor_point = Anchor.CENTER
        self.position = (0.0, 0.0)
        self.side = 64.0
        self.angle = 0.0
        self.fill = Color.RED

    def anchor(self, anchor: Anchor) -> TriangleBuilder:
        self.anchor_point = anchor
        return self

    def at(self, x: float, y: float) -> TriangleBuilder:
        self.position = (x, y)
        return self

    def size(self, size: float) -> TriangleBuilder:
        self.side = size
        return self

    def color(self, color: Color) -> TriangleBuilder:
        self.fill = color
        return self

    def rotation(self, angle: float) -> TriangleBuilder:
        self.angle = angle
        return self

    def draw(self) -> None:
        """Submit the triangle to the renderer."""
        x, y = self.position
        size = self.side
        half = size / 2.0
        if self.anchor_point is Anchor.TOP_LEFT:
            points = ((x + half, y), (x, y + size), (x + size, y + size))
        else:
            points = ((x, y - half), (x - half, y + half), (x + half, y + half))

        vertices = [
            Vertex.from_color(
                _transform(self._renderer, self._camera, px, py), self.fill, UNTEXTURED
            )
            for px, py in points
        ]
        self._renderer.submit(vertices, _TRIANGLE_INDICES, 0)


class RectangleBuilder:
    """A rectangle, optionally textured and rotated; :meth:`draw` submits it."""

    def __init__(self, renderer: Renderer, camera: Camera) -> None:
        self._renderer = renderer
        self._camera = camera
        self.anchor_point = Anchor.CENTER
        self.position = (0.0, 0.0)
        self.dimensions = (64.0, 64.0)
        self.angle = 0.0
        self.fill = Color.WHITE
        self.tex_coords = _NO_UV
        self.tex_idx = 0

    def anchor(self, anchor: Anchor) -> RectangleBuilder:
        self.anchor_point = anchor
        return self

    def at(self, x: float, y: float) -> RectangleBuilder:
        self.position = (x, y)
        return self

    def size(self, w: float, h: float) -> RectangleBuilder:
        self.dimensions = (w, h)
        return self

    def color(self, color: Color) -> RectangleBuilder:
        self.fill = color
        return self

    def rotation(self, angle: float) -> RectangleBuilder:
        self.angle = angle
        return self

    def texture(self, idx: int) -> RectangleBuilder:
        """Use texture ``idx``, mapping it whole unless coordinates were already set."""
        self.tex_idx = idx
        if self.tex_coords == _NO_UV:
            self.tex_coords = _FULL_UV
        return self

    def uv(self, coords: Sequence[Sequence[float]]) -> RectangleBuilder:
        """Set the texture coordinates of the four corners."""
        corners = tuple((float(u), float(v)) for u, v in coords)
        if len(corners) != 4:
            raise ValueError(f"expected 4 texture coordinates, got {len(corners)}")
        self.tex_coords = corners
        return self

    def draw(self) -> None:
        """Submit the rectangle to the renderer."""
        x, y = self.position
        w, h = self.dimensions
        if self.anchor_point is Anchor.TOP_LEFT:
            a, b, c, d = x, y, x + w, y + h
        else:
            hw, hh = w / 2.0, h / 2.0
            a, b, c, d = x - hw, y - hh, x + hw, y + hh

        corners = ((a, b), (c, b), (c, d), (a, d))
        vertices = [
            Vertex.from_color(
                _rotate_and_transform(
                    vx, vy, x, y, self.angle, self._renderer, self._camera
                ),
                self.fill,
                uv,
            )
            for (vx, vy), uv in zip(corners, self.tex_coords)
        ]
        self._renderer.submit(vertices, _QUAD_INDICES, self.tex_idx)