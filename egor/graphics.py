"""The drawing interface handed to the per-frame update function."""

from __future__ import annotations

from .camera import Camera
from .primitives import RectangleBuilder, TriangleBuilder
from .renderer import Renderer
from .text import TextBuilder
from .vertex import Color


class Graphics:
    """Draws shapes and text through a renderer, seen through a camera."""

    def __init__(self, renderer: Renderer) -> None:
        self._renderer = renderer
        self._camera = Camera()

    def tri(self) -> TriangleBuilder:
        """Start a triangle; call ``draw()`` on the builder to submit it."""
        return TriangleBuilder(self._renderer, self._camera)

    def rect(self) -> RectangleBuilder:
        """Start a rectangle; call ``draw()`` on the builder to submit it."""
        return RectangleBuilder(self._renderer, self._camera)

    def clear(self, color: Color) -> None:
        """Set the background colour."""
        self._renderer.clear(color)

    def screen_size(self) -> tuple[float, float]:
        """Width and height of the render target in pixels."""
        return (self._renderer.screen_width, self._renderer.screen_height)

    def camera(self) -> Camera:
        """The camera applied to shapes drawn through this object."""
        return self._camera

    def text(self, text: str) -> TextBuilder:
        """Start a piece of text in screen coordinates."""
        return TextBuilder(self._renderer.text, str(text))

    def update_texture(self, index: int, data: bytes) -> None:
        """Replace texture ``index`` with an encoded image."""
        self._renderer.update_texture(index, data)

    def update_texture_raw(self, index: int, w: int, h: int, data: bytes) -> None:
        """Replace texture ``index`` with raw RGBA8 pixels."""
        self._renderer.update_texture_raw(index, w, h, data)