"""Queued text drawing with pygame fonts."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .texture import RGBA8, to_rgba8
from .vertex import Color


@dataclass(frozen=True)
class TextEntry:
    """One piece of text waiting to be drawn."""

    text: str
    position: tuple[float, float]
    size: float
    color: RGBA8


class TextRenderer:
    """Collects text entries during a frame and draws them onto a surface."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.entries: list[TextEntry] = []
        self._bounds = (width, height)
        self._fonts: dict[int, pygame.font.Font] = {}

    def resize(self, width: int, height: int) -> None:
        """Record the new target size."""
        self.width = width
        self.height = height

    def prepare(self, width: int, height: int) -> list[TextEntry]:
        """Set the drawing bounds and hand over the queued entries, emptying the queue."""
        self._bounds = (width, height)
        entries, self.entries = self.entries, []
        return entries

    def _font(self, size: float) -> pygame.font.Font:
        px = max(1, round(size))
        font = self._fonts.get(px)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, px)
            self._fonts[px] = font
        return font

    def render(self, surface: pygame.Surface, entries: list[TextEntry]) -> None:
        """Draw ``entries`` onto ``surface``, clipped to the prepared bounds."""
        width, height = self._bounds
        previous = surface.get_clip()
        surface.set_clip(previous.clip(pygame.Rect(0, 0, width, height)))
        try:
            for entry in entries:
                font = self._font(entry.size)
                r, g, b, a = entry.color
                x, y = entry.position
                for line in entry.text.split("\n"):
                    if line:
                        image = font.render(line, True, (r, g, b))
                        if a < 255:
                            image.set_alpha(a)
                        surface.blit(image, (round(x), round(y)))
                    y += font.get_linesize()
        finally:
            surface.set_clip(previous)


class TextBuilder:
    """Configures one piece of text; :meth:`draw` queues it."""

    def __init__(self, renderer: TextRenderer, text: str) -> None:
        self._renderer = renderer
        self.text = text
        self.position = (0.0, 0.0)
        self.font_size = 16.0
        self.rgba: RGBA8 = (0, 0, 0, 255)

    def at(self, x: float, y: float) -> TextBuilder:
        self.position = (x, y)
        return self

    def size(self, size: float) -> TextBuilder:
        self.font_size = size
        return self

    def color(self, color: Color) -> TextBuilder:
        self.rgba = to_rgba8(color)
        return self

    def draw(self) -> None:
        """Queue the text for the next frame."""
        self._renderer.entries.append(
            TextEntry(self.text, self.position, self.font_size, self.rgba)
        )