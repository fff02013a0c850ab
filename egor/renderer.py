"""Batched triangle rendering onto a pygame surface."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence

import pygame

from .text import TextRenderer
from .texture import Texture, to_rgba8
from .vertex import Color, Vertex

MAX_INDICES = 0xFFFF * 32
MAX_VERTICES = (MAX_INDICES // 6) * 4
_U16_MAX = 0xFFFF


class RenderBatch:
    """Vertices and indices that share one texture."""

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.indices: list[int] = []
        self.texture_index = 0

    def submit(self, vertices: Sequence[Vertex], indices: Sequence[int], tex_idx: int) -> None:
        """Append geometry, offsetting ``indices`` past the vertices already held."""
        base = len(self.vertices)
        shifted = [i + base for i in indices]
        if any(not 0 <= i <= _U16_MAX for i in shifted):
            raise OverflowError("index does not fit in 16 bits")
        self.vertices.extend(vertices)
        self.indices.extend(shifted)
        self.texture_index = tex_idx

    def upload(self) -> tuple[bytes, bytes]:
        """Pack the batch as vertex bytes and 4-byte aligned 16-bit index bytes."""
        if len(self.vertices) > MAX_VERTICES:
            raise OverflowError("Vertex buffer overflow")
        if len(self.indices) > MAX_INDICES:
            raise OverflowError("Index buffer overflow")
        vertex_data = b"".join(v.to_bytes() for v in self.vertices)
        index_data = struct.pack(f"<{len(self.indices)}H", *self.indices)
        index_data += b"\x00" * (-len(index_data) % 4)
        return vertex_data, index_data

    def clear(self) -> None:
        self.vertices.clear()
        self.indices.clear()

    def index_count(self) -> int:
        return len(self.indices)


def _untextured(vertex: Vertex) -> bool:
    u, v = vertex.tex_coords
    return u < 0.0 or v < 0.0


class Renderer:
    """Collects geometry in texture batches and draws each frame onto a surface."""

    def __init__(self, width: int, height: int) -> None:
        self._width = max(1, int(width))
        self._height = max(1, int(height))
        self.batches: list[RenderBatch] = [RenderBatch()]
        self.clear_color = Color.BLACK
        self.textures: list[Texture] = []
        self.default_texture = Texture.default()
        self.text = TextRenderer(self._width, self._height)

    @property
    def screen_width(self) -> float:
        return float(self._width)

    @property
    def screen_height(self) -> float:
        return float(self._height)

    def render_frame(self, surface: pygame.Surface) -> None:
        """Clear ``surface``, draw every batch and the queued text, then empty the batches."""
        entries = self.text.prepare(self._width, self._height)
        surface.fill(to_rgba8(self.clear_color))

        for batch in self.batches:
            if not batch.vertices:
                continue
            index = batch.texture_index
            texture = (
                self.textures[index] if 0 <= index < len(self.textures) else self.default_texture
            )
            batch.upload()
            self._draw_batch(surface, batch, texture)

        self.text.render(surface, entries)

        for batch in self.batches:
            batch.clear()

    def _draw_batch(self, surface: pygame.Surface, batch: RenderBatch, texture: Texture) -> None:
        sw, sh = surface.get_size()
        verts = batch.vertices
        for a, b, c in zip(*[iter(batch.indices)] * 3):
            tri = (verts[a], verts[b], verts[c])
            points = [
                ((x + 1.0) * 0.5 * sw, (1.0 - y) * 0.5 * sh)
                for x, y in (v.position for v in tri)
            ]
            if all(_untextured(v) for v in tri) and tri[0].color == tri[1].color == tri[2].color:
                self._fill_solid(surface, points, tri[0].color)
            else:
                self._rasterize(surface, points, tri, texture)

    @staticmethod
    def _fill_solid(surface: pygame.Surface, points, color) -> None:
        (x0, y0), (x1, y1), (x2, y2) = points
        if (x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0) == 0:
            return
        rgba = to_rgba8(Color(*color))
        if rgba[3] == 0:
            return
        if rgba[3] == 255:
            pygame.draw.polygon(surface, rgba[:3], points)
            return
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        left, top = math.floor(min(xs)), math.floor(min(ys))
        rect = pygame.Rect(left, top, math.ceil(max(xs)) - left + 1, math.ceil(max(ys)) - top + 1)
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.polygon(layer, rgba, [(x - rect.x, y - rect.y) for x, y in points])
        surface.blit(layer, rect.topleft)

    @staticmethod
    def _rasterize(surface: pygame.Surface, points, tri, texture: Texture) -> None:
        (x0, y0), (x1, y1), (x2, y2) = points
        area = (x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)
        if area == 0:
            return
        clip = surface.get_clip()
        left = max(clip.left, math.floor(min(x0, x1, x2)))
        right = min(clip.right, math.ceil(max(x0, x1, x2)))
        top = max(clip.top, math.floor(min(y0, y1, y2)))
        bottom = min(clip.bottom, math.ceil(max(y0, y1, y2)))
        colors = [v.color for v in tri]
        uvs = [v.tex_coords for v in tri]

        for py in range(top, bottom):
            cy = py + 0.5
            for px in range(left, right):
                cx = px + 0.5
                w0 = ((x1 - cx) * (y2 - cy) - (x2 - cx) * (y1 - cy)) / area
                w1 = ((x2 - cx) * (y0 - cy) - (x0 - cx) * (y2 - cy)) / area
                w2 = 1.0 - w0 - w1
                if w0 < 0.0 or w1 < 0.0 or w2 < 0.0:
                    continue
                weights = (w0, w1, w2)
                color = [sum(w * c[k] for w, c in zip(weights, colors)) for k in range(4)]
                u = sum(w * uv[0] for w, uv in zip(weights, uvs))
                v = sum(w * uv[1] for w, uv in zip(weights, uvs))
                if u < 0.0 or v < 0.0:
                    texel = (1.0, 1.0, 1.0, 1.0)
                else:
                    texel = tuple(t / 255.0 for t in texture.sample(u, v))
                src = [t * c for t, c in zip(texel, color)]
                alpha = min(1.0, max(0.0, src[3]))
                if alpha <= 0.0:
                    continue
                dst = surface.get_at((px, py))
                blended = [
                    min(255, max(0, round(s * 255.0 * alpha + d * (1.0 - alpha))))
                    for s, d in zip(src[:3], dst[:3])
                ]
                surface.set_at((px, py), (*blended, dst[3]))

    def resize(self, w: int, h: int) -> None:
        """Change the target size."""
        if w <= 0 or h <= 0:
            raise ValueError(f"surface size must be positive, got {w}x{h}")
        self._width, self._height = int(w), int(h)
        self.text.resize(self._width, self._height)

    def clear(self, color: Color) -> None:
        """Set the colour the next frames are cleared to."""
        self.clear_color = color

    def submit(self, vertices: Sequence[Vertex], indices: Sequence[int], texture_index: int) -> None:
        """Add geometry to the batch for ``texture_index``, creating it if needed."""
        for batch in self.batches:
            if batch.texture_index == texture_index:
                batch.submit(vertices, indices, texture_index)
                return
        batch = RenderBatch()
        batch.submit(vertices, indices, texture_index)
        self.batches.append(batch)

    def to_ndc(self, x: float, y: float) -> tuple[float, float]:
        """Convert screen pixels to normalised device coordinates."""
        w, h = self.screen_width, self.screen_height
        return ((x / w) * 2.0 - 1.0, 1.0 - (y / h) * 2.0)

    def add_texture(self, data: bytes) -> int:
        """Decode an image and register it; return its index."""
        return self._push(Texture.decode(data))

    def add_texture_raw(self, w: int, h: int, data: bytes) -> int:
        """Register raw RGBA8 pixels; return the texture's index."""
        return self._push(Texture.from_rgba(data, w, h))

    def _push(self, texture: Texture) -> int:
        self.textures.append(texture)
        return len(self.textures) - 1

    def update_texture(self, index: int, data: bytes) -> None:
        """Replace texture ``index`` with a decoded image."""
        self._replace(index, Texture.decode(data))

    def update_texture_raw(self, index: int, w: int, h: int, data: bytes) -> None:
        """Replace texture ``index`` with raw RGBA8 pixels."""
        self._replace(index, Texture.from_rgba(data, w, h))

    def _replace(self, index: int, texture: Texture) -> None:
        if not 0 <= index < len(self.textures):
            raise IndexError(f"texture {index} out of range for {len(self.textures)} textures")
        self.textures[index] = texture