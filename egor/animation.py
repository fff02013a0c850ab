"""Sprite-sheet animation driven by frame time."""

from __future__ import annotations

from dataclasses import dataclass

UV = tuple[
    tuple[float, float], tuple[float, float], tuple[float, float], tuple[float, float]
]


@dataclass(frozen=True)
class SpriteFrame:
    """One cell of a sprite sheet and how long it is shown."""

    uv_coords: UV
    duration: float


class SpriteAnim:
    """Cycles through the first ``total`` cells of a ``rows`` x ``cols`` sheet."""

    def __init__(self, rows: int, cols: int, total: int, dur: float) -> None:
        fw, fh = 1.0 / cols, 1.0 / rows
        self.frames: list[SpriteFrame] = []
        for i in range(total):
            row, col = divmod(i, cols)
            x, y = col * fw, row * fh
            self.frames.append(
                SpriteFrame(
                    uv_coords=((x, y), (x + fw, y), (x + fw, y + fh), (x, y + fh)),
                    duration=dur,
                )
            )
        self._timer = 0.0
        self.current = 0

    def update(self, dt: float) -> None:
        """Advance the animation clock by ``dt`` seconds."""
        if not self.frames:
            return
        self._timer += dt
        if self._timer >= self.frames[self.current].duration:
            self._timer = 0.0
            self.current = (self.current + 1) % len(self.frames)

    def uv(self) -> UV:
        """Texture coordinates of the current frame."""
        return self.frame_uv(self.current)

    def frame_uv(self, f: int) -> UV:
        """Texture coordinates of frame ``f``."""
        if not 0 <= f < len(self.frames):
            raise IndexError(f"frame {f} out of range for {len(self.frames)} frames")
        return self.frames[f].uv_coords