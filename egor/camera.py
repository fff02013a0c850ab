"""A 2D camera that maps between world and screen coordinates."""

from __future__ import annotations

MIN_ZOOM = 0.1
MAX_ZOOM = 10.0


class Camera:
    """Camera centred on a world position, with a clamped zoom factor."""

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self._zoom = 1.0

    def __repr__(self) -> str:
        return f"Camera(x={self.x!r}, y={self.y!r}, zoom={self._zoom!r})"

    @property
    def zoom(self) -> float:
        """Current zoom factor."""
        return self._zoom

    def target(self, x: float, y: float) -> None:
        """Centre the camera on the world point ``(x, y)``."""
        self.x = x
        self.y = y

    def viewport(
        self, screen_width: float, screen_height: float
    ) -> tuple[float, float, float, float]:
        """Return the visible world rectangle as ``(left, top, right, bottom)``."""
        hw = screen_width * 0.5 / self._zoom
        hh = screen_height * 0.5 / self._zoom
        return (self.x - hw, self.y - hh, self.x + hw, self.y + hh)

    def set_zoom(self, zoom: float) -> None:
        """Set the zoom factor, clamped to the supported range."""
        self._zoom = min(max(zoom, MIN_ZOOM), MAX_ZOOM)

    def world_to_screen(
        self,
        world_x: float,
        world_y: float,
        screen_width: float,
        screen_height: float,
    ) -> tuple[float, float]:
        """Convert a world point to screen pixels."""
        scale = self._zoom
        screen_x = (world_x - self.x) * scale + screen_width * 0.5
        screen_y = (world_y - self.y) * scale + screen_height * 0.5
        return (screen_x, screen_y)

    def screen_to_world(
        self,
        screen_x: float,
        screen_y: float,
        screen_width: float,
        screen_height: float,
    ) -> tuple[float, float]:
        """Convert a screen pixel position to a world point."""
        inv_scale = 1.0 / self._zoom
        world_x = (screen_x - screen_width * 0.5) * inv_scale + self.x
        world_y = (screen_y - screen_height * 0.5) * inv_scale + self.y
        return (world_x, world_y)