"""The windowed application loop: events, input, timing and drawing."""

from __future__ import annotations

from collections.abc import Callable

import pygame

from .graphics import Graphics
from .input import ElementState, Input
from .renderer import Renderer
from .timer import FrameTimer

UpdateFn = Callable[[FrameTimer, Graphics, Input], None]


class InitContext:
    """What the init function may do before the first frame."""

    def __init__(self, renderer: Renderer) -> None:
        self._renderer = renderer

    def set_title(self, title: str) -> None:
        """Set the window title."""
        pygame.display.set_caption(title)

    def load_texture(self, data: bytes) -> int:
        """Decode an image and register it as a texture; return its index."""
        return self._renderer.add_texture(data)


class App:
    """Opens a window, runs ``init`` once, then calls the update function every frame."""

    def __init__(
        self,
        init: Callable[[InitContext], object],
        width: int = 800,
        height: int = 600,
        max_fps: int = 60,
    ) -> None:
        self._init: Callable[[InitContext], object] | None = init
        self.width = width
        self.height = height
        self.max_fps = max_fps
        self.on_update: UpdateFn | None = None
        self.timer = FrameTimer()
        self.renderer: Renderer | None = None
        self.surface: pygame.Surface | None = None
        self.input = Input()
        self.running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one window event to the app state."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            if self.renderer is not None and event.w > 0 and event.h > 0:
                self.renderer.resize(event.w, event.h)
                if pygame.display.get_init() and pygame.display.get_surface() is not None:
                    self.surface = pygame.display.get_surface()
        elif event.type == pygame.KEYDOWN:
            self.input.keyboard(event.key, ElementState.PRESSED)
        elif event.type == pygame.KEYUP:
            self.input.keyboard(event.key, ElementState.RELEASED)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.input.mouse(event.button, ElementState.PRESSED)
        elif event.type == pygame.MOUSEBUTTONUP:
            self.input.mouse(event.button, ElementState.RELEASED)
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.input.cursor(x, y)

    def step(self) -> None:
        """Run one frame: tick the timer, update, render, and roll input state."""
        self.timer.update()
        if self.renderer is not None:
            if self.on_update is not None:
                self.on_update(self.timer, Graphics(self.renderer), self.input)
            if self.surface is not None:
                self.renderer.render_frame(self.surface)
        self.input.end_frame()

    def _start(self) -> None:
        pygame.display.init()
        pygame.font.init()
        self.surface = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        width, height = self.surface.get_size()
        renderer = Renderer(width, height)
        init, self._init = self._init, None
        if init is not None:
            init(InitContext(renderer))
        self.renderer = renderer

    def run(self, update: UpdateFn) -> None:
        """Open the window and run the frame loop until it is closed."""
        self.on_update = update
        self._start()
        clock = pygame.time.Clock()
        self.running = True
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.step()
                pygame.display.flip()
                clock.tick(self.max_fps)
        finally:
            self.surface = None
            pygame.quit()