import pygame

from egor.text import TextBuilder, TextEntry, TextRenderer
from egor.vertex import Color


def _has_non_black(surface, rect):
    return any(
        tuple(surface.get_at((x, y)))[:3] != (0, 0, 0)
        for y in range(rect.top, rect.bottom)
        for x in range(rect.left, rect.right)
    )


def test_builder_defaults_and_draw():
    renderer = TextRenderer(100, 50)
    TextBuilder(renderer, "hello").draw()
    assert renderer.entries == [TextEntry("hello", (0.0, 0.0), 16.0, (0, 0, 0, 255))]


def test_builder_settings():
    renderer = TextRenderer(100, 50)
    TextBuilder(renderer, "x").at(3.0, 4.0).size(20.0).color(Color.RED).draw()
    entry = renderer.entries[0]
    assert entry.position == (3.0, 4.0)
    assert entry.size == 20.0
    assert entry.color == (255, 0, 0, 255)


def test_prepare_hands_over_and_clears():
    renderer = TextRenderer(100, 50)
    TextBuilder(renderer, "a").draw()
    TextBuilder(renderer, "b").draw()
    entries = renderer.prepare(100, 50)
    assert [e.text for e in entries] == ["a", "b"]
    assert renderer.entries == []
    assert renderer.prepare(100, 50) == []


def test_resize_records_size():
    renderer = TextRenderer(10, 10)
    renderer.resize(640, 480)
    assert (renderer.width, renderer.height) == (640, 480)


def test_render_draws_text():
    renderer = TextRenderer(80, 40)
    surface = pygame.Surface((80, 40))
    surface.fill((0, 0, 0))
    TextBuilder(renderer, "HI").color(Color.WHITE).size(24.0).draw()
    entries = renderer.prepare(80, 40)
    assert [e.text for e in entries] == ["HI"]
    renderer.render(surface, entries)
    assert _has_non_black(surface, surface.get_rect())


def test_render_clipped_to_bounds():
    renderer = TextRenderer(80, 40)
    surface = pygame.Surface((80, 40))
    surface.fill((0, 0, 0))
    TextBuilder(renderer, "HI").color(Color.WHITE).size(24.0).at(0.0, 0.0).draw()
    renderer.render(surface, renderer.prepare(1, 1))
    assert not _has_non_black(surface, pygame.Rect(1, 0, 79, 40))
    assert surface.get_clip() == surface.get_rect()


def test_render_nothing_leaves_surface():
    renderer = TextRenderer(20, 20)
    surface = pygame.Surface((20, 20))
    surface.fill((0, 0, 0))
    entries = renderer.prepare(20, 20)
    assert entries == []
    renderer.render(surface, entries)
    assert not _has_non_black(surface, surface.get_rect())