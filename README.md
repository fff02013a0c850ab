# egor

A dead simple 2D graphics engine built on pygame. You describe each frame with
small builders for triangles, rectangles and text; egor collects the geometry
in batches by texture and draws it into a window, with a camera, a frame timer
and keyboard and mouse state.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## A first program

```python
from egor.app import App
from egor.vertex import Color

def init(ctx):
    ctx.set_title("Hello egor")

def update(timer, graphics, input):
    graphics.clear(Color.BLACK)
    x, y = input.mouse_position()
    width, height = graphics.screen_size()
    graphics.rect().at(x - width / 2, y - height / 2).size(32, 32).color(Color.WHITE).draw()
    graphics.text(f"FPS: {timer.fps}").at(10, 10).draw()

App(init).run(update)
```

`App(init, width=800, height=600, max_fps=60)` opens a resizable window when
`run(update)` is called. `init` runs once and receives an `InitContext`, which
can set the window title (`set_title`) and load encoded images such as PNG as
textures (`load_texture`, which returns the texture's index). `update` is
called once per frame with the `FrameTimer` (`delta` in seconds, `fps`), the
`Graphics` handle and the `Input` state. The loop ends when the window is
closed.

`App.handle_event(event)` and `App.step()` expose one pygame event and one
frame respectively, for driving the app from your own loop.

## Drawing

Builders submit nothing until `draw()` is called on them.

- `graphics.tri()` returns a `TriangleBuilder`; `graphics.rect()` returns a
  `RectangleBuilder`. Chain `anchor` (`Anchor.CENTER` or `Anchor.TOP_LEFT`
  from `egor.primitives`), `at`, `size`, `color` and `rotation`, then call
  `draw()`. Triangles default to 64 units and red, rectangles to 64×64 and
  white. Triangles record a rotation but are drawn unrotated.
- Rectangles take `texture(index)` and `uv(coords)` (four corner coordinates)
  to draw sprites or parts of a sprite sheet. A texture index with no loaded
  texture draws with a plain white texture. `SpriteAnim(rows, cols, total,
  dur)` in `egor.animation` steps through the frames of a sheet with
  `update(dt)`, `uv()` and `frame_uv(f)`.
- Positions are world coordinates seen through `graphics.camera()`, a
  `Camera` centred on the origin: `target(x, y)` follows a point,
  `set_zoom(zoom)` is clamped to 0.1–10, and `world_to_screen`,
  `screen_to_world` and `viewport` convert between the two spaces.
- `graphics.text("...")` returns a `TextBuilder` with `at`, `size` (default
  16) and `color` (default black), placed in screen pixels and drawn with
  pygame's default font.
- `graphics.clear(color)` sets the background colour; `graphics.screen_size()`
  gives the window size.
- `graphics.update_texture(index, data)` and
  `graphics.update_texture_raw(index, w, h, data)` replace a loaded texture
  with an encoded image or raw RGBA bytes; an index that was never loaded
  raises `IndexError`.

Colours are `egor.vertex.Color(r, g, b, a=1.0)` with components from 0 to 1,
with `BLACK`, `WHITE`, `RED`, `GREEN`, `BLUE` and `TRANSPARENT` ready-made.

## Input

`Input` tracks keys and mouse buttons across frames. In a running `App`, keys
are pygame key codes (`pygame.K_a`, …) and buttons are pygame button numbers
(1 is the left button). `key_pressed` is true only on the frame a key goes
down, `key_held` while it stays down and `key_released` on the frame it comes
up. The `keys_*` forms are true if any of the given keys matches; the
`all_keys_*` forms require every one. The mouse has `mouse_pressed`,
`mouse_held`, `mouse_released`, `mouse_position` and `mouse_delta`.

## Demos

A field of drifting squares that wrap around the window:

```
egor-particles --count 2000 --speed 100 --seed 1
```

All options are optional; the defaults are 9999 particles at 100 units per
second with a random seed.

`egor.shooter` holds a small top-down shooter: `ShooterGame` moves with
WASD or the arrow keys and fires with the left mouse button, and its `update`
method can be passed straight to `App.run`.

## What egor does not do

- Rendering is done in software on a pygame surface. Untextured, single-colour
  shapes are filled directly, but textured or blended shapes are drawn pixel by
  pixel, so large textured scenes are slow.
- The shooter has no command of its own and no sprite images come with the
  package: to play it, load a soldier sheet as texture 0 and a zombie sheet as
  texture 1 in your `init` function, then run `ShooterGame().update`.
- No font files are shipped; text always uses pygame's default font.