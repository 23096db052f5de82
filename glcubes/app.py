"""The windowed demo: two textured cubes and a fly-through camera."""

from __future__ import annotations

import argparse
import enum
import logging
import math
import time
from collections.abc import Sequence

from .camera import Camera
from .constants import WIN_HEIGHT, WIN_WIDTH
from .cube import Cube
from .shaderprogram import Shader
from .texture import Texture

log = logging.getLogger(__name__)

CLOSE = "close"
TITLE = "Welcome to openGL with Rust!"
NEAR = 0.1
FAR = 100.0
CLEAR_COLOR = (1.0, 0.5, 0.0, 1.0)


class PolygonMode(enum.IntEnum):
    """How polygons are rasterised."""

    LINE = 0x1B01
    FILL = 0x1B02


_KEY_ACTIONS: dict[str, str | PolygonMode] = {
    "ESCAPE": CLOSE,
    "_1": PolygonMode.LINE,
    "_2": PolygonMode.FILL,
}

_MOVEMENT_KEYS = ("W", "S", "A", "D", "SPACE", "LCTRL", "Q", "E")


def projection_matrix(fov: float, width: int, height: int) -> tuple[float, ...]:
    """Right-handed perspective matrix as 16 column-major floats.

    ``fov`` is in degrees; the aspect ratio is the whole-number quotient of
    width by height.
    """
    aspect = width // height
    if aspect <= 0:
        raise ValueError(f"aspect ratio of {width}x{height} rounds down to zero")
    f = 1.0 / math.tan(math.radians(fov) / 2.0)
    r = FAR / (NEAR - FAR)
    return (
        f / aspect, 0.0, 0.0, 0.0,
        0.0, f, 0.0, 0.0,
        0.0, 0.0, r, -1.0,
        0.0, 0.0, r * NEAR, 0.0,
    )


def key_action(symbol: str) -> str | PolygonMode | None:
    """What a key press does: CLOSE, a polygon mode, or None."""
    return _KEY_ACTIONS.get(symbol)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render two textured cubes.")
    parser.add_argument("--vertex", default="./src/shaders/default.vert")
    parser.add_argument("--fragment", default="./src/shaders/default.frag")
    parser.add_argument("--texture", default="./resources/texture/512_512.png")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the render loop until it is closed."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s %(name)s:%(lineno)d %(message)s",
    )

    import pyglet
    from pyglet import gl
    from pyglet.window import key

    config = gl.Config(double_buffer=True, depth_size=24)
    window = pyglet.window.Window(WIN_WIDTH, WIN_HEIGHT, caption=TITLE, config=config)
    log.info("Window created")
    window.set_exclusive_mouse(True)

    gl.glEnable(gl.GL_DEPTH_TEST)
    max_attributes = (gl.GLint * 1)()
    gl.glGetIntegerv(gl.GL_MAX_VERTEX_ATTRIBS, max_attributes)
    log.info("Maximum nr of vertex attributes supported: %d", max_attributes[0])
    gl.glViewport(0, 0, WIN_WIDTH, WIN_HEIGHT)

    shader = Shader.from_files(args.vertex, args.fragment)
    texture = Texture.load(args.texture)
    shader.use()
    shader.set_int("texture1", 0)

    camera = Camera()
    cubes = [Cube((-1.0, -1.0, -3.0)), Cube((1.0, 1.0, -3.0))]

    keys = key.KeyStateHandler()
    window.push_handlers(keys)
    cursor = [camera.last_x, camera.last_y]

    @window.event
    def on_key_press(symbol, modifiers):
        action = key_action(key.symbol_string(symbol))
        if action == CLOSE:
            window.has_exit = True
        elif isinstance(action, PolygonMode):
            gl.glPolygonMode(gl.GL_FRONT_AND_BACK, int(action))
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        cursor[0] += dx
        cursor[1] -= dy

    @window.event
    def on_mouse_scroll(x, y, scroll_x, scroll_y):
        print("I am scrolling")

    @window.event
    def on_resize(width, height):
        fb_width, fb_height = window.get_framebuffer_size()
        gl.glViewport(0, 0, fb_width, fb_height)
        return pyglet.event.EVENT_HANDLED

    start = time.perf_counter()
    last_frame = 0.0
    try:
        while not window.has_exit:
            current_frame = time.perf_counter() - start
            delta_time = current_frame - last_frame
            last_frame = current_frame
            print(f"pos: {camera.position}, front: {camera.front}, u: {camera.up}")

            view = camera.view_matrix()
            projection = projection_matrix(camera.fov, WIN_WIDTH, WIN_HEIGHT)

            window.dispatch_events()
            if window.has_exit:
                break

            camera.on_mouse_move(cursor[0], cursor[1])
            pressed = {
                name for name in _MOVEMENT_KEYS
                if keys[getattr(key, name)]
            }
            camera.process_input(pressed, delta_time)

            gl.glClearColor(*CLEAR_COLOR)
            gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
            shader.use()
            gl.glActiveTexture(gl.GL_TEXTURE0)
            gl.glBindTexture(gl.GL_TEXTURE_2D, texture.id)
            shader.set_mat4("view", view)
            shader.set_mat4("projection", projection)
            for cube in cubes:
                cube.draw(shader)

            window.flip()
    finally:
        for cube in cubes:
            cube.destroy()
        window.close()
    return 0