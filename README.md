# glcubes

A small OpenGL scene: two textured cubes and a camera you can fly around with
the keyboard and the mouse.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
glcubes
```

This opens a 1024×840 window with the mouse captured, and draws two cubes at
(-1, -1, -3) and (1, 1, -3) on an orange background. Every frame it prints the
camera's position, look direction and up vector to standard output.

The shader and texture files are read from these paths by default, relative to
the current directory; each can be changed with an option:

| Option       | Default                            |
|--------------|------------------------------------|
| `--vertex`   | `./src/shaders/default.vert`       |
| `--fragment` | `./src/shaders/default.frag`       |
| `--texture`  | `./resources/texture/512_512.png`  |

The vertex shader is expected to take a position at attribute 0 and texture
coordinates at attribute 2, and to use the uniforms `model`, `view` and
`projection`; the fragment shader samples the `texture1` uniform.

### Controls

| Input            | Effect                             |
|------------------|------------------------------------|
| Mouse            | Look around (pitch kept in ±89°)   |
| W / S            | Move forward / backward            |
| A / D            | Strafe left / right                |
| Space            | Move up                            |
| Left Ctrl        | Move down                          |
| Q / E            | Widen / narrow field of view       |
| 1                | Wireframe rendering                |
| 2                | Filled rendering                   |
| Escape           | Quit                               |

The field of view starts at 45° and stays between 1° and 65° when you change it
with Q and E. Scrolling the mouse wheel only prints `I am scrolling`.

## Using the pieces

The modules can also be used on their own:

- `glcubes.camera.Camera`: a dataclass holding position, look direction, up
  vector, yaw, pitch and field of view, with `process_input(keys, delta_time)`
  (key names such as `"W"`, `"SPACE"`, `"LCTRL"`), `on_mouse_move(xpos, ypos)`,
  `zoom(yoffset)` (adds to the field of view with no limits) and
  `view_matrix()`, a look-at matrix as 16 column-major floats.
- `glcubes.shaderprogram`: `read_shader_sources(vertex_path, fragment_path)`
  reads both sources; `Shader.from_files(vertex_path, fragment_path)` compiles
  and links a program. Both raise `ShaderError` when a file cannot be read, and
  `from_files` also when compiling or linking fails. A `Shader` has `use()`,
  `uniform_location(name)`, `set_int`, `set_float` and `set_mat4` (16
  column-major floats).
- `glcubes.texture`: `prepare_image(path)` reads an image flipped bottom-up and
  returns its OpenGL format, width, height and pixel bytes; palette images are
  converted to RGB or RGBA. `texture_format(image)` maps an RGB or RGBA image to
  its OpenGL format. `Texture.load(path)` uploads a mipmapped 2D texture. They
  raise `TextureError` for unreadable files and other pixel formats.
- `glcubes.cube`: `Cube(position)` is a unit cube whose buffers are uploaded on
  its first `draw(shader)` and released with `destroy()`. `model_matrix(position)`
  is the translation it uses, and `VERTICES` holds its 36 vertices as position
  and texture coordinates.
- `glcubes.app`: `projection_matrix(fov, width, height)` is the perspective
  matrix the scene uses (the aspect ratio is the whole-number quotient of width
  by height; a `ValueError` is raised if that is zero), `key_action(symbol)`
  maps a key name to `CLOSE` or a `PolygonMode`, and `main(argv=None)` runs
  the window.

Functions that touch OpenGL need a current OpenGL context, such as the one the
`glcubes` window creates.

## What it does not do

The package ships no shader or texture files; the `glcubes` command needs them
to exist at the paths given above. It draws only the fixed two-cube scene and
has no lighting and no way to load other models.