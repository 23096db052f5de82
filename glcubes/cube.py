"""A textured unit cube placed somewhere in the world."""

from __future__ import annotations

from dataclasses import dataclass, field

from .shaderprogram import Shader

Vector = tuple[float, float, float]

FLOATS_PER_VERTEX = 5
VERTEX_COUNT = 36
_FLOAT_SIZE = 4
_HALF = 0.5

# Corners of one face as (in-plane signs, texture coordinates), keyed by the
# axis the face is perpendicular to. In-plane axes are the other two, in order.
_QUADS = {
    2: (((-1, -1), (0.0, 0.0)), ((1, -1), (1.0, 0.0)), ((1, 1), (1.0, 1.0)), ((-1, 1), (0.0, 1.0))),
    0: (((1, 1), (1.0, 0.0)), ((1, -1), (1.0, 1.0)), ((-1, -1), (0.0, 1.0)), ((-1, 1), (0.0, 0.0))),
    1: (((-1, -1), (0.0, 1.0)), ((1, -1), (1.0, 1.0)), ((1, 1), (1.0, 0.0)), ((-1, 1), (0.0, 0.0))),
}
# Back, front, left, right, bottom, top.
_FACES = ((2, -1), (2, 1), (0, -1), (0, 1), (1, -1), (1, 1))
# Two triangles per quad.
_TRIANGLE_ORDER = (0, 1, 2, 2, 3, 0)


def _build_vertices() -> tuple[float, ...]:
    data: list[float] = []
    for axis, side in _FACES:
        others = [a for a in range(3) if a != axis]
        corners = _QUADS[axis]
        for corner in _TRIANGLE_ORDER:
            signs, tex = corners[corner]
            position = [0.0, 0.0, 0.0]
            position[axis] = side * _HALF
            for other, sign in zip(others, signs):
                position[other] = sign * _HALF
            data.extend(position)
            data.extend(tex)
    return tuple(data)


# Per vertex: x, y, z position followed by u, v texture coordinates.
VERTICES: tuple[float, ...] = _build_vertices()

# (attribute index, component count, offset in floats): position, colour, texture.
_ATTRIBUTES = ((0, 3, 0), (1, 3, 3), (2, 2, 3))


def model_matrix(position: Vector) -> tuple[float, ...]:
    """Translation matrix to ``position`` as 16 floats in column-major order."""
    x, y, z = position
    return (
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        float(x), float(y), float(z), 1.0,
    )


@dataclass
class Cube:
    """A cube whose vertex buffers are uploaded to the GPU on first draw."""

    position: Vector = (0.0, 0.0, 0.0)
    vertices: tuple[float, ...] = field(default=VERTICES, init=False, repr=False)
    vao: int = field(default=0, init=False)
    vbo: int = field(default=0, init=False)

    def _upload(self) -> None:
        from pyglet import gl

        vao = (gl.GLuint * 1)()
        vbo = (gl.GLuint * 1)()
        gl.glGenVertexArrays(1, vao)
        gl.glGenBuffers(1, vbo)
        gl.glBindVertexArray(vao[0])
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo[0])

        data = (gl.GLfloat * len(self.vertices))(*self.vertices)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, len(self.vertices) * _FLOAT_SIZE, data, gl.GL_STATIC_DRAW
        )

        stride = FLOATS_PER_VERTEX * _FLOAT_SIZE
        for index, size, offset in _ATTRIBUTES:
            gl.glEnableVertexAttribArray(index)
            gl.glVertexAttribPointer(
                index, size, gl.GL_FLOAT, gl.GL_FALSE, stride, offset * _FLOAT_SIZE
            )
        self.vao = vao[0]
        self.vbo = vbo[0]

    def draw(self, shader: Shader) -> None:
        """Draw the cube at its position with the given shader's model uniform."""
        if not self.vao:
            self._upload()

        from pyglet import gl

        shader.set_mat4("model", model_matrix(self.position))
        gl.glBindVertexArray(self.vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, VERTEX_COUNT)
        gl.glBindVertexArray(0)

    def destroy(self) -> None:
        """Release the cube's GPU buffers, if any were created."""
        if not self.vao and not self.vbo:
            return

        from pyglet import gl

        gl.glDeleteVertexArrays(1, (gl.GLuint * 1)(self.vao))
        gl.glDeleteBuffers(1, (gl.GLuint * 1)(self.vbo))
        self.vao = 0
        self.vbo = 0