"""Building OpenGL shader programs and setting their uniforms."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike
from typing import Any


class ShaderError(Exception):
    """Raised when shader sources cannot be read, compiled or linked."""


def read_shader_sources(
    vertex_path: str | PathLike[str], fragment_path: str | PathLike[str]
) -> tuple[str, str]:
    """Read the vertex and fragment shader sources."""
    try:
        with open(vertex_path, encoding="utf-8") as handle:
            vertex = handle.read()
    except OSError as exc:
        raise ShaderError(f"Error reading vertex shader file {vertex_path}: {exc}") from exc
    try:
        with open(fragment_path, encoding="utf-8") as handle:
            fragment = handle.read()
    except OSError as exc:
        raise ShaderError(f"Error reading fragment shader file {fragment_path}: {exc}") from exc
    return vertex, fragment


def _check_name(name: str) -> bytes:
    if "\0" in name:
        raise ValueError(f"uniform name contains a NUL character: {name!r}")
    return name.encode("utf-8")


@dataclass(frozen=True)
class Shader:
    """A linked shader program."""

    id: int
    _program: Any = field(default=None, repr=False, compare=False)

    @classmethod
    def from_files(
        cls, vertex_path: str | PathLike[str], fragment_path: str | PathLike[str]
    ) -> Shader:
        """Compile and link a program from vertex and fragment shader files."""
        vertex_source, fragment_source = read_shader_sources(vertex_path, fragment_path)

        from pyglet.graphics import shader as pyglet_shader

        compiled = []
        for source, kind, label in (
            (vertex_source, "vertex", "VERTEX"),
            (fragment_source, "fragment", "FRAGMENT"),
        ):
            try:
                compiled.append(pyglet_shader.Shader(source, kind))
            except pyglet_shader.ShaderException as exc:
                raise ShaderError(
                    f"SHADER_COMPILATION_ERROR of type: {label}\n{exc}"
                ) from exc

        try:
            program = pyglet_shader.ShaderProgram(*compiled)
        except pyglet_shader.ShaderException as exc:
            raise ShaderError(f"PROGRAM_LINKING_ERROR of type: PROGRAM\n{exc}") from exc
        return cls(program.id, program)

    def use(self) -> None:
        """Make this program the current one."""
        from pyglet import gl

        gl.glUseProgram(self.id)

    def uniform_location(self, name: str) -> int:
        """Location of a uniform, or -1 if the program has none by that name."""
        encoded = _check_name(name) + b"\0"

        from pyglet import gl

        buffer = (gl.GLchar * len(encoded)).from_buffer_copy(encoded)
        return gl.glGetUniformLocation(self.id, buffer)

    def set_float(self, name: str, value: float) -> None:
        """Set a float uniform."""
        location = self.uniform_location(name)

        from pyglet import gl

        gl.glUniform1f(location, float(value))

    def set_int(self, name: str, value: int) -> None:
        """Set an integer uniform."""
        location = self.uniform_location(name)

        from pyglet import gl

        gl.glUniform1i(location, int(value))

    def set_mat4(self, name: str, value: Sequence[float]) -> None:
        """Set a 4x4 matrix uniform from 16 column-major floats."""
        values = [float(v) for v in value]
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        location = self.uniform_location(name)

        from pyglet import gl

        data = (gl.GLfloat * 16)(*values)
        gl.glUniformMatrix4fv(location, 1, gl.GL_FALSE, data)