"""Loading image files into OpenGL textures."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

from PIL import Image

_GL_RGB = 0x1907
_GL_RGBA = 0x1908

_FORMATS = {"RGB": _GL_RGB, "RGBA": _GL_RGBA}


class TextureError(Exception):
    """Raised when an image cannot be turned into a texture."""


def texture_format(image: Image.Image) -> int:
    """Return the OpenGL pixel format matching the image's mode."""
    try:
        return _FORMATS[image.mode]
    except KeyError:
        raise TextureError("Unsupported image format") from None


def prepare_image(path: str | PathLike[str]) -> tuple[int, int, int, bytes]:
    """Read an image flipped bottom-up as (format, width, height, pixel bytes)."""
    try:
        with Image.open(path) as opened:
            opened.load()
            image = opened
            if image.mode == "P":
                image = image.convert("RGBA" if "transparency" in image.info else "RGB")
            fmt = texture_format(image)
            flipped = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    except OSError as exc:
        raise TextureError(str(exc)) from exc
    return fmt, flipped.width, flipped.height, flipped.tobytes()


@dataclass(frozen=True)
class Texture:
    """A 2D texture living on the GPU."""

    id: int

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Texture:
        """Upload an image file as a mipmapped 2D texture."""
        fmt, width, height, pixels = prepare_image(path)

        from pyglet import gl

        names = (gl.GLuint * 1)()
        gl.glGenTextures(1, names)
        texture_id = names[0]
        gl.glBindTexture(gl.GL_TEXTURE_2D, texture_id)
        data = (gl.GLubyte * len(pixels)).from_buffer_copy(pixels)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, fmt, width, height, 0, fmt, gl.GL_UNSIGNED_BYTE, data
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        return cls(texture_id)