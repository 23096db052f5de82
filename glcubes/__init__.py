"""Textured cubes in OpenGL with a first-person fly camera."""

__version__ = "0.1.0"
__all__ = ["app", "camera", "constants", "cube", "shaderprogram", "texture"]