"""Window dimensions shared by the renderer and the camera."""

WIN_WIDTH: int = 1024
WIN_HEIGHT: int = 840