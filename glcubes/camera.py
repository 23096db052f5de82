"""A free-flying first-person camera driven by keys and mouse movement."""

from __future__ import annotations

import math
from collections.abc import Collection
from dataclasses import dataclass, field

from .constants import WIN_HEIGHT, WIN_WIDTH

Vector = tuple[float, float, float]

MIN_FOV = 1.0
MAX_FOV = 65.0
MIN_PITCH = -89.0
MAX_PITCH = 89.0
_SPEED = 10.0
_SENSITIVITY = 0.1


def _add(a: Vector, b: Vector) -> Vector:
    return tuple(x + y for x, y in zip(a, b))  # type: ignore[return-value]


def _scale(v: Vector, factor: float) -> Vector:
    return tuple(x * factor for x in v)  # type: ignore[return-value]


def _dot(a: Vector, b: Vector) -> float:
    return sum(x * y for x, y in zip(a, b))


def _cross(a: Vector, b: Vector) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vector) -> Vector:
    length = math.sqrt(_dot(v, v))
    return _scale(v, 1.0 / length)


@dataclass
class Camera:
    """Camera state: placement, orientation, mouse tracking and field of view."""

    position: Vector = (0.0, 0.0, 3.0)
    front: Vector = (0.0, 0.0, -1.0)
    up: Vector = (0.0, 1.0, 0.0)
    first_mouse: bool = False
    yaw: float = 90.0
    pitch: float = 0.0
    last_x: float = field(default=WIN_WIDTH / 2)
    last_y: float = field(default=WIN_HEIGHT / 2)
    fov: float = 45.0

    def zoom(self, yoffset: float) -> None:
        """Widen the field of view by a scroll offset, without limits."""
        self.fov += yoffset

    def process_input(self, keys: Collection[str], delta_time: float) -> None:
        """Move the camera for the pressed keys.

        ``keys`` holds key names: W, S, A, D, SPACE, LCTRL move the camera;
        Q and E widen and narrow the field of view.
        """
        pressed = {key.upper() for key in keys}
        speed = _SPEED * delta_time
        right = _normalize(_cross(self.front, self.up))
        moves = {
            "W": self.front,
            "S": _scale(self.front, -1.0),
            "A": _scale(right, -1.0),
            "D": right,
            "SPACE": self.up,
            "LCTRL": _scale(self.up, -1.0),
        }
        for key, direction in moves.items():
            if key in pressed:
                self.position = _add(self.position, _scale(direction, speed))
        if "Q" in pressed:
            self.fov = min(self.fov + 1.0, MAX_FOV)
        if "E" in pressed:
            self.fov = max(self.fov - 1.0, MIN_FOV)

    def on_mouse_move(self, xpos: float, ypos: float) -> None:
        """Turn the camera by the cursor's movement since the last call."""
        if self.first_mouse:
            self.last_x = xpos
            self.last_y = ypos
            self.first_mouse = False

        xoffset = (xpos - self.last_x) * _SENSITIVITY
        yoffset = (self.last_y - ypos) * _SENSITIVITY
        self.last_x = xpos
        self.last_y = ypos

        self.yaw += xoffset
        self.pitch = min(max(self.pitch + yoffset, MIN_PITCH), MAX_PITCH)

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.front = _normalize(
            (math.cos(yaw) * math.cos(pitch), math.sin(pitch), math.sin(yaw) * math.cos(pitch))
        )

    def view_matrix(self) -> tuple[float, ...]:
        """Right-handed look-at matrix as 16 floats in column-major order."""
        eye = self.position
        f = _normalize(self.front)
        s = _normalize(_cross(f, self.up))
        u = _cross(s, f)
        return (
            s[0], u[0], -f[0], 0.0,
            s[1], u[1], -f[1], 0.0,
            s[2], u[2], -f[2], 0.0,
            -_dot(s, eye), -_dot(u, eye), _dot(f, eye), 1.0,
        )