"""Camera holding eye and focus points and the matrices derived from them."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .math3d import Vec3

Matrix = tuple[tuple[float, float, float, float], ...]

IDENTITY: Matrix = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

_UP = Vec3(0.0, 1.0, 0.0)


def _dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.y * b.z - a.z * b.y, a.z * b.x - a.x * b.z, a.x * b.y - a.y * b.x)


def _normalize(v: Vec3) -> Vec3:
    length = v.length()
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return Vec3(v.x / length, v.y / length, v.z / length)


def _look_at_lh(eye: Vec3, at: Vec3, up: Vec3) -> Matrix:
    z_axis = _normalize(at - eye)
    x_axis = _normalize(_cross(up, z_axis))
    y_axis = _cross(z_axis, x_axis)
    return (
        (x_axis.x, y_axis.x, z_axis.x, 0.0),
        (x_axis.y, y_axis.y, z_axis.y, 0.0),
        (x_axis.z, y_axis.z, z_axis.z, 0.0),
        (-_dot(x_axis, eye), -_dot(y_axis, eye), -_dot(z_axis, eye), 1.0),
    )


def _perspective_fov_lh(fov_y: float, aspect: float, near: float, far: float) -> Matrix:
    h = 1.0 / math.tan(fov_y / 2.0)
    w = h / aspect
    depth = far / (far - near)
    return (
        (w, 0.0, 0.0, 0.0),
        (0.0, h, 0.0, 0.0),
        (0.0, 0.0, depth, 1.0),
        (0.0, 0.0, -near * depth, 0.0),
    )


def _transpose(m: Matrix) -> Matrix:
    return tuple(tuple(row[i] for row in m) for i in range(4))  # type: ignore[return-value]


class Camera:
    """Left-handed perspective camera; call :meth:`update` after moving it."""

    FOV_Y = math.pi / 4
    NEAR = 0.1
    FAR = 1000.0

    def __init__(self, screen_width: int = 800, screen_height: int = 600) -> None:
        if screen_width <= 0 or screen_height <= 0:
            raise ValueError("screen size must be positive")
        self._position = Vec3(0.0, 3.0, -10.0)
        self._target = Vec3(0.0, 0.0, 0.0)
        self._projection = _perspective_fov_lh(
            self.FOV_Y, screen_width / screen_height, self.NEAR, self.FAR
        )
        self._view: Matrix = IDENTITY
        self._billboard: Matrix = IDENTITY

    @property
    def position(self) -> Vec3:
        return self._position.copy()

    @property
    def target(self) -> Vec3:
        return self._target.copy()

    @property
    def view_matrix(self) -> Matrix:
        return self._view

    @property
    def projection_matrix(self) -> Matrix:
        return self._projection

    @property
    def billboard_matrix(self) -> Matrix:
        """Rotation that turns a quad to face the camera."""
        return self._billboard

    def set_position(self, position: Iterable[float]) -> None:
        self._position = Vec3(*position)

    def set_target(self, target: Iterable[float]) -> None:
        self._target = Vec3(*target)

    def update(self) -> None:
        """Rebuild the view and billboard matrices from position and target."""
        self._view = _look_at_lh(self._position, self._target, _UP)
        facing = _look_at_lh(Vec3(), self._target - self._position, _UP)
        # a pure rotation: its inverse is its transpose
        self._billboard = _transpose(facing)