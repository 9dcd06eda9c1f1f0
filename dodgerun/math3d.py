"""Small vector and transform types used by the scene graph."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Vec3:
    """A mutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def copy(self) -> Vec3:
        """An independent copy of this vector."""
        return Vec3(self.x, self.y, self.z)


def _unit_scale() -> Vec3:
    return Vec3(1.0, 1.0, 1.0)


@dataclass
class Transform:
    """Position, rotation (degrees) and scale of an object, with an optional parent."""

    position: Vec3 = field(default_factory=Vec3)
    rotate: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=_unit_scale)
    parent: Optional[Transform] = field(default=None, repr=False, compare=False)

    def copy(self) -> Transform:
        """A copy whose vectors are independent of this transform's."""
        return Transform(
            self.position.copy(),
            self.rotate.copy(),
            self.scale.copy(),
            parent=self.parent,
        )