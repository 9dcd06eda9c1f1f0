"""Box and sphere collision volumes attached to game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, Optional

from .math3d import Vec3


class ColliderType(Enum):
    """Shape of a collision volume."""

    BOX = auto()
    SPHERE = auto()


class Collider(ABC):
    """A collision volume positioned relative to its owning game object."""

    type: ColliderType

    def __init__(self, center: Vec3, size: Vec3) -> None:
        self.center = center.copy()
        self.size = size.copy()
        self.game_object: Optional[Any] = None

    def world_center(self) -> Vec3:
        """Centre of the volume in world space."""
        if self.game_object is None:
            raise RuntimeError("collider is not attached to a game object")
        return self.game_object.world_position() + self.center

    @abstractmethod
    def is_hit(self, target: Collider) -> bool:
        """Whether this volume touches ``target``."""


class BoxCollider(Collider):
    """An axis-aligned box; ``size`` holds width, height and depth."""

    type = ColliderType.BOX

    def __init__(self, center: Vec3, size: Vec3) -> None:
        super().__init__(center, size)

    def is_hit(self, target: Collider) -> bool:
        if target.type is ColliderType.BOX:
            return hit_box_vs_box(target, self)
        return hit_box_vs_sphere(self, target)


class SphereCollider(Collider):
    """A sphere; every component of ``size`` holds the radius."""

    type = ColliderType.SPHERE

    def __init__(self, center: Vec3, radius: float) -> None:
        super().__init__(center, Vec3(radius, radius, radius))

    @property
    def radius(self) -> float:
        return self.size.x

    def is_hit(self, target: Collider) -> bool:
        if target.type is ColliderType.BOX:
            return hit_box_vs_sphere(target, self)
        return hit_sphere_vs_sphere(target, self)


def hit_box_vs_box(box_a: Collider, box_b: Collider) -> bool:
    """Strict overlap test of two boxes using half extents."""
    pos_a = box_a.world_center()
    pos_b = box_b.world_center()
    return all(
        pa + sa / 2 > pb - sb / 2 and pa - sa / 2 < pb + sb / 2
        for pa, sa, pb, sb in zip(pos_a, box_a.size, pos_b, box_b.size)
    )


def hit_box_vs_sphere(box: Collider, sphere: Collider) -> bool:
    """Box against sphere, widening the full box extent by the radius on each axis."""
    circle = sphere.world_center()
    box_pos = box.world_center()
    radius = sphere.size.x
    return all(
        bp - bs - radius < cp < bp + bs + radius
        for cp, bp, bs in zip(circle, box_pos, box.size)
    )


def hit_sphere_vs_sphere(sphere_a: Collider, sphere_b: Collider) -> bool:
    """Spheres touch when their centres are no further apart than the summed radii."""
    distance = (sphere_a.world_center() - sphere_b.world_center()).length()
    return distance <= sphere_a.size.x + sphere_b.size.x