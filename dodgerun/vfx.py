"""Particle emitters and the particles they give off."""

from __future__ import annotations

import copy
import math
import random
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .math3d import Vec3

Color = tuple[float, float, float, float]
Pair = tuple[float, float]


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _up() -> Vec3:
    return Vec3(0.0, 1.0, 0.0)


@dataclass
class EmitterData:
    """Settings of an emitter; angles are in degrees."""

    texture_file_name: str = "defaultParticle.png"
    position: Vec3 = field(default_factory=Vec3)
    position_rnd: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=_up)
    direction_rnd: Vec3 = field(default_factory=Vec3)
    speed: float = 0.1
    speed_rnd: float = 0.0
    accel: float = 1.0
    gravity: float = 0.0
    color: Color = (1.0, 1.0, 1.0, 1.0)
    delta_color: Color = (0.0, 0.0, 0.0, 0.0)
    rotate: Vec3 = field(default_factory=Vec3)
    rotate_rnd: Vec3 = field(default_factory=Vec3)
    spin: Vec3 = field(default_factory=Vec3)
    size: Pair = (1.0, 1.0)
    size_rnd: Pair = (0.0, 0.0)
    scale: Pair = (1.0, 1.0)
    life_time: int = 30
    delay: int = 10
    number: int = 1
    is_billboard: bool = True


@dataclass
class Emitter:
    """A running emitter; it lingers after ending until its particles are gone."""

    data: EmitterData
    handle: int = -1
    frame_count: int = 0
    is_dead: bool = False
    particle_num: int = 0


@dataclass
class DynamicData:
    """The changing state of a particle, or its change per frame."""

    position: Vec3
    rotation: Vec3
    scale: Pair
    color: Color


@dataclass
class Particle:
    """One particle: its state, per-frame change and remaining life in frames."""

    now: DynamicData
    delta: DynamicData
    life: int
    accel: float
    gravity: float
    emitter: Emitter = field(repr=False)


def _rotate_xyz(v: Vec3, ax: float, ay: float, az: float) -> Vec3:
    """Rotate about X, then Y, then Z by the given angles in degrees."""
    x, y, z = v
    c, s = math.cos(math.radians(ax)), math.sin(math.radians(ax))
    y, z = y * c - z * s, y * s + z * c
    c, s = math.cos(math.radians(ay)), math.sin(math.radians(ay))
    x, z = x * c + z * s, -x * s + z * c
    c, s = math.cos(math.radians(az)), math.sin(math.radians(az))
    x, y = x * c - y * s, x * s + y * c
    return Vec3(x, y, z)


def _scaled_unit(v: Vec3, length: float) -> Vec3:
    norm = v.length()
    if norm == 0.0:
        return Vec3()
    factor = length / norm
    return Vec3(v.x * factor, v.y * factor, v.z * factor)


class ParticleSystem:
    """All emitters and live particles; advance it once per frame with :meth:`update`."""

    def __init__(self, rng: Optional[_RandomSource] = None) -> None:
        self._rng: _RandomSource = rng if rng is not None else random.Random()
        self._emitters: list[Emitter] = []
        self._particles: list[Particle] = []

    @property
    def emitters(self) -> tuple[Emitter, ...]:
        return tuple(self._emitters)

    @property
    def particles(self) -> tuple[Particle, ...]:
        return tuple(self._particles)

    def start(self, data: EmitterData) -> int:
        """Start an emitter and return its handle."""
        handle = len(self._emitters)
        self._emitters.append(Emitter(copy.deepcopy(data), handle=handle))
        return handle

    def end(self, handle: int) -> None:
        """Stop the first emitter with ``handle`` from giving off more particles."""
        for emitter in self._emitters:
            if emitter.handle == handle:
                emitter.is_dead = True
                break

    def update(self) -> None:
        """Advance emitters, then particles, by one frame."""
        self._update_emitters()
        self._update_particles()

    def release(self) -> None:
        """Drop every particle and emitter."""
        self._particles.clear()
        self._emitters.clear()

    def _jitter(self, spread: float) -> float:
        if spread == 0:
            return 0.0
        return (self._rng.randrange(int(spread * 201)) - spread * 100) / 100.0

    def _jitter3(self, spread: Vec3) -> Vec3:
        return Vec3(self._jitter(spread.x), self._jitter(spread.y), self._jitter(spread.z))

    def _create_particles(self, emitter: Emitter) -> None:
        d = emitter.data
        for _ in range(d.number):
            position = d.position + self._jitter3(d.position_rnd)
            sx = self._jitter(d.size_rnd[0]) + 1.0
            sy = self._jitter(d.size_rnd[1]) + 1.0
            rotation = d.rotate + self._jitter3(d.rotate_rnd)
            turn = self._jitter3(d.direction_rnd)
            direction = _rotate_xyz(d.direction, turn.x, turn.y, turn.z)
            speed_factor = self._jitter(d.speed_rnd) + 1.0
            velocity = _scaled_unit(direction, d.speed * speed_factor)

            particle = Particle(
                now=DynamicData(position, rotation, (d.size[0] * sx, d.size[1] * sy), d.color),
                delta=DynamicData(velocity, d.spin.copy(), d.scale, d.delta_color),
                life=d.life_time,
                accel=d.accel,
                gravity=d.gravity,
                emitter=emitter,
            )
            self._particles.append(particle)
            emitter.particle_num += 1

    def _update_emitters(self) -> None:
        survivors: list[Emitter] = []
        for emitter in self._emitters:
            if emitter.is_dead:
                if emitter.particle_num > 0:
                    survivors.append(emitter)
                continue
            delay = emitter.data.delay
            if delay == 0 or emitter.frame_count % delay == 0:
                self._create_particles(emitter)
            emitter.frame_count += 1
            if delay == 0:
                emitter.is_dead = True
            survivors.append(emitter)
        self._emitters = survivors

    def _update_particles(self) -> None:
        alive: list[Particle] = []
        for p in self._particles:
            if p.life == 0:
                p.emitter.particle_num -= 1
                continue
            p.life -= 1
            now, delta = p.now, p.delta
            now.position = now.position + delta.position
            dp = delta.position
            delta.position = Vec3(dp.x * p.accel, dp.y * p.accel - p.gravity, dp.z * p.accel)
            now.rotation = now.rotation + delta.rotation
            now.scale = (now.scale[0] * delta.scale[0], now.scale[1] * delta.scale[1])
            now.color = tuple(a + b for a, b in zip(now.color, delta.color))  # type: ignore[assignment]
            alive.append(p)
        self._particles = alive