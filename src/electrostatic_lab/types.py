# MIT License (see LICENSE)
"""
Core type definitions for the electrostatics simulation.

Defines the fundamental data structures:
- Vector2: immutable 2D value used for positions, velocities and forces.
- Particle: a charged point body with mass, kinematic state and a trail.

Particles follow Newtonian mechanics integrated with semi-implicit Euler:
  v ← v·decay + a·dt
  x ← x + v·dt
where a = ΣF/m is accumulated by apply_force() during the force phase.
"""
from __future__ import annotations
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from .constants import (
    BASE_RADIUS,
    FRICTION_TIME_SCALE,
    MAX_TRAIL_LENGTH,
    RADIUS_MASS_SCALE,
    TRAIL_UPDATE_FREQ,
)


# =============================================================================
# Vector2
# =============================================================================

@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2D vector.

    All arithmetic returns new instances; nothing mutates in place, so a
    Vector2 stored in a trail or shared between particles is safe.

    Attributes:
        x: Horizontal component in scene units.
        y: Vertical component in scene units.
    """
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        """Store components as plain floats."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, v: Vector2 | Iterable[float]) -> Vector2:
        """
        Build a Vector2 from another Vector2 or any length-2 sequence.

        Raises:
            ValueError: If the sequence does not have exactly two items.
        """
        if isinstance(v, Vector2):
            return v
        x, y = v
        return cls(x, y)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction, or the zero vector if |v| == 0."""
        mag = self.magnitude()
        if mag == 0.0:
            return Vector2.zero()
        return Vector2(self.x / mag, self.y / mag)

    def distance_to(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> np.ndarray:
        """Return the vector as a float64 array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)


def friction_decay(friction: float, dt: float) -> float:
    """
    Velocity decay factor for one step: max(0, 1 - μ·dt·60).

    The coefficient μ is expressed per 1/60 s, so the same value damps
    equally per second whatever dt the caller uses. The factor never goes
    negative, which would reverse the motion on a long step.
    """
    return max(0.0, 1.0 - friction * dt * FRICTION_TIME_SCALE)


# =============================================================================
# Particle
# =============================================================================

_VECTOR_FIELDS = frozenset({"position", "velocity", "acceleration"})


@dataclass(eq=False)
class Particle:
    """
    A charged point body on the 2D plane.

    Attributes:
        id: Stable identifier assigned by the owning Simulation.
        position: Centre position in scene units.
        mass: Mass (> 0). Not validated; see controls.set_mass().
        charge: Signed charge, typically in [-10, 10].
        velocity: Velocity in scene units per second.
        acceleration: Acceleration accumulated for the current step.
        locked: Pinned in place; ignores force and never moves.
        trail: Past positions, oldest first, at most MAX_TRAIL_LENGTH.

    Note:
        Positions, velocities and trail points are immutable Vector2 values.
        Assign new values rather than mutating components; assigned tuples
        are converted to Vector2.
    """
    id: str
    position: Vector2 | tuple[float, float] = (0.0, 0.0)
    mass: float = 1.0
    charge: float = 0.0
    velocity: Vector2 | tuple[float, float] = (0.0, 0.0)
    acceleration: Vector2 | tuple[float, float] = (0.0, 0.0)
    locked: bool = False
    trail: deque = field(default_factory=lambda: deque(maxlen=MAX_TRAIL_LENGTH))

    # Integration steps since the last trail sample
    _trail_timer: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        """Bound the trail and store its points as Vector2."""
        self.trail = deque((Vector2.of(p) for p in self.trail), maxlen=MAX_TRAIL_LENGTH)

    def __setattr__(self, name: str, value) -> None:
        # Vector fields accept any length-2 sequence, at construction and on
        # later external writes (e.g. drag-repositioning).
        if name in _VECTOR_FIELDS:
            value = Vector2.of(value)
        super().__setattr__(name, value)

    @property
    def radius(self) -> float:
        """Display/collision radius, 20 + 2·sqrt(mass)."""
        return BASE_RADIUS + math.sqrt(self.mass) * RADIUS_MASS_SCALE

    def apply_force(self, force: Vector2) -> None:
        """
        Accumulate force / mass into the acceleration.

        May be called any number of times before integrate(). Locked
        particles ignore all force.
        """
        if self.locked:
            return
        self.acceleration = self.acceleration + force * (1.0 / self.mass)

    def integrate(self, dt: float, friction: float) -> None:
        """
        Advance the particle by dt seconds with semi-implicit Euler.

        Order: friction decay on velocity, velocity += a·dt,
        position += v·dt, clear acceleration, then sample the trail every
        TRAIL_UPDATE_FREQ calls.

        Args:
            dt: Timestep in seconds, already capped by the caller.
            friction: Global friction coefficient.
        """
        if self.locked:
            self.velocity = Vector2.zero()
            self.acceleration = Vector2.zero()
            return

        self.velocity = self.velocity * friction_decay(friction, dt)
        self.velocity = self.velocity + self.acceleration * dt
        self.position = self.position + self.velocity * dt
        self.acceleration = Vector2.zero()

        self._trail_timer += 1
        if self._trail_timer >= TRAIL_UPDATE_FREQ:
            # deque(maxlen) drops the oldest point on overflow
            self.trail.append(self.position)
            self._trail_timer = 0

    def reset(self, x: float, y: float) -> None:
        """Move to (x, y) at rest with an empty trail."""
        self.position = Vector2(x, y)
        self.velocity = Vector2.zero()
        self.acceleration = Vector2.zero()
        self.trail.clear()
        self._trail_timer = 0

    def stop(self) -> None:
        """Zero velocity and acceleration without moving."""
        self.velocity = Vector2.zero()
        self.acceleration = Vector2.zero()

    def to_dict(self) -> dict:
        """Plain-data view of the particle for display layers."""
        return {
            "id": self.id,
            "position": [self.position.x, self.position.y],
            "velocity": [self.velocity.x, self.velocity.y],
            "acceleration": [self.acceleration.x, self.acceleration.y],
            "mass": self.mass,
            "charge": self.charge,
            "radius": self.radius,
            "locked": self.locked,
            "trail": [[p.x, p.y] for p in self.trail],
        }
