# MIT License (see LICENSE)
"""
The simulation world and its per-frame step.

The Simulation class owns the particles and the global parameters
(friction, canvas bounds, force constant). Each call to step(dt):
    1. Applies pairwise Coulomb forces.
    2. Integrates every particle (semi-implicit Euler with friction).
    3. Pushes every particle back inside the canvas.

It also provides the direct-manipulation operations used by the controls:
set_separation() for the distance slider, resize() for container layout
changes, and initialize_default() for the reset button.

Threading:
    All mutating operations hold `lock` (re-entrant) for their whole
    duration. A UI thread that edits several particle fields at once should
    do so inside `with sim.lock:` so the edit is never split by a step.

Structure:
    - User creates a Simulation (two default particles unless populate=False).
    - A frame driver calls sim.step(dt) with a capped dt.
    - Display layers read sim.particles / sim.snapshot().
"""
from __future__ import annotations
import logging
import threading
from contextlib import nullcontext
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_FRICTION,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    K_COULOMB,
    MIN_DISTANCE,
    WALL_RESTITUTION,
)
from .constraints.separation import enforce_separation
from .core.bounds import resolve_bounds
from .core.forces import apply_coulomb_pairwise, coulomb_magnitude
from .profiler import Profiler
from .types import Particle, Vector2
from .util import clamp

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Two-body electrostatics world.

    Attributes:
        width: Canvas width in scene units.
        height: Canvas height in scene units.
        friction: Global friction coefficient, normally in [0, 0.1].
        k_coulomb: Visual force constant.
        min_distance: Separation floor of the force law.
        restitution: Fraction of normal velocity kept on a wall hit.
        populate: Create the default particle pair on construction.
        profiler: Optional Profiler receiving per-phase step timings.
        particles: Particles in creation order.
        time: Simulated seconds accumulated by step().
    """
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    friction: float = DEFAULT_FRICTION
    k_coulomb: float = K_COULOMB
    min_distance: float = MIN_DISTANCE
    restitution: float = WALL_RESTITUTION
    populate: bool = True
    profiler: Profiler | None = None

    # Internal state
    particles: list[Particle] = field(default_factory=list, init=False)
    time: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.lock = threading.RLock()
        self._next_id = 1
        if self.populate:
            self.initialize_default()

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def add_particle(
        self,
        x: float,
        y: float,
        mass: float = 1.0,
        charge: float = 0.0,
        locked: bool = False,
    ) -> Particle:
        """
        Create a particle at (x, y) with a fresh id and append it.

        Ids are never reused within this simulation, including across
        initialize_default() calls.

        Returns:
            The new particle.
        """
        with self.lock:
            p = Particle(
                id=f"obj{self._next_id}",
                position=Vector2(x, y),
                mass=mass,
                charge=charge,
                locked=locked,
            )
            self._next_id += 1
            self.particles.append(p)
            return p

    def initialize_default(self) -> None:
        """
        Reset to the canonical scenario.

        Two particles of mass 1 and charges +5 / -5, placed horizontally and
        symmetrically about the canvas centre. Their separation is 60% of
        the smaller canvas side, clamped to [150, 300]. Friction returns to
        its default.
        """
        with self.lock:
            cx = self.width / 2
            cy = self.height / 2
            separation = clamp(min(self.width, self.height) * 0.6, 150.0, 300.0)
            half = separation / 2

            self.particles = []
            self.add_particle(cx - half, cy, mass=1.0, charge=5.0)
            self.add_particle(cx + half, cy, mass=1.0, charge=-5.0)
            self.friction = DEFAULT_FRICTION
            logger.debug(
                "Initialized default pair in %.0fx%.0f bounds, separation %.1f",
                self.width, self.height, separation,
            )

    def compute_pairwise_forces(self) -> None:
        """Accumulate Coulomb forces for every unordered particle pair."""
        apply_coulomb_pairwise(self.particles, self.k_coulomb, self.min_distance)

    def resolve_bounds(self, particle: Particle) -> None:
        """Clamp a particle inside the canvas and damp its inward velocity."""
        resolve_bounds(particle, self.width, self.height, self.restitution)

    def step(self, dt: float) -> None:
        """
        Advance the simulation by dt seconds.

        dt is used as given. Callers driving from wall-clock time must cap
        it themselves (see controls.clamp_dt) to survive long pauses.
        """
        with self.lock:
            with self._section("forces"):
                self.compute_pairwise_forces()

            with self._section("integrate"):
                for p in self.particles:
                    p.integrate(dt, self.friction)

            with self._section("bounds"):
                for p in self.particles:
                    self.resolve_bounds(p)

            self.time += dt

    def set_separation(self, distance: float) -> None:
        """
        Place the first two particles exactly `distance` apart.

        They keep their midpoint and current axis (horizontal if they
        coincide), are brought to rest, and are then pushed back inside the
        canvas, which may shorten the final separation near a wall.
        Does nothing with fewer than two particles.
        """
        with self.lock:
            if len(self.particles) < 2:
                return
            a, b = self.particles[0], self.particles[1]
            enforce_separation(a, b, distance)
            self.resolve_bounds(a)
            self.resolve_bounds(b)
            logger.debug("Separation set to %.1f", distance)

    def resize(self, width: float, height: float) -> None:
        """
        Change the canvas bounds, keeping content centred.

        Every particle position and trail point is translated by half the
        change in each dimension. Velocities and trails are otherwise kept.
        """
        with self.lock:
            shift = Vector2((width - self.width) / 2, (height - self.height) / 2)
            for p in self.particles:
                p.position = p.position + shift
                moved = [pt + shift for pt in p.trail]
                p.trail.clear()
                p.trail.extend(moved)
            logger.debug(
                "Resized %.0fx%.0f -> %.0fx%.0f",
                self.width, self.height, width, height,
            )
            self.width = width
            self.height = height

    def separation(self) -> float:
        """Distance between the first two particles, or 0 with fewer than two."""
        if len(self.particles) < 2:
            return 0.0
        return self.particles[0].position.distance_to(self.particles[1].position)

    def force_magnitude(self) -> float:
        """Force magnitude between the first two particles at the clamped separation."""
        if len(self.particles) < 2:
            return 0.0
        a, b = self.particles[0], self.particles[1]
        return coulomb_magnitude(a.charge, b.charge, self.separation(), self.k_coulomb, self.min_distance)

    def snapshot(self) -> dict:
        """Plain-data copy of the world state for display layers."""
        with self.lock:
            return {
                "time": self.time,
                "width": self.width,
                "height": self.height,
                "friction": self.friction,
                "particles": [p.to_dict() for p in self.particles],
            }
