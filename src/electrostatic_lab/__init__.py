# MIT License (see LICENSE)
"""
electrostatic_lab - Two-body electrostatics simulation core.

Simulates Coulomb interaction between charged particles on a bounded 2D
canvas: pairwise forces, semi-implicit Euler integration with friction,
wall containment, and a direct-manipulation separation control. Rendering
is left to the caller, which reads particle state after each step.

Main entry points:
    - Simulation: The world, its step loop and manipulation operations.
    - Particle: A charged body with position, velocity and trail.
    - Vector2: Immutable 2D vector.

Submodules:
    - core: Force law, wall containment, field sampling, invariants.
    - constraints: Exact-distance placement of two particles.
    - controls: Clamped setters, grounding, frame dt capping.
    - profiler: Per-phase step timing.

Example:
    from electrostatic_lab import Simulation

    sim = Simulation(width=1000, height=600)
    for _ in range(60):
        sim.step(1 / 60)
    print(sim.separation(), sim.force_magnitude())
"""
from .simulation import Simulation
from .types import Particle, Vector2

__all__ = [
    "Simulation",
    "Particle",
    "Vector2",
]
