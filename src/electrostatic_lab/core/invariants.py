# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying simulation correctness. With zero friction and no wall
contact, total momentum is conserved exactly by the pairwise force (third
law), and kinetic + potential energy stays constant up to integration error.
"""
from __future__ import annotations
import numpy as np

from ..constants import K_COULOMB, MIN_DISTANCE
from ..types import Particle


def kinetic_energy(particles: list[Particle]) -> float:
    """
    Total kinetic energy T = Σ 0.5·m·v².

    Locked particles are at rest and contribute nothing.
    """
    ke = 0.0
    for p in particles:
        v = p.velocity
        ke += 0.5 * p.mass * (v.x * v.x + v.y * v.y)
    return ke


def linear_momentum(particles: list[Particle]) -> np.ndarray:
    """
    Total linear momentum P = Σ m·v.

    Returns:
        Momentum vector [Px, Py].
    """
    total = np.zeros(2, dtype=np.float64)
    for p in particles:
        total += p.mass * p.velocity.to_array()
    return total


def pair_potential(
    q1: float,
    q2: float,
    distance: float,
    k: float = K_COULOMB,
    min_distance: float = MIN_DISTANCE,
) -> float:
    """
    Potential energy of one pair under the clamped force law.

    For r >= r_min this is k·q1·q2 / r. Below r_min the force is constant,
    so the potential continues linearly:
        U(r) = k·q1·q2 / r_min + k·q1·q2 / r_min² · (r_min - r)
    keeping -dU/dr equal to the force actually applied.
    """
    kq = k * q1 * q2
    if distance >= min_distance:
        return kq / distance
    return kq / min_distance + kq / (min_distance * min_distance) * (min_distance - distance)


def potential_energy(
    particles: list[Particle],
    k: float = K_COULOMB,
    min_distance: float = MIN_DISTANCE,
) -> float:
    """Sum of pair potentials over every unordered pair."""
    u = 0.0
    n = len(particles)
    for i in range(n):
        a = particles[i]
        for j in range(i + 1, n):
            b = particles[j]
            u += pair_potential(a.charge, b.charge, a.position.distance_to(b.position), k, min_distance)
    return u
