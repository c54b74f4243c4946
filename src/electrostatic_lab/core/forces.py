# MIT License (see LICENSE)
"""
Electrostatic force generators.

The force law is the visual Coulomb model
    |F| = K · |q1 q2| / max(r, r_min)²
directed along the line between the two particles: attractive for opposite
charges, repulsive for like charges, exactly zero when either charge is zero.

Forces are accumulated through Particle.apply_force() during the force phase
of Simulation.step(); integration happens afterwards.

Key concepts:
- The separation floor r_min caps the force as particles approach contact.
- Newton's third law holds exactly: the force on B is the negation of the
  force on A, not a separately computed value.
- apply_coulomb_pairwise is O(N²) over unordered pairs.
"""
from __future__ import annotations

from ..constants import K_COULOMB, MIN_DISTANCE
from ..types import Particle, Vector2


def coulomb_magnitude(
    q1: float,
    q2: float,
    distance: float,
    k: float = K_COULOMB,
    min_distance: float = MIN_DISTANCE,
) -> float:
    """
    Scalar force magnitude K·|q1 q2| / max(distance, min_distance)².

    Shared by the pairwise force and the display readouts so both report
    the same clamped value.
    """
    d = max(distance, min_distance)
    return k * abs(q1 * q2) / (d * d)


def coulomb_force(
    a: Particle,
    b: Particle,
    k: float = K_COULOMB,
    min_distance: float = MIN_DISTANCE,
) -> Vector2:
    """
    Force exerted on a by b.

    Args:
        a: Particle receiving the returned force.
        b: Source particle.
        k: Force constant.
        min_distance: Separation floor for the inverse-square law.

    Returns:
        Force on a. The force on b is the exact negation.
    """
    r = b.position - a.position
    q_product = a.charge * b.charge
    if q_product == 0.0:
        return Vector2.zero()

    direction = r.normalize()
    magnitude = coulomb_magnitude(a.charge, b.charge, r.magnitude(), k, min_distance)

    if q_product < 0.0:
        # Opposite signs: a is pulled toward b
        return direction * magnitude
    return direction * -magnitude


def apply_coulomb_pairwise(
    particles: list[Particle],
    k: float = K_COULOMB,
    min_distance: float = MIN_DISTANCE,
) -> None:
    """
    Apply Coulomb forces between every unordered pair of particles.

    Pairs are visited in list order (i < j). Locked particles still exert
    force on their partners; they simply ignore the force applied to them.

    Args:
        particles: Particles to interact, in creation order.
        k: Force constant.
        min_distance: Separation floor for the inverse-square law.
    """
    n = len(particles)
    for i in range(n):
        pa = particles[i]
        for j in range(i + 1, n):
            pb = particles[j]
            f = coulomb_force(pa, pb, k, min_distance)

            # Newton's third law
            pa.apply_force(f)
            pb.apply_force(-f)
