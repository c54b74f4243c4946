# MIT License (see LICENSE)
"""
Electric field and force-curve sampling for display layers.

The field helpers are vectorized with numpy: a whole grid of sample points
is evaluated per particle in one pass. They use a unit field constant,
    E(p) = Σ q_i · (p - x_i) / |p - x_i|³
because the display only needs directions and relative strength. Points
inside 0.8·radius of a particle skip that particle's contribution to avoid
the singularity at its centre.

The force curve is the scalar force law evaluated across the separation
slider range, for plotting |F| against r.
"""
from __future__ import annotations

import numpy as np

from ..constants import K_COULOMB, MAX_DISTANCE, MIN_DISTANCE
from ..types import Particle, Vector2
from ..util import f64

# Particle contributions are skipped inside this fraction of the radius.
CORE_FRACTION = 0.8

# Below this magnitude a sample has no meaningful direction.
FIELD_EPS = 1e-7


def electric_field(particles: list[Particle], points) -> np.ndarray:
    """
    Superposed field at each sample point.

    Args:
        particles: Field sources.
        points: Array-like of shape (N, 2).

    Returns:
        Field vectors, shape (N, 2).
    """
    pts = f64(points).reshape(-1, 2)
    E = np.zeros_like(pts)
    for p in particles:
        if p.charge == 0.0:
            continue
        d = pts - p.position.to_array()
        d2 = np.einsum("ij,ij->i", d, d)
        dist = np.sqrt(d2)
        outside = dist >= CORE_FRACTION * p.radius
        # Masked points get a dummy denominator; their coefficient is zeroed.
        denom = np.where(outside, d2 * dist, 1.0)
        coeff = np.where(outside, p.charge / denom, 0.0)
        E += coeff[:, None] * d
    return E


def field_at(particles: list[Particle], point: Vector2) -> Vector2:
    """Field at a single point."""
    E = electric_field(particles, [[point.x, point.y]])
    return Vector2(E[0, 0], E[0, 1])


def field_grid(
    particles: list[Particle],
    width: float,
    height: float,
    spacing: float,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Sample the field on a regular grid covering [0, width] × [0, height].

    Grid points run x-major (all y samples for x=0 first), with both edges
    included when they fall on the spacing.

    Args:
        particles: Field sources.
        width: Canvas width.
        height: Canvas height.
        spacing: Distance between neighbouring samples (> 0).

    Returns:
        (points, directions, magnitudes): points (N, 2), unit directions
        (N, 2) with zero rows where |E| <= FIELD_EPS, magnitudes (N,).

    Raises:
        ValueError: If spacing is not positive.
    """
    if spacing <= 0:
        raise ValueError(f"Grid spacing must be positive, got {spacing}")

    nx = int(np.floor(width / spacing)) + 1
    ny = int(np.floor(height / spacing)) + 1
    xs = np.arange(nx, dtype=np.float64) * spacing
    ys = np.arange(ny, dtype=np.float64) * spacing
    gx, gy = np.meshgrid(xs, ys, indexing="ij")
    points = np.stack([gx.ravel(), gy.ravel()], axis=1)

    E = electric_field(particles, points)
    mags = np.linalg.norm(E, axis=1)
    significant = mags > FIELD_EPS
    safe = np.where(significant, mags, 1.0)
    directions = np.where(significant[:, None], E / safe[:, None], 0.0)
    return points, directions, mags


def force_curve(
    q1: float,
    q2: float,
    num: int = 100,
    k: float = K_COULOMB,
    min_distance: float = MIN_DISTANCE,
    max_distance: float = MAX_DISTANCE,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Force magnitude against separation over [min_distance, max_distance].

    Args:
        q1: First charge.
        q2: Second charge.
        num: Number of samples (>= 2).
        k: Force constant.
        min_distance: Start of the curve; also the force-law floor.
        max_distance: End of the curve.

    Returns:
        (distances, forces), both shape (num,). Forces are all zero when
        the charge product is zero.

    Raises:
        ValueError: If num < 2.
    """
    if num < 2:
        raise ValueError(f"Need at least 2 samples, got {num}")
    distances = np.linspace(min_distance, max_distance, num)
    clamped = np.maximum(distances, min_distance)
    forces = k * abs(q1 * q2) / (clamped * clamped)
    return distances, forces
