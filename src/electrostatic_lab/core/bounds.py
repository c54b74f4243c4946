# MIT License (see LICENSE)
"""
Wall containment for particles inside the rectangular canvas.

Each axis is handled independently: a particle past a wall is moved back so
its whole disc is visible, and the velocity component pointing into the
wall is reversed and scaled by the wall restitution. A component already
pointing away from the wall is left alone, so a particle resting against a
wall is not kicked back out every frame.
"""
from __future__ import annotations

from ..constants import WALL_RESTITUTION
from ..types import Particle, Vector2


def _resolve_axis(
    pos: float,
    vel: float,
    radius: float,
    bound: float,
    restitution: float,
) -> tuple[float, float]:
    """Clamp one coordinate into [radius, bound - radius] and reflect inward velocity."""
    if pos < radius:
        pos = radius
        if vel < 0.0:
            vel *= -restitution
    elif pos > bound - radius:
        pos = bound - radius
        if vel > 0.0:
            vel *= -restitution
    return pos, vel


def resolve_bounds(
    particle: Particle,
    width: float,
    height: float,
    restitution: float = WALL_RESTITUTION,
) -> None:
    """
    Keep a particle inside [radius, width - radius] × [radius, height - radius].

    This is a positional correction plus an inelastic velocity flip, not an
    exact collision. It must run after integration every step.

    Args:
        particle: Particle to contain (modified in-place).
        width: Canvas width in scene units.
        height: Canvas height in scene units.
        restitution: Fraction of the normal velocity kept on contact.
    """
    r = particle.radius
    x, vx = _resolve_axis(particle.position.x, particle.velocity.x, r, width, restitution)
    y, vy = _resolve_axis(particle.position.y, particle.velocity.y, r, height, restitution)

    particle.position = Vector2(x, y)
    particle.velocity = Vector2(vx, vy)
