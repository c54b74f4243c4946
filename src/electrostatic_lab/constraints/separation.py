# MIT License (see LICENSE)
"""
Direct-manipulation distance constraint between two particles.

Unlike an impulse-based joint, this constraint is satisfied in one shot by
projecting positions: both particles are moved symmetrically about their
midpoint along their current axis until they are exactly the requested
distance apart, and their motion is stopped so the jump injects no kinetic
energy.

Boundary containment is not applied here; Simulation.set_separation()
resolves bounds afterwards.
"""
from __future__ import annotations

from ..types import Particle, Vector2

# Axis used when the two particles coincide and have no direction.
DEFAULT_AXIS = Vector2(1.0, 0.0)


def separation_axis(a: Particle, b: Particle) -> Vector2:
    """Unit vector from a to b, or DEFAULT_AXIS when they coincide."""
    axis = (b.position - a.position).normalize()
    if axis.magnitude() == 0.0:
        return DEFAULT_AXIS
    return axis


def enforce_separation(a: Particle, b: Particle, distance: float) -> None:
    """
    Place a and b exactly `distance` apart about their midpoint.

    Args:
        a: First particle; ends at centre - axis·distance/2.
        b: Second particle; ends at centre + axis·distance/2.
        distance: Requested centre-to-centre separation.

    Note:
        Locked particles are moved too: the slider is a direct edit, not
        a force.
    """
    centre = (a.position + b.position) * 0.5
    offset = separation_axis(a, b) * (distance / 2.0)

    a.position = centre - offset
    b.position = centre + offset
    a.stop()
    b.stop()
