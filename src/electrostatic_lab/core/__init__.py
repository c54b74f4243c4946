# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force generators: clamped pairwise Coulomb force.
    - Boundary resolution: wall containment with inelastic bounce.
    - Field sampling: electric field grids and force-vs-distance curves.
    - Invariants: kinetic/potential energy and momentum.

Typical usage:
    from electrostatic_lab.core import apply_coulomb_pairwise, resolve_bounds

    apply_coulomb_pairwise(sim.particles)
    resolve_bounds(particle, width=800, height=600)
"""
from .forces import apply_coulomb_pairwise, coulomb_force, coulomb_magnitude
from .bounds import resolve_bounds
from .field import electric_field, field_at, field_grid, force_curve
from .invariants import kinetic_energy, linear_momentum, pair_potential, potential_energy

__all__ = [
    # Forces
    "apply_coulomb_pairwise",
    "coulomb_force",
    "coulomb_magnitude",
    # Bounds
    "resolve_bounds",
    # Field
    "electric_field",
    "field_at",
    "field_grid",
    "force_curve",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "pair_potential",
    "potential_energy",
]
