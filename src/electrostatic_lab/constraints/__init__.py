# MIT License (see LICENSE)
"""
Constraints applied by direct manipulation.

This subpackage provides:
    - enforce_separation: Places two particles at an exact distance.
    - separation_axis: The axis used for that placement.

Typical usage:
    from electrostatic_lab.constraints import enforce_separation

    enforce_separation(sim.particles[0], sim.particles[1], 200.0)
"""
from .separation import enforce_separation, separation_axis

__all__ = [
    "enforce_separation",
    "separation_axis",
]
