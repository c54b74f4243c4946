# MIT License (see LICENSE)
"""
Caller-side helpers for the control panel.

The core trusts whatever values it is given: a zero mass divides by zero,
a huge dt explodes the integrator. These helpers are the clamping layer a
UI should go through when turning slider and button input into writes on
the simulation.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext

from .constants import CHARGE_RANGE, FRICTION_RANGE, MASS_RANGE, MAX_FRAME_DT
from .simulation import Simulation
from .types import Particle
from .util import clamp

logger = logging.getLogger(__name__)

# Ground button: charge decays by this factor per tick until below threshold.
DISCHARGE_FACTOR = 0.8
DISCHARGE_THRESHOLD = 0.1


def clamp_dt(dt: float, max_dt: float = MAX_FRAME_DT) -> float:
    """Frame delta for step(): never negative, never above max_dt."""
    return clamp(dt, 0.0, max_dt)


def _locked(sim: Simulation | None):
    return nullcontext() if sim is None else sim.lock


def set_mass(particle: Particle, value: float, sim: Simulation | None = None) -> float:
    """
    Assign mass clamped to MASS_RANGE; returns the value stored.

    Pass the owning `sim` to make the write atomic with respect to step()
    when a UI thread and a frame thread share the simulation.
    """
    with _locked(sim):
        particle.mass = clamp(float(value), *MASS_RANGE)
        return particle.mass


def set_charge(particle: Particle, value: float, sim: Simulation | None = None) -> float:
    """Assign charge clamped to CHARGE_RANGE, under `sim.lock` if given."""
    with _locked(sim):
        particle.charge = clamp(float(value), *CHARGE_RANGE)
        return particle.charge


def set_friction(sim: Simulation, value: float) -> float:
    """Assign global friction clamped to FRICTION_RANGE; returns the value stored."""
    with sim.lock:
        sim.friction = clamp(float(value), *FRICTION_RANGE)
    return sim.friction


def discharge_step(
    particle: Particle,
    factor: float = DISCHARGE_FACTOR,
    threshold: float = DISCHARGE_THRESHOLD,
) -> bool:
    """
    One tick of grounding a particle.

    Returns:
        True once the charge has been snapped to exactly zero.
    """
    if abs(particle.charge) < threshold:
        particle.charge = 0.0
        return True
    particle.charge *= factor
    return False


def discharge(
    particle: Particle,
    factor: float = DISCHARGE_FACTOR,
    threshold: float = DISCHARGE_THRESHOLD,
) -> int:
    """
    Ground a particle completely.

    Args:
        particle: Particle to neutralize.
        factor: Per-tick decay, in (0, 1).
        threshold: Charge magnitude below which it snaps to zero.

    Returns:
        Number of ticks taken, including the final snap.

    Raises:
        ValueError: If factor is not in (0, 1) or threshold is not positive.
    """
    if not 0.0 < factor < 1.0:
        raise ValueError(f"Discharge factor must be in (0, 1), got {factor}")
    if threshold <= 0.0:
        raise ValueError(f"Discharge threshold must be positive, got {threshold}")
    ticks = 1
    while not discharge_step(particle, factor, threshold):
        ticks += 1
    logger.debug("Discharged %s in %d ticks", particle.id, ticks)
    return ticks
