# MIT License (see LICENSE)
"""
Physical and display-scale constants used throughout the simulation.

The model works in scene units (screen pixels) and seconds. Forces are not
SI: the Coulomb constant below is a visual scale factor chosen so that
charges of a few units produce visible motion at pixel distances.
"""
from __future__ import annotations

# Visual analogue of Coulomb's constant, F = K * |q1 q2| / r².
K_COULOMB: float = 20000.0

# Separation floor used by the force law to avoid the r → 0 singularity.
MIN_DISTANCE: float = 60.0

# Upper end of the separation slider and of the force-vs-distance curve.
MAX_DISTANCE: float = 500.0

# Trail: at most MAX_TRAIL_LENGTH points, one sample every TRAIL_UPDATE_FREQ
# integration steps.
MAX_TRAIL_LENGTH: int = 50
TRAIL_UPDATE_FREQ: int = 5

# Friction is expressed per 1/60 s; the decay factor is 1 - μ·dt·60.
FRICTION_TIME_SCALE: float = 60.0
DEFAULT_FRICTION: float = 0.01

# Fraction of the normal velocity kept (and reversed) on a wall hit.
WALL_RESTITUTION: float = 0.5

# Particle radius = BASE_RADIUS + sqrt(mass) * RADIUS_MASS_SCALE.
BASE_RADIUS: float = 20.0
RADIUS_MASS_SCALE: float = 2.0

# Default canvas bounds before the first layout.
DEFAULT_WIDTH: float = 800.0
DEFAULT_HEIGHT: float = 600.0

# Ranges exposed by the controls. The core does not enforce them.
MASS_RANGE: tuple[float, float] = (0.1, 5.0)
CHARGE_RANGE: tuple[float, float] = (-10.0, 10.0)
FRICTION_RANGE: tuple[float, float] = (0.0, 0.1)

# Largest frame delta a driver should pass to Simulation.step().
MAX_FRAME_DT: float = 0.05
