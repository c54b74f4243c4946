# MIT License (see LICENSE)
"""
Small numeric helpers shared by the simulation and the control layer.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used by the vectorized field helpers so that tuple/list inputs are
    accepted wherever an array of points is expected.
    """
    return np.array(x, dtype=np.float64)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))
