# MIT License (see LICENSE)
"""Grid snapping for placement points."""
from __future__ import annotations

import numpy as np

from .errors import PreconditionError
from .util import vec3


def snap(point, step: float) -> np.ndarray:
    """
    Round each coordinate independently to the nearest multiple of step.

    Args:
        point: Point [x, y, z] to quantize.
        step: Grid spacing. Must be > 0.

    Returns:
        A new float64 array; the input is not modified.

    Raises:
        PreconditionError: If step <= 0 (or NaN).
    """
    if not step > 0:
        raise PreconditionError(f"Grid step must be positive, got {step}")
    p = vec3(point)
    # Ties round towards +inf.
    return np.floor(p / step + 0.5) * step
