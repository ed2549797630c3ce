# MIT License (see LICENSE)
"""
Diagnostic quantities for a collection of sources.

Used for checking simulation behaviour. With damping < 1 total energy is
expected to decay; with two mirror-image bodies and no fixed sources the
linear momentum stays zero.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..types import ChargeSource, RingSampling, DEFAULT_SAMPLING
from .evaluator import potential


def kinetic_energy(sources: Sequence[ChargeSource]) -> float:
    """
    Total kinetic energy of the moving sources.

    T = Σ ½ m v²  (fixed sources are skipped)
    """
    ke = 0.0
    for s in sources:
        if s.is_fixed:
            continue
        ke += 0.5 * s.mass * float(np.dot(s.velocity, s.velocity))
    return ke


def linear_momentum(sources: Sequence[ChargeSource]) -> np.ndarray:
    """
    Total linear momentum of the moving sources.

    P = Σ m v  (fixed sources are skipped)

    Returns:
        Momentum vector [Px, Py, Pz].
    """
    p = np.zeros(3, dtype=np.float64)
    for s in sources:
        if s.is_fixed:
            continue
        p += s.mass * s.velocity
    return p


def potential_energy(
    sources: Sequence[ChargeSource],
    k: float,
    sampling: RingSampling = DEFAULT_SAMPLING,
) -> float:
    """
    Electrostatic interaction energy of the collection.

    U = ½ Σᵢ qᵢ V_others(xᵢ)

    Each source is treated as concentrated at its centre, the same
    simplification net_force makes for points and spheres. Self-energy is
    excluded.
    """
    u = 0.0
    for s in sources:
        others = [o for o in sources if o.id != s.id]
        u += s.q * potential(s.position, others, k, sampling)
    return 0.5 * u
