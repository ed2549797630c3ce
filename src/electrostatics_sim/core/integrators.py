# MIT License (see LICENSE)
"""
Time stepping for charged sources.

A single scheme is provided: damped semi-implicit (symplectic) Euler.

    a   = F / m
    v'  = (v + a·dt) · damping
    x'  = x + v'·dt

Velocity is updated first and the *updated* velocity moves the position,
which keeps oscillating two-body systems bounded where explicit Euler would
spiral outward. Damping is applied once per step after the accelerating term
and models linear drag.

Forces for every source are computed from the pre-step collection before any
source moves, so the result does not depend on source order.

The integrator does not clamp dt. Callers are expected to bound it (the
Scene clamps to SimulationConfig.max_dt).

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
import logging
from typing import Sequence

from ..constants import DEFAULT_DAMPING
from ..types import ChargeSource, RingSampling, DEFAULT_SAMPLING
from ..util import zero3
from .forces import net_force

logger = logging.getLogger(__name__)


def step(
    sources: Sequence[ChargeSource],
    dt: float,
    k: float,
    damping: float = DEFAULT_DAMPING,
    sampling: RingSampling = DEFAULT_SAMPLING,
) -> list[ChargeSource]:
    """
    Advance every non-fixed source by one timestep.

    Args:
        sources: Current collection (not modified).
        dt: Timestep. Assumed already bounded by the caller.
        k: Field constant.
        damping: Velocity multiplier applied once per step.
        sampling: Ring sample counts passed through to net_force.

    Returns:
        A new list of new ChargeSource objects, same length and order as
        sources. Fixed sources come back as copies with identical position
        and velocity. Deterministic: equal inputs give equal outputs.
    """
    # 1. Simultaneous force evaluation on the pre-step snapshot
    forces = [
        zero3() if s.is_fixed else net_force(s, sources, k, sampling).vector
        for s in sources
    ]

    # 2. Integrate
    out = []
    for s, f in zip(sources, forces):
        if s.is_fixed:
            out.append(s.copy())
            continue
        a = f / s.mass
        v = (s.velocity + a * dt) * damping
        x = s.position + v * dt
        out.append(s.copy(position=x, velocity=v))

    logger.debug("step dt=%g: %d sources (%d fixed)", dt, len(out),
                 sum(1 for s in sources if s.is_fixed))
    return out
