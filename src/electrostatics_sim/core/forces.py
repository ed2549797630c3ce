# MIT License (see LICENSE)
"""
Net electrostatic force on a source due to all other sources.

The force on a body is F = ∫ E_ext dq over its charge, where E_ext is the
field of every *other* source. The target is always removed from the source
list first: a body exerts no net force on itself, and its own field is
singular at its centre.

Approximation policy by target geometry:
- Point and both sphere types: the body responds to the external field at
  its centre, F = q · E_ext(center). Exact for a uniform external field,
  an approximation otherwise (a sphere's own charge distribution is not
  integrated over).
- Ring: the ring is split into N samples of charge q/N (sampling.force) and
  F = Σ (q/N) · E_ext(sampleᵢ), which captures field variation across the
  ring's extent.
"""
from __future__ import annotations
from typing import Iterable

from ..types import ChargeSource, Geometry, VectorResult, RingSampling, DEFAULT_SAMPLING
from ..util import zero3
from .laws import ring_points
from .evaluator import electric_field


def net_force(
    target: ChargeSource,
    sources: Iterable[ChargeSource],
    k: float,
    sampling: RingSampling = DEFAULT_SAMPLING,
) -> VectorResult:
    """
    Compute the net force on target from every other source.

    Args:
        target: The body the force acts on.
        sources: Collection that may (and usually does) include target; any
                 entry with target's id is excluded.
        k: Field constant.
        sampling: Ring sample counts. sampling.force discretizes a Ring
                  target; sampling.field is used for Ring sources.

    Returns:
        VectorResult with the force vector and its magnitude. Exactly the
        zero vector when there are no other sources.
    """
    others = [s for s in sources if s.id != target.id]
    if not others:
        return VectorResult(zero3(), 0.0)

    g = target.geometry
    if g is Geometry.RING:
        n = sampling.force
        dq = target.q / n
        force = zero3()
        for sample in ring_points(target.position, target.radius, n):
            force += dq * electric_field(sample, others, k, sampling).vector
        return VectorResult.of(force)

    if g in (Geometry.POINT, Geometry.CONDUCTING_SPHERE, Geometry.NON_CONDUCTING_SPHERE):
        e = electric_field(target.position, others, k, sampling).vector
        return VectorResult.of(target.q * e)

    raise TypeError(f"Unknown geometry: {g!r}")
