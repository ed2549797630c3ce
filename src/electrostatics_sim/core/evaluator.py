# MIT License (see LICENSE)
"""
Superposed field and potential at a query point.

Field and potential are linear in the sources, so the total at a point is
the plain sum of each source's contribution (see laws.py). No source is
excluded here; self-exclusion only matters for forces (see forces.py).

Cost is O(number of sources), with a Ring costing O(ring samples).
"""
from __future__ import annotations
from typing import Iterable, Sequence

import numpy as np

from ..types import ChargeSource, VectorResult, RingSampling, DEFAULT_SAMPLING
from ..util import vec3, zero3
from .laws import source_field, source_potential


def electric_field(
    point,
    sources: Iterable[ChargeSource],
    k: float,
    sampling: RingSampling = DEFAULT_SAMPLING,
) -> VectorResult:
    """
    Total electric field at a point.

    Args:
        point: Query point [x, y, z].
        sources: Every source contributing to the field.
        k: Field constant.
        sampling: Ring sample counts (sampling.field is used).

    Returns:
        VectorResult with the summed field vector and its magnitude.
    """
    p = vec3(point)
    total = zero3()
    for s in sources:
        total += source_field(p, s, k, sampling.field)
    return VectorResult.of(total)


def potential(
    point,
    sources: Iterable[ChargeSource],
    k: float,
    sampling: RingSampling = DEFAULT_SAMPLING,
) -> float:
    """
    Total electric potential at a point.

    Args:
        point: Query point [x, y, z].
        sources: Every source contributing to the potential.
        k: Field constant.
        sampling: Ring sample counts (sampling.potential is used).
    """
    p = vec3(point)
    return float(sum(source_potential(p, s, k, sampling.potential) for s in sources))


def field_contributions(
    point,
    sources: Sequence[ChargeSource],
    k: float,
    sampling: RingSampling = DEFAULT_SAMPLING,
) -> list[tuple[str, VectorResult]]:
    """
    Field contribution of each source individually, in input order.

    Summing the vectors gives electric_field(point, sources, k).

    Returns:
        List of (source id, VectorResult) pairs.
    """
    p = vec3(point)
    out = []
    for s in sources:
        e: np.ndarray = source_field(p, s, k, sampling.field)
        out.append((s.id, VectorResult.of(e)))
    return out
