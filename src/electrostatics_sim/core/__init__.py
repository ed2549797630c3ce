# MIT License (see LICENSE)
"""
Core electrostatics engine.

This subpackage provides:
    - Field laws: per-geometry field and potential of a single source.
    - Evaluator: superposed field and potential at a query point.
    - Forces: net force on a source from all the others.
    - Integrators: damped semi-implicit Euler step.
    - Invariants: kinetic/potential energy and momentum diagnostics.

All functions are pure: they take an input snapshot and return fresh
outputs without modifying the sources passed in.

Typical usage:
    from electrostatics_sim.core import electric_field, step

    e = electric_field((0, 1, 0), sources, k=10.0)
    sources = step(sources, dt=1/60, k=10.0)
"""
from .laws import source_field, source_potential, ring_points
from .evaluator import electric_field, potential, field_contributions
from .forces import net_force
from .integrators import step
from .invariants import kinetic_energy, linear_momentum, potential_energy

__all__ = [
    # Laws
    "source_field",
    "source_potential",
    "ring_points",
    # Evaluator
    "electric_field",
    "potential",
    "field_contributions",
    # Forces
    "net_force",
    # Integrators
    "step",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "potential_energy",
]
