# MIT License (see LICENSE)
"""
electrostatics_sim - A 3D electrostatic field and charged-body dynamics engine.

This package evaluates the superposed electric field and potential of a
heterogeneous set of charged bodies (point charges, conducting shells,
uniformly charged spheres and charged rings), resolves the net force on each
body, and advances the bodies in time with a damped semi-implicit Euler step.

Main entry points:
    - ChargeSource, ProbePoint, Geometry: The data model.
    - electric_field, potential, net_force, step: The pure engine functions.
    - snap: Grid snapping for placement points.
    - Scene: Host-side container (placement, probes, frame loop).
    - SimulationConfig: Simulation parameters.

Submodules:
    - core: Field laws, evaluator, forces, integrator, invariants.
    - io: JSON serialization/deserialization.

Example:
    from electrostatics_sim import Scene, Geometry

    scene = Scene.with_dipole()
    probe = scene.place_probe((0, 1, 0))
    print(scene.observe(probe.id).field_magnitude)
    scene.step(1 / 60)
"""
from .config import SimulationConfig
from .core import electric_field, potential, field_contributions, net_force, step
from .errors import ElectrostaticsError, ConfigurationError, PreconditionError
from .grid import snap
from .scene import Scene, Observation, make_source
from .types import ChargeSource, ProbePoint, Geometry, VectorResult, RingSampling

__all__ = [
    # Data model
    "ChargeSource",
    "ProbePoint",
    "Geometry",
    "VectorResult",
    "RingSampling",
    # Engine
    "electric_field",
    "potential",
    "field_contributions",
    "net_force",
    "step",
    "snap",
    # Simulation
    "Scene",
    "Observation",
    "SimulationConfig",
    "make_source",
    # Errors
    "ElectrostaticsError",
    "ConfigurationError",
    "PreconditionError",
]
