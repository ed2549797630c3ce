# MIT License (see LICENSE)
"""
Simulation parameters.

SimulationConfig gathers every physics parameter the engine functions take
explicitly (k, damping, ring sampling) together with the host-side
parameters the Scene needs (grid step for placement, dt clamp).
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .constants import DEFAULT_K, DEFAULT_DAMPING, DEFAULT_MAX_DT, DEFAULT_GRID_STEP
from .errors import ConfigurationError
from .types import RingSampling


@dataclass(frozen=True)
class SimulationConfig:
    """
    Global simulation parameters.

    Attributes:
        k: Field constant (analogue of Coulomb's constant).
        grid_step: Spacing used to snap placement points. Must be > 0.
        damping: Per-step velocity multiplier in [0, 1]. 1 disables damping.
        max_dt: Upper bound the Scene applies to dt before stepping. Must be > 0.
        sampling: Ring discretization sample counts.
    """
    k: float = DEFAULT_K
    grid_step: float = DEFAULT_GRID_STEP
    damping: float = DEFAULT_DAMPING
    max_dt: float = DEFAULT_MAX_DT
    sampling: RingSampling = field(default_factory=RingSampling)

    def __post_init__(self) -> None:
        if not self.grid_step > 0:
            raise ConfigurationError(f"grid_step must be positive, got {self.grid_step}")
        if not self.max_dt > 0:
            raise ConfigurationError(f"max_dt must be positive, got {self.max_dt}")
        if not 0.0 <= self.damping <= 1.0:
            raise ConfigurationError(f"damping must lie in [0, 1], got {self.damping}")
