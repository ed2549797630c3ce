# MIT License (see LICENSE)
"""
Core type definitions for the electrostatics simulation.

Defines the fundamental data structures:
- Geometry: closed set of source shapes, each with its own field law.
- ChargeSource: a charged body with position, charge, radius and dynamic state.
- ProbePoint: a chargeless observation point.
- VectorResult: a vector paired with its magnitude.
- RingSampling: ring discretization sample counts, by use.

Coordinate convention: y is up. A Ring lies in the horizontal (XZ) plane
through its centre, so its symmetry axis is the +y direction.
"""
from __future__ import annotations
import enum
import math
import uuid
from dataclasses import dataclass, field, replace
from typing import NamedTuple

import numpy as np

from .constants import (
    POINT_RADIUS,
    RING_RADIUS,
    SPHERE_RADIUS,
    RING_SAMPLES_FIELD,
    RING_SAMPLES_POTENTIAL,
    RING_SAMPLES_FORCE,
)
from .errors import ConfigurationError
from .util import vec3, norm


# =============================================================================
# Geometry
# =============================================================================

class Geometry(str, enum.Enum):
    """
    Source geometry tag.

    Values match the serialized names used in scene files.
    """
    POINT = "POINT"
    RING = "RING"
    CONDUCTING_SPHERE = "SPHERE_CONDUCTING"
    NON_CONDUCTING_SPHERE = "SPHERE_NON_CONDUCTING"

    @property
    def is_extended(self) -> bool:
        """True for geometries whose radius is physically meaningful."""
        return self is not Geometry.POINT


_DEFAULT_RADIUS = {
    Geometry.POINT: POINT_RADIUS,
    Geometry.RING: RING_RADIUS,
    Geometry.CONDUCTING_SPHERE: SPHERE_RADIUS,
    Geometry.NON_CONDUCTING_SPHERE: SPHERE_RADIUS,
}


def default_radius(geometry: Geometry) -> float:
    return _DEFAULT_RADIUS[Geometry(geometry)]


def new_id() -> str:
    """Short random identifier for sources and probes."""
    return uuid.uuid4().hex[:9]


# =============================================================================
# Results and sampling
# =============================================================================

class VectorResult(NamedTuple):
    """A vector quantity (field or force) together with its magnitude."""
    vector: np.ndarray
    magnitude: float

    @classmethod
    def of(cls, vector: np.ndarray) -> "VectorResult":
        return cls(vector, norm(vector))


@dataclass(frozen=True)
class RingSampling:
    """
    Number of point samples used to discretize a Ring, by use.

    The counts trade accuracy for cost. On the ring's symmetry axis every
    count is exact; off-axis the error shrinks as the count grows and is
    largest close to the ring itself.

    Attributes:
        field: Samples when evaluating a ring's field at a point.
        potential: Samples when evaluating a ring's potential at a point.
        force: Samples over a ring *target* when resolving the force on it.
    """
    field: int = RING_SAMPLES_FIELD
    potential: int = RING_SAMPLES_POTENTIAL
    force: int = RING_SAMPLES_FORCE

    def __post_init__(self) -> None:
        for name in ("field", "potential", "force"):
            n = getattr(self, name)
            if int(n) != n or n < 1:
                raise ConfigurationError(f"Ring sample count '{name}' must be a positive integer, got {n}")
            object.__setattr__(self, name, int(n))


DEFAULT_SAMPLING = RingSampling()


# =============================================================================
# Charge source
# =============================================================================

@dataclass
class ChargeSource:
    """
    A charged body that produces a field and responds to the fields of others.

    Attributes:
        geometry: Shape tag selecting the field law.
        q: Signed total charge.
        position: Centre [x, y, z].
        radius: Physical radius for Ring and spheres, cosmetic for Point.
                Defaults to the placement preset for the geometry.
        mass: Inertial mass used by the integrator. Must be > 0.
        velocity: Linear velocity [vx, vy, vz].
        is_fixed: Pinned sources are skipped by the integrator but still act
                  as field sources for everything else.
        id: Identity used to exclude a source from its own force.

    Raises:
        ConfigurationError: radius <= 0 for Ring/spheres, radius < 0 for
            Point, mass <= 0, or non-finite charge.

    Note:
        Position and velocity are converted to fresh float64 arrays on init,
        so a source never shares storage with the arrays it was built from.
    """
    geometry: Geometry
    q: float
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    radius: float | None = None
    mass: float = 1.0
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    is_fixed: bool = False
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        try:
            self.geometry = Geometry(self.geometry)
        except ValueError:
            raise ConfigurationError(f"Unknown geometry: {self.geometry!r}") from None

        self.position = vec3(self.position)
        self.velocity = vec3(self.velocity)
        self.q = float(self.q)
        if not math.isfinite(self.q):
            raise ConfigurationError(f"Charge must be finite, got {self.q}")

        if self.radius is None:
            self.radius = default_radius(self.geometry)
        self.radius = float(self.radius)
        if self.geometry.is_extended and not self.radius > 0:
            raise ConfigurationError(
                f"{self.geometry.value} radius must be positive, got {self.radius}"
            )
        if self.radius < 0:
            raise ConfigurationError(f"Radius must be non-negative, got {self.radius}")

        self.mass = float(self.mass)
        if not self.mass > 0:
            raise ConfigurationError(f"Mass must be positive, got {self.mass}")

    def copy(self, **changes) -> "ChargeSource":
        """Return a fresh, re-validated source, optionally with fields changed."""
        return replace(self, **changes)


@dataclass
class ProbePoint:
    """
    A chargeless observation point.

    Used only to query field and potential; never a source, never integrated.
    """
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        self.position = vec3(self.position)
