# MIT License (see LICENSE)
"""
Constants used throughout the simulation.

Units are arbitrary scene units, not SI: the field constant K plays the role
of Coulomb's constant but is chosen so that typical scene values (charges of
a few units, separations of a few grid cells) give readable numbers.
"""
from __future__ import annotations

# Default field constant (analogue of k = 1/(4πε₀)).
DEFAULT_K: float = 10.0

# Singularity guard. A query point closer than this to a source (or to a ring
# sample) receives zero contribution from it.
SINGULARITY_EPS: float = 0.05

# Per-step multiplicative velocity attenuation.
DEFAULT_DAMPING: float = 0.98

# Largest dt the Scene passes to the integrator in a single step.
DEFAULT_MAX_DT: float = 0.1

DEFAULT_GRID_STEP: float = 1.0

# Ring discretization sample counts, by use.
RING_SAMPLES_FIELD: int = 40
RING_SAMPLES_POTENTIAL: int = 30
RING_SAMPLES_FORCE: int = 20

# Placement presets: charge, radius and mass for newly placed sources.
DEFAULT_CHARGE: float = 5.0
POINT_RADIUS: float = 0.15
RING_RADIUS: float = 1.0
SPHERE_RADIUS: float = 0.8
POINT_MASS: float = 1.0
RING_MASS: float = 2.0
SPHERE_MASS: float = 5.0
