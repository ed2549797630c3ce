# MIT License (see LICENSE)
"""
The simulation scene: host-side state around the pure engine.

The Scene class owns what the engine functions deliberately do not:
- The current source collection and the probe points.
- Simulation parameters (SimulationConfig).
- Placement with grid snapping and per-geometry presets.
- Interactive overrides (dragging a source resets its velocity).
- The frame loop: dt clamping, then replacing the collection with the
  fresh one returned by core.step().

Structure:
    - User creates a Scene (optionally seeded with Scene.with_dipole()).
    - User places sources and probes.
    - User calls scene.step(dt) once per frame and scene.observe(probe_id)
      to read field, potential and force at a probe.

Every update replaces scene.sources with a new list; a list obtained before
an update remains a valid, unchanged snapshot.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from .config import SimulationConfig
from .constants import (
    DEFAULT_CHARGE,
    POINT_MASS,
    RING_MASS,
    SPHERE_MASS,
)
from .core.evaluator import electric_field, potential, field_contributions
from .core.forces import net_force
from .core.integrators import step as integrate
from .errors import ConfigurationError, PreconditionError
from .grid import snap
from .types import ChargeSource, ProbePoint, Geometry, VectorResult
from .util import vec3, zero3

logger = logging.getLogger(__name__)


_PRESET_MASS = {
    Geometry.POINT: POINT_MASS,
    Geometry.RING: RING_MASS,
    Geometry.CONDUCTING_SPHERE: SPHERE_MASS,
    Geometry.NON_CONDUCTING_SPHERE: SPHERE_MASS,
}


def make_source(
    geometry: Geometry | str,
    position=(0.0, 0.0, 0.0),
    q: float = DEFAULT_CHARGE,
    radius: float | None = None,
    mass: float | None = None,
    is_fixed: bool = False,
) -> ChargeSource:
    """
    Build a source using the placement presets for its geometry.

    Defaults: q = 5; radius 0.15 (Point), 1.0 (Ring), 0.8 (spheres);
    mass 1 (Point), 2 (Ring), 5 (spheres).
    """
    geometry = Geometry(geometry)
    if mass is None:
        mass = _PRESET_MASS[geometry]
    return ChargeSource(
        geometry=geometry,
        q=q,
        position=position,
        radius=radius,
        mass=mass,
        is_fixed=is_fixed,
    )


@dataclass(frozen=True)
class Observation:
    """
    Readings at a probe point.

    Attributes:
        position: Probe position.
        field: Total field vector.
        field_magnitude: |field|.
        potential: Total potential.
        unit_force: Force magnitude on a +1 test charge placed at the probe.
        contributions: (source id, VectorResult) for each source.
    """
    position: np.ndarray
    field: np.ndarray
    field_magnitude: float
    potential: float
    unit_force: float
    contributions: list[tuple[str, VectorResult]]


@dataclass
class Scene:
    """
    Electrostatics simulation world.

    Attributes:
        config: Simulation parameters (k, damping, dt clamp, grid step, sampling).
        sources: Current source collection. Replaced, never mutated, on update.
        probes: Observation points.
        time: Simulated time accumulated by step().
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    sources: list[ChargeSource] = field(default_factory=list)
    probes: list[ProbePoint] = field(default_factory=list)
    time: float = 0.0

    @classmethod
    def with_dipole(cls, config: SimulationConfig | None = None) -> "Scene":
        """Scene seeded with a +5 / -5 point-charge pair at x = -2 and x = +2."""
        scene = cls(config=config or SimulationConfig())
        scene.add_source(make_source(Geometry.POINT, (-2.0, 0.0, 0.0), q=5.0))
        scene.add_source(make_source(Geometry.POINT, (2.0, 0.0, 0.0), q=-5.0))
        return scene

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def _source_index(self, source_id: str) -> int:
        for i, s in enumerate(self.sources):
            if s.id == source_id:
                return i
        raise KeyError(f"No source with id {source_id!r}")

    def _probe_index(self, probe_id: str) -> int:
        for i, p in enumerate(self.probes):
            if p.id == probe_id:
                return i
        raise KeyError(f"No probe with id {probe_id!r}")

    def get_source(self, source_id: str) -> ChargeSource:
        return self.sources[self._source_index(source_id)]

    def get_probe(self, probe_id: str) -> ProbePoint:
        return self.probes[self._probe_index(probe_id)]

    # -------------------------------------------------------------------------
    # Adding and removing
    # -------------------------------------------------------------------------

    def add_source(self, source: ChargeSource) -> str:
        """
        Add a source to the scene.

        Returns:
            The source id.

        Raises:
            ConfigurationError: If a source or probe with the same id exists.
        """
        if self._has_id(source.id):
            raise ConfigurationError(f"Duplicate id {source.id!r}")
        self.sources = self.sources + [source]
        logger.info("Added %s source %s (q=%g)", source.geometry.value, source.id, source.q)
        return source.id

    def add_probe(self, probe: ProbePoint) -> str:
        if self._has_id(probe.id):
            raise ConfigurationError(f"Duplicate id {probe.id!r}")
        self.probes = self.probes + [probe]
        logger.info("Added probe %s", probe.id)
        return probe.id

    def place(self, geometry: Geometry | str, point, q: float = DEFAULT_CHARGE,
              snap_to_grid: bool = True) -> ChargeSource:
        """
        Place a new preset source, snapping the point to config.grid_step.

        Args:
            geometry: Source geometry.
            point: Requested position [x, y, z].
            q: Charge (preset default 5; use a negative value for a negative charge).
            snap_to_grid: If False the point is used as given.

        Returns:
            The created source (already added to the scene).
        """
        pos = snap(point, self.config.grid_step) if snap_to_grid else vec3(point)
        source = make_source(geometry, pos, q=q)
        self.add_source(source)
        return source

    def place_probe(self, point, snap_to_grid: bool = True) -> ProbePoint:
        pos = snap(point, self.config.grid_step) if snap_to_grid else vec3(point)
        probe = ProbePoint(position=pos)
        self.add_probe(probe)
        return probe

    def remove(self, item_id: str) -> None:
        """Remove the source or probe with the given id."""
        if any(s.id == item_id for s in self.sources):
            self.sources = [s for s in self.sources if s.id != item_id]
        elif any(p.id == item_id for p in self.probes):
            self.probes = [p for p in self.probes if p.id != item_id]
        else:
            raise KeyError(f"No source or probe with id {item_id!r}")
        logger.info("Removed %s", item_id)

    def clear(self) -> None:
        """Remove every source and probe and reset the clock."""
        self.sources = []
        self.probes = []
        self.time = 0.0

    def _has_id(self, item_id: str) -> bool:
        return any(s.id == item_id for s in self.sources) or any(
            p.id == item_id for p in self.probes
        )

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def _replace_source(self, i: int, new: ChargeSource) -> None:
        sources = list(self.sources)
        sources[i] = new
        self.sources = sources

    def update_source(self, source_id: str, **changes) -> ChargeSource:
        """
        Change fields of a source (q, radius, mass, is_fixed, position, ...).

        The source is rebuilt, so invalid values raise ConfigurationError and
        leave the scene unchanged.
        """
        if "id" in changes:
            raise ConfigurationError("A source's id cannot be changed")
        i = self._source_index(source_id)
        new = self.sources[i].copy(**changes)
        self._replace_source(i, new)
        return new

    def move_source(self, source_id: str, position) -> ChargeSource:
        """Drag override: set the position and reset the velocity to zero."""
        i = self._source_index(source_id)
        new = self.sources[i].copy(position=position, velocity=zero3())
        self._replace_source(i, new)
        return new

    def move_probe(self, probe_id: str, position) -> ProbePoint:
        i = self._probe_index(probe_id)
        probes = list(self.probes)
        probes[i] = ProbePoint(position=position, id=probe_id)
        self.probes = probes
        return probes[i]

    def reset_velocities(self) -> None:
        """Bring every source to rest without moving it."""
        self.sources = [s.copy(velocity=zero3()) for s in self.sources]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def field_at(self, point) -> VectorResult:
        return electric_field(point, self.sources, self.config.k, self.config.sampling)

    def potential_at(self, point) -> float:
        return potential(point, self.sources, self.config.k, self.config.sampling)

    def force_on(self, source_id: str) -> VectorResult:
        target = self.get_source(source_id)
        return net_force(target, self.sources, self.config.k, self.config.sampling)

    def observe(self, probe_id: str) -> Observation:
        """Field, potential and unit-charge force at a probe."""
        probe = self.get_probe(probe_id)
        e = self.field_at(probe.position)
        return Observation(
            position=probe.position.copy(),
            field=e.vector,
            field_magnitude=e.magnitude,
            potential=self.potential_at(probe.position),
            unit_force=1.0 * e.magnitude,
            contributions=field_contributions(
                probe.position, self.sources, self.config.k, self.config.sampling
            ),
        )

    # -------------------------------------------------------------------------
    # Time stepping
    # -------------------------------------------------------------------------

    def step(self, dt: float) -> float:
        """
        Advance the simulation by one frame.

        dt is clamped to config.max_dt before it reaches the integrator, so a
        long frame (e.g. after the host stalls) cannot blow up the motion.

        Args:
            dt: Elapsed frame time. Must be >= 0.

        Returns:
            The dt actually used.

        Raises:
            PreconditionError: If dt is negative.
        """
        if not dt >= 0:
            raise PreconditionError(f"dt must be non-negative, got {dt}")
        h = min(float(dt), self.config.max_dt)
        if h < dt:
            logger.debug("Clamped dt %g to %g", dt, h)

        cfg = self.config
        self.sources = integrate(self.sources, h, cfg.k, cfg.damping, cfg.sampling)
        self.time += h
        return h
