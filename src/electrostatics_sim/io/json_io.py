# MIT License (see LICENSE)
"""
JSON serialization and deserialization for electrostatics scenes.

JSON Schema Overview:
---------------------
{
  "k": float,                      # Field constant, default: 10
  "grid_step": float,              # Placement grid, default: 1
  "damping": float,                # Per-step velocity multiplier, default: 0.98
  "max_dt": float,                 # dt clamp, default: 0.1
  "sampling": {                    # Optional ring sample counts
    "field": int,                  # Default: 40
    "potential": int,              # Default: 30
    "force": int                   # Default: 20
  },
  "sources": [
    {
      "id": string,                # Optional, generated if absent
      "type": "POINT" | "RING" | "SPHERE_CONDUCTING" | "SPHERE_NON_CONDUCTING",
      "q": float,                  # Required
      "position": [x, y, z],       # Default: [0, 0, 0]
      "radius": float,             # Default: per-geometry preset
      "mass": float,               # Default: 1
      "velocity": [vx, vy, vz],    # Default: [0, 0, 0]
      "is_fixed": bool             # Default: false
    }
  ],
  "probes": [
    {"id": string, "position": [x, y, z]}
  ]
}
"""
from __future__ import annotations
import json
import logging
from typing import Any

import numpy as np

from ..config import SimulationConfig
from ..errors import ConfigurationError
from ..scene import Scene
from ..types import ChargeSource, ProbePoint, RingSampling, DEFAULT_SAMPLING

logger = logging.getLogger(__name__)


def load_scene_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a scene file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def scene_from_json(data: dict[str, Any]) -> Scene:
    """
    Construct a Scene from an already-parsed dictionary.

    Raises:
        ConfigurationError: If a parameter or source record is invalid.
    """
    sampling_data = data.get("sampling", {})
    config = SimulationConfig(
        k=float(data.get("k", SimulationConfig.k)),
        grid_step=float(data.get("grid_step", SimulationConfig.grid_step)),
        damping=float(data.get("damping", SimulationConfig.damping)),
        max_dt=float(data.get("max_dt", SimulationConfig.max_dt)),
        sampling=RingSampling(
            field=sampling_data.get("field", DEFAULT_SAMPLING.field),
            potential=sampling_data.get("potential", DEFAULT_SAMPLING.potential),
            force=sampling_data.get("force", DEFAULT_SAMPLING.force),
        ),
    )

    scene = Scene(config=config)
    for source_data in data.get("sources", []):
        scene.add_source(source_from_json(source_data))
    for probe_data in data.get("probes", []):
        scene.add_probe(probe_from_json(probe_data))
    return scene


def load_scene(path: str) -> Scene:
    """
    Load and construct a Scene from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ConfigurationError: If a parameter or source record is invalid.
    """
    scene = scene_from_json(load_scene_raw(path))
    logger.info("Loaded %d sources and %d probes from %s",
                len(scene.sources), len(scene.probes), path)
    return scene


def source_from_json(d: dict[str, Any]) -> ChargeSource:
    """
    Parse a single source definition from a dictionary.

    Args:
        d: Dictionary containing source properties.

    Returns:
        Initialized ChargeSource instance.
    """
    if "type" not in d:
        raise ConfigurationError("Source definition missing required 'type' field.")
    if "q" not in d:
        raise ConfigurationError("Source definition missing required 'q' field.")

    kwargs: dict[str, Any] = dict(
        geometry=d["type"],
        q=float(d["q"]),
        position=tuple(d.get("position", [0.0, 0.0, 0.0])),
        radius=d.get("radius"),
        mass=float(d.get("mass", 1.0)),
        velocity=tuple(d.get("velocity", [0.0, 0.0, 0.0])),
        is_fixed=bool(d.get("is_fixed", False)),
    )
    if "id" in d:
        kwargs["id"] = str(d["id"])
    return ChargeSource(**kwargs)


def probe_from_json(d: dict[str, Any]) -> ProbePoint:
    if "id" in d:
        return ProbePoint(position=tuple(d.get("position", [0.0, 0.0, 0.0])), id=str(d["id"]))
    return ProbePoint(position=tuple(d.get("position", [0.0, 0.0, 0.0])))


def source_to_json(s: ChargeSource) -> dict[str, Any]:
    """
    Serialize a ChargeSource to a dictionary (round-trip compatible).

    Default-valued optional fields are omitted to keep the output concise.
    """
    result = {
        "id": s.id,
        "type": s.geometry.value,
        "q": s.q,
        "position": _to_list(s.position),
        "radius": s.radius,
    }
    if s.mass != 1.0:
        result["mass"] = s.mass
    if np.any(s.velocity != 0.0):
        result["velocity"] = _to_list(s.velocity)
    if s.is_fixed:
        result["is_fixed"] = True
    return result


def probe_to_json(p: ProbePoint) -> dict[str, Any]:
    return {"id": p.id, "position": _to_list(p.position)}


def scene_to_json(scene: Scene) -> dict[str, Any]:
    """
    Serialize a complete Scene to a dictionary.

    Captured state includes the simulation parameters, every source with its
    kinematic state, and every probe.
    """
    cfg = scene.config
    result: dict[str, Any] = {
        "k": cfg.k,
        "sources": [source_to_json(s) for s in scene.sources],
    }

    # Optional parameters (skip if standard defaults)
    if cfg.grid_step != SimulationConfig.grid_step:
        result["grid_step"] = cfg.grid_step
    if cfg.damping != SimulationConfig.damping:
        result["damping"] = cfg.damping
    if cfg.max_dt != SimulationConfig.max_dt:
        result["max_dt"] = cfg.max_dt
    if cfg.sampling != DEFAULT_SAMPLING:
        result["sampling"] = {
            "field": cfg.sampling.field,
            "potential": cfg.sampling.potential,
            "force": cfg.sampling.force,
        }
    if scene.probes:
        result["probes"] = [probe_to_json(p) for p in scene.probes]
    return result


def save_scene(scene: Scene, path: str, indent: int = 2) -> None:
    """Save a Scene instance to a JSON file on disk."""
    data = scene_to_json(scene)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info("Saved %d sources to %s", len(scene.sources), path)


def _to_list(arr: Any) -> list[float]:
    """Helper: Convert numpy array or tuple to a clean list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)
