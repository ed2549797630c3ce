# MIT License (see LICENSE)
"""
Input/Output utilities for electrostatics scenes.

This subpackage provides:
    - JSON serialization: Save and load scenes to/from JSON files.
    - Round-trip support: Serialized scenes can be loaded back identically.

Typical usage:
    from electrostatics_sim.io import load_scene, save_scene

    scene = load_scene("dipole.json")
    save_scene(scene, "output.json")
"""
from .json_io import (
    load_scene,
    load_scene_raw,
    scene_from_json,
    save_scene,
    scene_to_json,
    source_to_json,
    source_from_json,
    probe_to_json,
    probe_from_json,
)

__all__ = [
    # Loading
    "load_scene",
    "load_scene_raw",
    "scene_from_json",
    # Saving
    "save_scene",
    # Serialization
    "scene_to_json",
    "source_to_json",
    "source_from_json",
    "probe_to_json",
    "probe_from_json",
]
