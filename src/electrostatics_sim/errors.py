# MIT License (see LICENSE)
"""
Exception types raised by the simulation.

Both concrete errors derive from ValueError so callers that already catch
ValueError around construction or parsing keep working.
"""
from __future__ import annotations


class ElectrostaticsError(Exception):
    """Base class for all errors raised by electrostatics_sim."""


class ConfigurationError(ElectrostaticsError, ValueError):
    """
    Invalid source or simulation parameters.

    Raised at construction time (fail fast), e.g. a Ring with radius <= 0,
    a source with mass <= 0, or a config with a non-positive grid step.
    """


class PreconditionError(ElectrostaticsError, ValueError):
    """A caller-enforced precondition was violated (e.g. snap with step <= 0)."""
