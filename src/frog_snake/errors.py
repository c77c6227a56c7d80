"""Exception types raised by the game engine."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A required collaborator or asset is missing, so no session can start."""


class SpawnSpaceExhaustedError(RuntimeError):
    """No free cell could be found for the food."""
