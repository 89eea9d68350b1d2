from __future__ import annotations


class FallingBlocksError(RuntimeError):
    """Base class for engine misconfiguration errors."""


class EmptyCatalogError(FallingBlocksError):
    """Raised when a piece catalog has no shapes to choose from."""
