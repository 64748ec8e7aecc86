# core/errors.py
from __future__ import annotations


class GridError(Exception):
    """Base class for every error raised by pmlgrid."""


class GridConstructionError(GridError, ValueError):
    """
    Raised when a grid definition violates its invariants
    (negative spacing, sample count not matching the array length, ...).
    """


class InvalidArgumentError(GridError, ValueError):
    """Raised for unsupported flags, attributes or argument shapes."""


class GridConsistencyError(GridError, RuntimeError):
    """
    Raised when an algorithm's post-condition fails.

    Never expected under correct inputs; it indicates a logic error.
    """
