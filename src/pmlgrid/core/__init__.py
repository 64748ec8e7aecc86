"""
Core: grid value types, error taxonomy and configs.
"""

from .errors import GridError, GridConstructionError, InvalidArgumentError, GridConsistencyError
from .grid import Grid1D, Grid2D, isequal, linear_samples, stepped_samples
from .config import DomainConfig, BoundaryConfig

__all__ = [
    "Grid1D",
    "Grid2D",
    "isequal",
    "linear_samples",
    "stepped_samples",
    "GridError",
    "GridConstructionError",
    "InvalidArgumentError",
    "GridConsistencyError",
    "DomainConfig",
    "BoundaryConfig",
]
