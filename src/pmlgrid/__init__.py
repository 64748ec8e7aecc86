"""
Regular sampling grids for finite-difference wave simulations with PML layers.

We keep three sibling subpackages:
- core: grid value types + errors + configs
- operators: resampling, PML padding/truncation, boundary traces
- algorithm: lag, cross-correlation and FFT frequency grids
"""

from .core import (
    Grid1D,
    Grid2D,
    isequal,
    GridError,
    GridConstructionError,
    InvalidArgumentError,
    GridConsistencyError,
    DomainConfig,
    BoundaryConfig,
)
from .operators import (
    resample,
    truncate_grid,
    pad_or_truncate,
    core_slices,
    embed_in_extended,
    extract_physical,
    BoundaryTrace,
    boundary_trace,
    boundary_count,
)
from .algorithm import (
    lag_grid,
    xcorr_grid,
    fft_grid,
    rfft_grid,
    fft_grid_from,
    rfft_grid_from,
)

__version__ = "0.1.0"

__all__ = [
    "core",
    "operators",
    "algorithm",
    # core
    "Grid1D",
    "Grid2D",
    "isequal",
    "GridError",
    "GridConstructionError",
    "InvalidArgumentError",
    "GridConsistencyError",
    "DomainConfig",
    "BoundaryConfig",
    # operators
    "resample",
    "truncate_grid",
    "pad_or_truncate",
    "core_slices",
    "embed_in_extended",
    "extract_physical",
    "BoundaryTrace",
    "boundary_trace",
    "boundary_count",
    # algorithm
    "lag_grid",
    "xcorr_grid",
    "fft_grid",
    "rfft_grid",
    "fft_grid_from",
    "rfft_grid_from",
]
