"""
Operators: grid-to-grid transformations.

Public API:
- resample, truncate_grid
- PML collar: pad_or_truncate, core_slices, embed_in_extended, extract_physical
- boundary traces: boundary_trace, boundary_count
"""

# Resampling
from .resample import resample, truncate_grid

# PML collar
from .pml import pad_or_truncate, core_slices, embed_in_extended, extract_physical

# Boundary traces
from .boundary import BoundaryTrace, boundary_trace, boundary_count

__all__ = [
    # Resampling
    "resample",
    "truncate_grid",

    # PML collar
    "pad_or_truncate",
    "core_slices",
    "embed_in_extended",
    "extract_physical",

    # Boundary traces
    "BoundaryTrace",
    "boundary_trace",
    "boundary_count",
]
