# operators/resample.py
from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from pmlgrid.core.errors import InvalidArgumentError
from pmlgrid.core.grid import Grid1D, Grid2D

logger = logging.getLogger(__name__)


def _log_drift(axis: str, old_end: float, new_end: float) -> None:
    if new_end != old_end:
        logger.debug(
            f"resample: {axis} now ends at {new_end:g} instead of {old_end:g} "
            "(spacing does not divide the span)"
        )


def resample(
    grid: Union[Grid1D, Grid2D],
    dx: float,
    dz: Optional[float] = None,
) -> Union[Grid1D, Grid2D]:
    """
    Rebuild a grid over the same first/last samples at a new spacing.

    Stepping stops at or before the old end point, so the realized extent can
    be slightly shorter when dx (dz) does not divide the span.
    For a Grid2D, dz is required and npml is carried over.
    """
    if isinstance(grid, Grid1D):
        if grid.nx == 0:
            raise InvalidArgumentError("Cannot resample an empty grid.")
        out = Grid1D.from_spacing(grid.x[0], grid.x[-1], dx)
        _log_drift("x", grid.x[-1], out.x[-1])
        return out

    if isinstance(grid, Grid2D):
        if dz is None:
            raise InvalidArgumentError("resample of a Grid2D needs both dx and dz.")
        if grid.nx == 0 or grid.nz == 0:
            raise InvalidArgumentError("Cannot resample an empty grid.")
        out = Grid2D.from_spacing(
            grid.x[0], grid.x[-1], grid.z[0], grid.z[-1], dx, dz, grid.npml
        )
        _log_drift("x", grid.x[-1], out.x[-1])
        _log_drift("z", grid.z[-1], out.z[-1])
        return out

    raise InvalidArgumentError(f"Cannot resample {type(grid).__name__}.")


def truncate_grid(grid: Grid1D, xbeg: float, xend: float) -> Grid1D:
    """
    Keep the contiguous samples between those nearest to xbeg and xend.

    The bounds may be given in either order; on ties the first matching
    sample wins.
    """
    if grid.nx == 0:
        raise InvalidArgumentError("Cannot truncate an empty grid.")
    i1 = int(np.argmin((grid.x - float(xbeg)) ** 2))
    i2 = int(np.argmin((grid.x - float(xend)) ** 2))
    imin, imax = min(i1, i2), max(i1, i2)

    x = grid.x[imin:imax + 1]
    dx = float(x[1] - x[0]) if x.size > 1 else 0.0
    return Grid1D(x, x.size, dx)
