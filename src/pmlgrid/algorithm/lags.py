# algorithm/lags.py
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from pmlgrid.core.errors import GridConsistencyError, InvalidArgumentError
from pmlgrid.core.grid import Grid1D

logger = logging.getLogger(__name__)

LagExtents = Union[float, Sequence[float]]


def _lag_pair(xlag: LagExtents) -> Tuple[float, float]:
    """(positive, negative) extents from a scalar or a 1- or 2-element sequence."""
    vals = np.atleast_1d(np.asarray(xlag, dtype=float))
    if vals.ndim != 1 or vals.size not in (1, 2):
        raise InvalidArgumentError(
            f"lags must be a scalar or [positive, negative], got {xlag!r}."
        )
    if vals.size == 1:
        return float(vals[0]), float(vals[0])
    return float(vals[0]), float(vals[1])


def _nsamples(extent: float, dx: float) -> int:
    # numpy rint rounds half to even
    return int(np.rint(extent / dx))


def lag_grid(xlag: LagExtents, dx: float) -> Tuple[Grid1D, Tuple[int, int]]:
    """
    Zero-centred lag grid with positive and negative lags.

    With n = round(extent / dx) on each side, the lags are k*dx for
    k = 1..n-1, so the extent itself is excluded. The result reads
        [-(n_neg-1)*dx, ..., -dx, 0, dx, ..., (n_pos-1)*dx]
    and contains zero exactly once. If no lag survives the grid is {0}
    with dx = 0.

    Parameters
    ----------
    xlag : float or [positive, negative]
        Lag extents; a scalar is used for both sides.
    dx : float
        Lag sampling interval, > 0.

    Returns
    -------
    grid : Grid1D
    (npos, nneg) : number of positive and negative lags (zero excluded)
    """
    dx = float(dx)
    if not dx > 0.0:
        raise InvalidArgumentError(f"dx must be > 0, got {dx}.")
    pos_extent, neg_extent = _lag_pair(xlag)

    pos = dx * np.arange(1, _nsamples(pos_extent, dx), dtype=float)
    neg = dx * np.arange(1, _nsamples(neg_extent, dx), dtype=float)
    x = np.concatenate([-neg[::-1], [0.0], pos])

    if x.size == 1:
        dx = 0.0

    if pos_extent == neg_extent and pos_extent != 0.0 and x.size % 2 == 0:
        raise GridConsistencyError(f"symmetric lag grid has even length {x.size}")

    logger.debug(f"lag_grid: {pos.size} positive, {neg.size} negative lags, dx={dx:g}")
    return Grid1D(x, x.size, dx), (int(pos.size), int(neg.size))


def xcorr_grid(grid: Grid1D, lags: Optional[LagExtents] = None) -> Grid1D:
    """
    Dense lag axis of a cross-correlation of two signals sampled on `grid`.

    Positive and negative lags are approximately given by `lags`
    ([positive, negative] or a scalar); by default both equal the span of
    the grid. Every integer multiple of grid.dx in range is included.
    """
    if not grid.dx > 0.0:
        raise InvalidArgumentError(f"xcorr_grid needs a grid with dx > 0, got dx={grid.dx}.")
    if lags is None:
        span = abs(grid.x[-1] - grid.x[0])
        lags = (span, span)
    pos_extent, neg_extent = _lag_pair(lags)

    npos = _nsamples(pos_extent, grid.dx)
    nneg = _nsamples(neg_extent, grid.dx)

    k = np.concatenate([-np.arange(nneg, -1, -1), np.arange(1, npos + 1)])
    vec = k * grid.dx
    return Grid1D(vec, vec.size, grid.dx)
