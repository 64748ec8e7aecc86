# algorithm/spectral.py
from __future__ import annotations

import numpy as np

from pmlgrid.core.errors import InvalidArgumentError
from pmlgrid.core.grid import Grid1D


def _check_nx(nx: int) -> int:
    try:
        ok = not isinstance(nx, (bool, np.bool_)) and int(nx) == nx and nx >= 1
    except (TypeError, ValueError, OverflowError):
        ok = False
    if not ok:
        raise InvalidArgumentError(f"nx must be a positive integer, got {nx!r}.")
    return int(nx)


def _bin_spacing(grid: Grid1D) -> float:
    """delta = 1 / (nx * dx), the frequency spacing of a transform over grid."""
    if grid.nx < 1 or not grid.dx > 0.0:
        raise InvalidArgumentError(
            f"Frequency grid needs nx >= 1 and dx > 0, got nx={grid.nx}, dx={grid.dx}."
        )
    return 1.0 / (grid.nx * grid.dx)


def rfft_grid(nx: int, delta: float) -> Grid1D:
    """
    Frequencies of an rfft of length nx: nx//2 + 1 bins, bin i = i*delta.
    """
    nx = _check_nx(nx)
    vec = np.zeros(nx // 2 + 1)
    vec[1:] = delta * np.arange(1, nx // 2 + 1)
    return Grid1D(vec, vec.size, delta)


def fft_grid(nx: int, delta: float) -> Grid1D:
    """
    Frequencies of a full fft of length nx, in FFT bin order.

    Bin 0 is zero, bins 1..nx//2 hold i*delta and the tail holds the
    negative frequencies, bin nx-i = -i*delta. For odd nx there are nx//2
    negative bins; for even nx only nx//2 - 1, as the Nyquist bin is kept
    positive.
    """
    nx = _check_nx(nx)
    half = nx // 2
    nneg = half if nx % 2 == 1 else half - 1

    vec = np.zeros(nx)
    vec[1:half + 1] = delta * np.arange(1, half + 1)
    if nneg > 0:
        # bin nx-i holds -i*delta, i = nneg..1
        vec[nx - nneg:] = -(delta * np.arange(nneg, 0, -1))
    return Grid1D(vec, nx, delta)


def fft_grid_from(grid: Grid1D) -> Grid1D:
    """Frequency grid after an fft of samples on `grid`."""
    return fft_grid(grid.nx, _bin_spacing(grid))


def rfft_grid_from(grid: Grid1D) -> Grid1D:
    """Frequency grid after an rfft of samples on `grid`."""
    return rfft_grid(grid.nx, _bin_spacing(grid))
