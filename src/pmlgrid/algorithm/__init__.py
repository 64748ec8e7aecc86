"""
Algorithms: lag, cross-correlation and frequency grids.
"""

from .lags import lag_grid, xcorr_grid
from .spectral import fft_grid, rfft_grid, fft_grid_from, rfft_grid_from

__all__ = [
    # lags.py
    "lag_grid",
    "xcorr_grid",
    # spectral.py
    "fft_grid",
    "rfft_grid",
    "fft_grid_from",
    "rfft_grid_from",
]
