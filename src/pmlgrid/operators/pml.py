# operators/pml.py
from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from pmlgrid.core.errors import InvalidArgumentError
from pmlgrid.core.grid import Grid2D

logger = logging.getLogger(__name__)


# -----------------------------
# Collar geometry
# -----------------------------

def pad_or_truncate(grid: Grid2D, flag: int = 1) -> Grid2D:
    """
    Grow (flag=+1) or shrink (flag=-1) a grid by its PML layers on all sides.

    Padding moves every edge outward by npml samples of the existing spacing:
        x: [x0 - npml*dx, x1 + npml*dx],  nx -> nx + 2*npml
    and likewise for z. Truncation is the mirror operation. The result is
    rebuilt from sample counts, so its spacing is recomputed from the new
    samples (and matches the input spacing up to rounding).

    Parameters
    ----------
    grid : Grid2D
        Grid carrying the number of PML layers in `grid.npml`.
    flag : int
        +1 to pad, -1 to truncate.

    Returns
    -------
    Grid2D
        New grid with the same npml.
    """
    if flag == 1:
        sign = 1
    elif flag == -1:
        sign = -1
    else:
        raise InvalidArgumentError(f"invalid flag {flag!r}; use +1 (pad) or -1 (truncate).")

    npml = grid.npml
    xmin = grid.x[0] - sign * npml * grid.dx
    xmax = grid.x[-1] + sign * npml * grid.dx
    zmin = grid.z[0] - sign * npml * grid.dz
    zmax = grid.z[-1] + sign * npml * grid.dz

    out = Grid2D.from_count(
        xmin, xmax, zmin, zmax,
        grid.nx + sign * 2 * npml,
        grid.nz + sign * 2 * npml,
        npml,
    )
    logger.debug(
        f"pad_or_truncate(flag={flag}): {grid.nx}x{grid.nz} -> {out.nx}x{out.nz} (npml={npml})"
    )
    return out


def core_slices(grid: Grid2D) -> Tuple[slice, slice]:
    """
    For a padded grid, the physical region of a (nz, nx) array is
        [npml : nz-npml, npml : nx-npml]

    Returns (slice_z, slice_x).
    """
    npml = grid.npml
    if 2 * npml >= grid.nx or 2 * npml >= grid.nz:
        raise InvalidArgumentError(
            f"npml={npml} too large for a {grid.nz}x{grid.nx} grid."
        )
    return slice(npml, grid.nz - npml), slice(npml, grid.nx - npml)


def embed_in_extended(
    phys: np.ndarray,
    grid: Grid2D,
    *,
    fill_value: float = 0.0,
    dtype=None,
) -> np.ndarray:
    """
    Embed a physical (nz - 2*npml, nx - 2*npml) field into a new (nz, nx)
    array for the padded grid, filling the collar with fill_value.
    """
    phys = np.asarray(phys)
    if phys.ndim != 2:
        raise InvalidArgumentError("phys must be 2D (nz_phys, nx_phys)")

    sz, sx = core_slices(grid)
    expected = (sz.stop - sz.start, sx.stop - sx.start)
    if phys.shape != expected:
        raise InvalidArgumentError(f"phys has shape {phys.shape}, expected {expected}.")

    if dtype is None:
        dtype = phys.dtype

    out = np.full((grid.nz, grid.nx), fill_value, dtype=dtype)
    out[sz, sx] = phys
    return out


def extract_physical(ext: np.ndarray, grid: Grid2D) -> np.ndarray:
    """
    Extract the physical region from an extended (nz, nx) field.
    """
    ext = np.asarray(ext)
    if ext.shape != (grid.nz, grid.nx):
        raise InvalidArgumentError(
            f"ext has shape {ext.shape}, expected {(grid.nz, grid.nx)}."
        )
    sz, sx = core_slices(grid)
    return ext[sz, sx]
