# operators/boundary.py
from __future__ import annotations

import logging
from typing import List, Literal, NamedTuple, Tuple, Union

import numpy as np

from pmlgrid.core.errors import GridConsistencyError, InvalidArgumentError
from pmlgrid.core.grid import Grid2D

logger = logging.getLogger(__name__)

BoundaryAttrib = Literal["inner", "outer"]

# rings beyond the third are not traced
MAX_RINGS = 3


class BoundaryTrace(NamedTuple):
    """Ordered (z, x) coordinates of the traced rings and their total count."""
    z: np.ndarray
    x: np.ndarray
    count: int


# -----------------------------
# Axis preparation
# -----------------------------

def _extend_axis(axis: np.ndarray, h: float, nlayer: int) -> np.ndarray:
    """Append nlayer samples at spacing h after the last sample."""
    after = axis[-1] + np.arange(1, nlayer + 1, dtype=float) * h
    return np.concatenate([axis, after])


def _trace_axes(grid: Grid2D, nlayer: int, attrib: str) -> Tuple[np.ndarray, np.ndarray]:
    if attrib == "inner":
        return grid.x, grid.z
    if attrib == "outer":
        return _extend_axis(grid.x, grid.dx, nlayer), _extend_axis(grid.z, grid.dz, nlayer)
    raise InvalidArgumentError(f"attrib must be 'inner' or 'outer', got {attrib!r}.")


def _ring_count(nx: int, nz: int, nlayer: int) -> int:
    # ring k has segments of nx-2k, nz-1-2k, nx-1-2k and nz-2-2k samples
    nring = min(nlayer, MAX_RINGS)
    for k in range(nring):
        if nx - 2 * k < 1 or nz - 2 * k < 2:
            raise InvalidArgumentError(
                f"A {nz}x{nx} trace grid cannot hold {nring} boundary ring(s)."
            )
    return nring


# -----------------------------
# Ring traversal
# -----------------------------

def _ring(x: np.ndarray, z: np.ndarray, k: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Ring k (0 = outermost) of the rectangle spanned by x and z.

    Clockwise from the top-left corner, no corner emitted twice:
      top row left->right at z[k]
      right column downwards at x[-1-k]
      bottom row right->left at z[-1-k]
      left column upwards at x[k]
    """
    nx, nz = x.size, z.size
    top = x[k:nx - k]
    right = z[k + 1:nz - k]
    bottom = x[k:nx - 1 - k][::-1]
    left = z[k + 1:nz - 1 - k][::-1]

    bx = np.concatenate([
        top,
        np.full(right.size, x[nx - 1 - k]),
        bottom,
        np.full(left.size, x[k]),
    ])
    bz = np.concatenate([
        np.full(top.size, z[k]),
        right,
        np.full(bottom.size, z[nz - 1 - k]),
        left,
    ])
    return bz, bx


def boundary_trace(
    grid: Grid2D,
    nlayer: int,
    attrib: BoundaryAttrib,
    *,
    only_count: bool = False,
) -> Union[BoundaryTrace, int]:
    """
    Coordinates of the samples on up to three concentric rectangular rings.

    Parameters
    ----------
    grid : Grid2D
    nlayer : int
        Number of rings (1..3; larger values give three rings).
    attrib : {"inner", "outer"}
        "inner" traces the grid's own outermost samples. "outer" first
        appends nlayer samples after the last x and the last z sample
        (nothing is prepended) and traces the extended axes.
    only_count : bool
        Return only the number of samples, without building coordinates.

    Returns
    -------
    BoundaryTrace(z, x, count), or count if only_count.
    """
    nlayer = int(nlayer)
    if nlayer < 1:
        raise InvalidArgumentError(f"nlayer must be >= 1, got {nlayer}.")

    if only_count:
        if attrib not in ("inner", "outer"):
            raise InvalidArgumentError(f"attrib must be 'inner' or 'outer', got {attrib!r}.")
        extra = nlayer if attrib == "outer" else 0
        nx, nz = grid.nx + extra, grid.nz + extra
        nring = _ring_count(nx, nz, nlayer)
        return sum(2 * nx + 2 * nz - 4 - 8 * k for k in range(nring))

    x, z = _trace_axes(grid, nlayer, attrib)
    nring = _ring_count(x.size, z.size, nlayer)

    bz_parts: List[np.ndarray] = []
    bx_parts: List[np.ndarray] = []
    for k in range(nring):
        rz, rx = _ring(x, z, k)
        bz_parts.append(rz)
        bx_parts.append(rx)
    bz = np.concatenate(bz_parts)
    bx = np.concatenate(bx_parts)

    if bz.size != bx.size:
        raise GridConsistencyError(
            f"boundary trace has {bz.size} z but {bx.size} x coordinates"
        )
    logger.debug(f"boundary_trace: {nring} ring(s), attrib={attrib}, {bz.size} samples")
    return BoundaryTrace(bz, bx, int(bz.size))


def boundary_count(grid: Grid2D, nlayer: int, attrib: BoundaryAttrib = "inner") -> int:
    """Number of samples boundary_trace would produce."""
    return boundary_trace(grid, nlayer, attrib, only_count=True)
