# core/grid.py
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Tuple

import numpy as np

from .errors import GridConstructionError, InvalidArgumentError

logger = logging.getLogger(__name__)

# relative tolerance for deciding that a stepped range lands on its end bound
_STEP_RTOL = 1e-10


# -----------------------------
# Sample generation
# -----------------------------

def _frozen_axis(values: Any, name: str) -> np.ndarray:
    """Private read-only float64 copy of a 1D coordinate array."""
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise GridConstructionError(f"{name} must be one-dimensional, got shape {arr.shape}.")
    arr.setflags(write=False)
    return arr


def _as_count(n: Any, name: str) -> int:
    try:
        ok = not isinstance(n, (bool, np.bool_)) and int(n) == n
    except (TypeError, ValueError, OverflowError):
        ok = False
    if not ok:
        raise GridConstructionError(f"{name} must be an integer, got {n!r}.")
    return int(n)


def _realized_spacing(x: np.ndarray) -> float:
    return 0.0 if x.size < 2 else float(x[1] - x[0])


def linear_samples(xbeg: float, xend: float, n: int) -> np.ndarray:
    """
    `n` linearly spaced samples from xbeg to xend, both bounds included exactly.
    """
    n = _as_count(n, "n")
    if n < 1:
        raise GridConstructionError(f"Need at least one sample, got n={n}.")
    return np.linspace(float(xbeg), float(xend), n)


def stepped_samples(xbeg: float, xend: float, step: float) -> np.ndarray:
    """
    Samples xbeg, xbeg + step, xbeg + 2*step, ... stopping at or before xend.

    The sample count is derived from (xend - xbeg) / step. When that ratio is
    an integer up to floating-point noise the last sample is snapped onto
    xend, so e.g. (0, 1, 0.1) yields 11 samples ending exactly at 1.0.
    Returns an empty array when xend lies before xbeg in the step direction.
    """
    xbeg = float(xbeg)
    xend = float(xend)
    step = float(step)

    if not (np.isfinite(xbeg) and np.isfinite(xend)):
        raise InvalidArgumentError(f"Range bounds must be finite, got [{xbeg}, {xend}].")
    if step == 0.0 or not np.isfinite(step):
        raise InvalidArgumentError(f"step must be nonzero and finite, got {step!r}.")

    ratio = (xend - xbeg) / step
    nearest = float(np.rint(ratio))
    on_bound = abs(ratio - nearest) <= _STEP_RTOL * max(1.0, abs(ratio))
    last = int(nearest) if on_bound else int(np.floor(ratio))
    n = max(last + 1, 0)

    x = xbeg + step * np.arange(n, dtype=float)
    if on_bound and n > 1:
        x[-1] = xend
    return x


# -----------------------------
# Grid value types
# -----------------------------

def isequal(grid1: Any, grid2: Any) -> bool:
    """
    Field-wise equality of two grids.

    Arrays are compared element-wise (same shape, NaN equal to NaN),
    scalars by value. Grids of different types are never equal.
    """
    if type(grid1) is not type(grid2) or not isinstance(grid1, (Grid1D, Grid2D)):
        return False
    for f in fields(grid1):
        a = getattr(grid1, f.name)
        b = getattr(grid2, f.name)
        if isinstance(a, np.ndarray):
            if not np.array_equal(a, b, equal_nan=True):
                return False
        elif not (a == b or (a != a and b != b)):
            return False
    return True


def _hash_array(arr: np.ndarray) -> int:
    # adding 0.0 folds -0.0 onto 0.0 so hashing agrees with array_equal
    return hash(np.ascontiguousarray(arr + 0.0).tobytes())


@dataclass(frozen=True, eq=False)
class Grid1D:
    """
    Regularly sampled 1D grid.

    Fields
    ------
    x : (nx,) sample positions (read-only)
    nx : number of samples
    dx : sampling interval, >= 0
    """
    x: np.ndarray
    nx: int
    dx: float

    def __post_init__(self) -> None:
        x = _frozen_axis(self.x, "x")
        nx = _as_count(self.nx, "nx")
        dx = float(self.dx)
        if not dx >= 0.0:
            raise GridConstructionError(f"Grid1D requires dx >= 0, got dx={dx}.")
        if x.size != nx:
            raise GridConstructionError(f"Grid1D has len(x)={x.size} but nx={nx}.")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "nx", nx)
        object.__setattr__(self, "dx", dx)

    @classmethod
    def from_count(cls, xbeg: float, xend: float, nx: int) -> "Grid1D":
        """Grid of `nx` samples from xbeg to xend inclusive."""
        x = linear_samples(xbeg, xend, nx)
        return cls(x, x.size, _realized_spacing(x))

    @classmethod
    def from_spacing(cls, xbeg: float, xend: float, dx: float) -> "Grid1D":
        """
        Grid stepping from xbeg towards xend by dx.

        nx and dx are taken from the realized samples, not from the request.
        """
        x = stepped_samples(xbeg, xend, dx)
        if x.size == 0:
            raise GridConstructionError(f"Empty sample range {xbeg}:{dx}:{xend}.")
        grid = cls(x, x.size, _realized_spacing(x))
        logger.debug(f"Grid1D.from_spacing: nx={grid.nx}, dx={grid.dx:g}, x=[{x[0]:g}, {x[-1]:g}]")
        return grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid1D):
            return NotImplemented
        return isequal(self, other)

    def __hash__(self) -> int:
        return hash((Grid1D, _hash_array(self.x), self.nx, self.dx))


@dataclass(frozen=True, eq=False)
class Grid2D:
    """
    Regularly sampled 2D grid with two independent axes.

    Fields
    ------
    x : (nx,) horizontal sample positions (read-only)
    z : (nz,) vertical sample positions (read-only)
    nx, nz : number of samples along x and z
    npml : number of PML layers associated with the grid (carried, not
           checked against the samples)
    dx, dz : sampling intervals, >= 0
    """
    x: np.ndarray
    z: np.ndarray
    nx: int
    nz: int
    npml: int
    dx: float
    dz: float

    def __post_init__(self) -> None:
        x = _frozen_axis(self.x, "x")
        z = _frozen_axis(self.z, "z")
        nx = _as_count(self.nx, "nx")
        nz = _as_count(self.nz, "nz")
        npml = _as_count(self.npml, "npml")
        dx, dz = float(self.dx), float(self.dz)

        if not (dx >= 0.0 and dz >= 0.0):
            raise GridConstructionError(f"Grid2D requires dx, dz >= 0, got dx={dx}, dz={dz}.")
        if x.size != nx or z.size != nz:
            raise GridConstructionError(
                f"Grid2D has len(x)={x.size}, len(z)={z.size} but nx={nx}, nz={nz}."
            )
        if npml < 0:
            raise GridConstructionError(f"npml must be >= 0, got {npml}.")

        for name, value in (("x", x), ("z", z), ("nx", nx), ("nz", nz),
                            ("npml", npml), ("dx", dx), ("dz", dz)):
            object.__setattr__(self, name, value)

    @classmethod
    def from_count(
        cls,
        xmin: float,
        xmax: float,
        zmin: float,
        zmax: float,
        nx: int,
        nz: int,
        npml: int,
    ) -> "Grid2D":
        """2D grid with nx (nz) linearly spaced samples along x (z)."""
        x = linear_samples(xmin, xmax, nx)
        z = linear_samples(zmin, zmax, nz)
        return cls(x, z, x.size, z.size, npml, _realized_spacing(x), _realized_spacing(z))

    @classmethod
    def from_spacing(
        cls,
        xmin: float,
        xmax: float,
        zmin: float,
        zmax: float,
        dx: float,
        dz: float,
        npml: int,
    ) -> "Grid2D":
        """2D grid stepping by dx (dz) along x (z); counts follow from the ranges."""
        x = stepped_samples(xmin, xmax, dx)
        z = stepped_samples(zmin, zmax, dz)
        if x.size == 0 or z.size == 0:
            raise GridConstructionError(
                f"Empty sample range: x={xmin}:{dx}:{xmax}, z={zmin}:{dz}:{zmax}."
            )
        grid = cls(x, z, x.size, z.size, npml, _realized_spacing(x), _realized_spacing(z))
        logger.debug(
            f"Grid2D.from_spacing: nx={grid.nx}, nz={grid.nz}, dx={grid.dx:g}, dz={grid.dz:g}"
        )
        return grid

    def axis_x(self) -> Grid1D:
        return Grid1D(self.x, self.nx, self.dx)

    def axis_z(self) -> Grid1D:
        return Grid1D(self.z, self.nz, self.dz)

    def mesh(self) -> Tuple[np.ndarray, np.ndarray]:
        """(Z, X) coordinate arrays of shape (nz, nx)."""
        Z, X = np.meshgrid(self.z, self.x, indexing="ij")
        return Z, X

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        return isequal(self, other)

    def __hash__(self) -> int:
        return hash((Grid2D, _hash_array(self.x), _hash_array(self.z),
                     self.nx, self.nz, self.npml, self.dx, self.dz))
