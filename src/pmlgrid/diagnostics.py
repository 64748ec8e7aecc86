# diagnostics.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import matplotlib.pyplot as plt

from pmlgrid.core.grid import Grid1D, Grid2D
from pmlgrid.operators.boundary import boundary_trace


# -----------------------------
# Summaries
# -----------------------------

def describe_grid(grid: Union[Grid1D, Grid2D]) -> Dict[str, Any]:
    """Counts, spacings and extents of a grid as a flat dict."""
    def _extent(a: np.ndarray):
        return (float(a[0]), float(a[-1])) if a.size else (None, None)

    if isinstance(grid, Grid1D):
        xmin, xmax = _extent(grid.x)
        return {"nx": grid.nx, "dx": grid.dx, "xmin": xmin, "xmax": xmax}

    xmin, xmax = _extent(grid.x)
    zmin, zmax = _extent(grid.z)
    return {
        "nx": grid.nx,
        "nz": grid.nz,
        "npml": grid.npml,
        "dx": grid.dx,
        "dz": grid.dz,
        "xmin": xmin,
        "xmax": xmax,
        "zmin": zmin,
        "zmax": zmax,
    }


def _finish(fig, ax, path: Optional[Path], show: bool, close: bool):
    fig.tight_layout()

    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=200)

    if show:
        plt.show()

    if close:
        plt.close(fig)
        return None
    return fig, ax


# -----------------------------
# Plotting
# -----------------------------

def plot_grid(
    grid: Grid2D,
    *,
    title: str = "Grid with PML shaded",
    path: Optional[Path] = None,
    show: bool = True,
    close: bool = True,
):
    """
    Scatter the grid samples and shade the outer npml layers.

    Returns (fig, ax) if close=False, else None.
    """
    Z, X = grid.mesh()

    fig, ax = plt.subplots(figsize=(6, 5))
    ax.scatter(X.ravel(), Z.ravel(), s=4, c="k")

    npml = grid.npml
    if npml > 0 and 2 * npml < min(grid.nx, grid.nz):
        xmin, xmax = grid.x[0], grid.x[-1]
        zmin, zmax = grid.z[0], grid.z[-1]
        xL, xR = grid.x[npml], grid.x[-1 - npml]
        zT, zB = grid.z[npml], grid.z[-1 - npml]

        # shaded PML
        ax.axvspan(xmin, xL, alpha=0.15)
        ax.axvspan(xR, xmax, alpha=0.15)
        ax.axhspan(zmin, zT, alpha=0.15)
        ax.axhspan(zB, zmax, alpha=0.15)

        # interface lines
        for xv in (xL, xR):
            ax.axvline(xv, ls="--", lw=1)
        for zv in (zT, zB):
            ax.axhline(zv, ls="--", lw=1)

    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("z")
    ax.invert_yaxis()  # z grows downwards
    return _finish(fig, ax, path, show, close)


def plot_boundary_trace(
    grid: Grid2D,
    nlayer: int,
    attrib: str = "inner",
    *,
    title: str = "",
    cmap: str | None = "viridis",
    path: Optional[Path] = None,
    show: bool = True,
    close: bool = True,
):
    """
    Plot boundary-trace samples coloured by their position in the trace.

    Returns (fig, ax) if close=False, else None.
    """
    bz, bx, n = boundary_trace(grid, nlayer, attrib)

    fig, ax = plt.subplots(figsize=(6, 5))
    Z, X = grid.mesh()
    ax.scatter(X.ravel(), Z.ravel(), s=2, c="0.7")
    sc = ax.scatter(bx, bz, s=10, c=np.arange(n), cmap=cmap)
    fig.colorbar(sc, ax=ax, label="trace index")

    ax.set_title(title or f"{attrib} boundary, {nlayer} layer(s), {n} samples")
    ax.set_xlabel("x")
    ax.set_ylabel("z")
    ax.invert_yaxis()
    return _finish(fig, ax, path, show, close)
