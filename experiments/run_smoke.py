from __future__ import annotations

import logging
from pathlib import Path

from pmlgrid import BoundaryConfig, DomainConfig, fft_grid_from, lag_grid, pad_or_truncate
from pmlgrid.diagnostics import describe_grid, plot_boundary_trace, plot_grid


def main(outdir: Path = Path("out/smoke")) -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    domain = DomainConfig(xmin=0.0, xmax=1.0, zmin=0.0, zmax=0.5, dx=0.05, dz=0.05, npml=4)
    gphys = domain.build_grid()
    gext = domain.build_padded_grid()
    print("physical:", describe_grid(gphys))
    print("extended:", describe_grid(gext))
    print("restored:", describe_grid(pad_or_truncate(gext, -1)))

    bnd = BoundaryConfig(nlayer=3, attrib="inner")
    print("boundary samples:", bnd.count(gext))

    lags, (npos, nneg) = lag_grid(0.3, gphys.dx)
    print("lags:", lags.x, "counts:", npos, nneg)
    print("kx:", fft_grid_from(gphys.axis_x()).x)

    plot_grid(gext, path=outdir / "grid.png", show=False)
    plot_boundary_trace(gext, bnd.nlayer, bnd.attrib, path=outdir / "boundary.png", show=False)


if __name__ == "__main__":
    main()
