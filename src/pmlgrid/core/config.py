from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgumentError
from .grid import Grid2D


@dataclass(frozen=True)
class DomainConfig:
    """
    Rectangular simulation domain.

    Give either the sample counts (nx, nz) or the spacings (dx, dz), not both.
    npml is the number of PML layers added around the domain by
    build_padded_grid().
    """
    xmin: float
    xmax: float
    zmin: float
    zmax: float
    nx: Optional[int] = None
    nz: Optional[int] = None
    dx: Optional[float] = None
    dz: Optional[float] = None
    npml: int = 0

    def __post_init__(self) -> None:
        by_count = self.nx is not None or self.nz is not None
        by_spacing = self.dx is not None or self.dz is not None
        if by_count == by_spacing:
            raise InvalidArgumentError("DomainConfig needs either (nx, nz) or (dx, dz).")
        if by_count and (self.nx is None or self.nz is None):
            raise InvalidArgumentError("DomainConfig needs both nx and nz.")
        if by_spacing and (self.dx is None or self.dz is None):
            raise InvalidArgumentError("DomainConfig needs both dx and dz.")
        if int(self.npml) < 0:
            raise InvalidArgumentError("npml must be >= 0")

    @property
    def by_count(self) -> bool:
        return self.nx is not None

    def build_grid(self) -> Grid2D:
        """Physical grid (no PML collar)."""
        if self.by_count:
            return Grid2D.from_count(
                self.xmin, self.xmax, self.zmin, self.zmax,
                int(self.nx), int(self.nz), int(self.npml),
            )
        return Grid2D.from_spacing(
            self.xmin, self.xmax, self.zmin, self.zmax,
            float(self.dx), float(self.dz), int(self.npml),
        )

    def build_padded_grid(self) -> Grid2D:
        """Physical grid extended by npml layers on every side."""
        from pmlgrid.operators.pml import pad_or_truncate

        return pad_or_truncate(self.build_grid(), 1)


@dataclass(frozen=True)
class BoundaryConfig:
    nlayer: int = 1
    attrib: str = "inner"   # "inner" | "outer"

    def __post_init__(self) -> None:
        if int(self.nlayer) < 1:
            raise InvalidArgumentError("nlayer must be >= 1")
        if self.attrib not in ("inner", "outer"):
            raise InvalidArgumentError(f"attrib must be 'inner' or 'outer', got {self.attrib!r}.")

    def trace(self, grid: Grid2D):
        from pmlgrid.operators.boundary import boundary_trace

        return boundary_trace(grid, int(self.nlayer), self.attrib)

    def count(self, grid: Grid2D) -> int:
        from pmlgrid.operators.boundary import boundary_trace

        return boundary_trace(grid, int(self.nlayer), self.attrib, only_count=True)
