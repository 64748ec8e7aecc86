import numpy as np
import pytest

from pmlgrid import (
    BoundaryTrace,
    Grid2D,
    InvalidArgumentError,
    boundary_count,
    boundary_trace,
)


def _unit_grid(nx, nz, npml=0):
    # x = 0..nx-1, z = 0..nz-1
    return Grid2D.from_count(0.0, nx - 1.0, 0.0, nz - 1.0, nx, nz, npml)


def test_single_ring_order():
    bz, bx, n = boundary_trace(_unit_grid(3, 4), 1, "inner")
    np.testing.assert_array_equal(bx, [0, 1, 2, 2, 2, 2, 1, 0, 0, 0])
    np.testing.assert_array_equal(bz, [0, 0, 0, 1, 2, 3, 3, 3, 2, 1])
    assert n == 10


def test_trace_is_named_tuple():
    tr = boundary_trace(_unit_grid(3, 4), 1, "inner")
    assert isinstance(tr, BoundaryTrace)
    assert tr.count == tr.z.size == tr.x.size


def test_two_rings_order():
    bz, bx, n = boundary_trace(_unit_grid(4, 4), 2, "inner")
    assert n == 12 + 4
    np.testing.assert_array_equal(bx[12:], [1, 2, 2, 1])
    np.testing.assert_array_equal(bz[12:], [1, 1, 2, 2])


def test_second_ring_starts_inset():
    g = _unit_grid(5, 6)
    bz, bx, n = boundary_trace(g, 2, "inner")
    first = 2 * 5 + 2 * 6 - 4
    assert n == first + first - 8
    assert (bx[first], bz[first]) == (g.x[1], g.z[1])


@pytest.mark.parametrize("nx,nz", [(2, 2), (5, 3), (10, 7), (31, 21)])
def test_single_ring_count(nx, nz):
    g = _unit_grid(nx, nz)
    assert boundary_trace(g, 1, "inner", only_count=True) == 2 * nx + 2 * nz - 4
    assert boundary_trace(g, 1, "inner").count == 2 * nx + 2 * nz - 4


@pytest.mark.parametrize("nlayer", [1, 2, 3])
def test_count_matches_trace(nlayer):
    g = _unit_grid(9, 8)
    for attrib in ("inner", "outer"):
        assert boundary_count(g, nlayer, attrib) == boundary_trace(g, nlayer, attrib).count


def test_at_most_three_rings():
    g = _unit_grid(10, 10)
    t3 = boundary_trace(g, 3, "inner")
    t5 = boundary_trace(g, 5, "inner")
    assert t3.count == t5.count == 36 + 28 + 20
    np.testing.assert_array_equal(t3.x, t5.x)
    np.testing.assert_array_equal(t3.z, t5.z)


def test_rings_do_not_repeat_samples():
    bz, bx, n = boundary_trace(_unit_grid(7, 9), 3, "inner")
    assert len(set(zip(bz.tolist(), bx.tolist()))) == n


def test_outer_appends_after_last_sample():
    g = _unit_grid(3, 4)
    bz, bx, n = boundary_trace(g, 1, "outer")
    # axes x = 0..3, z = 0..4
    assert n == 2 * 4 + 2 * 5 - 4 == 14
    assert (bx[0], bz[0]) == (0.0, 0.0)
    assert bx.min() == 0.0 and bz.min() == 0.0
    assert bx.max() == 3.0 and bz.max() == 4.0
    np.testing.assert_array_equal(bx, [0, 1, 2, 3, 3, 3, 3, 3, 2, 1, 0, 0, 0, 0])
    np.testing.assert_array_equal(bz, [0, 0, 0, 0, 1, 2, 3, 4, 4, 4, 4, 3, 2, 1])
    assert boundary_trace(g, 1, "outer", only_count=True) == 14


def test_outer_two_layers():
    g = _unit_grid(3, 3)
    bz, bx, n = boundary_trace(g, 2, "outer")
    # axes 0..4 => rings of 5x5 and 3x3
    assert n == 16 + 8
    assert bx.min() == 0.0 and bx.max() == 4.0
    inner_ring = set(zip(bz[16:].tolist(), bx[16:].tolist()))
    assert (1.0, 1.0) in inner_ring and (3.0, 3.0) in inner_ring
    assert boundary_count(g, 2, "outer") == 24


def test_single_column_grid():
    g = Grid2D.from_count(0.0, 0.0, 0.0, 3.0, 1, 4, 0)
    assert boundary_trace(g, 1, "inner", only_count=True) == 2 * 1 + 2 * 4 - 4
    bz, bx, n = boundary_trace(g, 1, "inner")
    assert n == 6
    np.testing.assert_array_equal(bx, np.zeros(6))
    np.testing.assert_array_equal(bz, [0, 1, 2, 3, 2, 1])


def test_single_row_grid_is_rejected():
    g = Grid2D.from_count(0.0, 3.0, 0.0, 0.0, 4, 1, 0)
    with pytest.raises(InvalidArgumentError):
        boundary_trace(g, 1, "inner")
    with pytest.raises(InvalidArgumentError):
        boundary_trace(g, 1, "inner", only_count=True)


def test_invalid_arguments():
    g = _unit_grid(5, 5)
    with pytest.raises(InvalidArgumentError):
        boundary_trace(g, 1, "middle")
    with pytest.raises(InvalidArgumentError):
        boundary_trace(g, 1, "middle", only_count=True)
    with pytest.raises(InvalidArgumentError):
        boundary_trace(g, 0, "inner")


def test_grid_too_small_for_rings():
    g = _unit_grid(3, 3)
    with pytest.raises(InvalidArgumentError):
        boundary_trace(g, 2, "inner")
    with pytest.raises(InvalidArgumentError):
        boundary_trace(g, 2, "inner", only_count=True)
