import numpy as np
import pytest

from pmlgrid import (
    Grid1D,
    GridConstructionError,
    InvalidArgumentError,
    fft_grid,
    fft_grid_from,
    rfft_grid,
    rfft_grid_from,
)


def test_rfft_grid_even():
    g = rfft_grid(8, 1.0)
    np.testing.assert_array_equal(g.x, [0, 1, 2, 3, 4])
    assert g.nx == 5 and g.dx == 1.0


def test_fft_grid_even_keeps_nyquist_positive():
    g = fft_grid(8, 1.0)
    np.testing.assert_array_equal(g.x, [0, 1, 2, 3, 4, -3, -2, -1])


def test_fft_grid_odd_is_symmetric():
    g = fft_grid(7, 1.0)
    np.testing.assert_array_equal(g.x, [0, 1, 2, 3, -3, -2, -1])


@pytest.mark.parametrize("nx", [1, 2, 5, 16, 33, 100])
def test_against_numpy_fft(nx):
    delta = 0.37
    d = 1.0 / (nx * delta)
    np.testing.assert_allclose(rfft_grid(nx, delta).x, np.fft.rfftfreq(nx, d))

    f = fft_grid(nx, delta).x
    ref = np.fft.fftfreq(nx, d)
    if nx % 2 == 0:
        # numpy puts the Nyquist bin on the negative side
        ref[nx // 2] = -ref[nx // 2]
    np.testing.assert_allclose(f, ref)


def test_grid_wrappers():
    t = Grid1D.from_count(0.0, 0.7, 8)
    assert np.isclose(t.dx, 0.1)

    f = fft_grid_from(t)
    assert f.nx == 8
    assert f.dx == 1.0 / (t.nx * t.dx)
    assert f == fft_grid(8, 1.0 / (8 * t.dx))

    r = rfft_grid_from(t)
    assert r.nx == 5
    np.testing.assert_allclose(r.x, np.fft.rfftfreq(8, t.dx))


def test_spectral_errors():
    with pytest.raises(InvalidArgumentError):
        fft_grid(0, 1.0)
    with pytest.raises(InvalidArgumentError):
        rfft_grid(2.5, 1.0)


@pytest.mark.parametrize("nx", [float("nan"), float("inf"), None, "8"])
def test_non_integer_sizes_are_invalid_arguments(nx):
    with pytest.raises(InvalidArgumentError):
        fft_grid(nx, 1.0)
    with pytest.raises(InvalidArgumentError):
        rfft_grid(nx, 1.0)


def test_negative_delta_and_zero_spacing():
    with pytest.raises(GridConstructionError):
        fft_grid(4, -1.0)
    with pytest.raises(InvalidArgumentError):
        fft_grid_from(Grid1D.from_count(1.0, 1.0, 1))
