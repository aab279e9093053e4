import numpy as np
import pytest
import pyvista

from obbkit.geometry import obb3
from obbkit.visualize.obb.show import show, to_polydata


def test_to_polydata_single_hexahedron():
    obb = obb3.make([1.0, 2.0, 3.0], [1.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, 0.5])
    grid = to_polydata(obb)
    assert grid.n_cells == 1
    assert grid.n_points == 8
    assert np.allclose(grid.points, obb3.corner_points(obb))
    assert grid.volume == pytest.approx(obb3.volume(obb))


def test_show_returns_plotter():
    rng = np.random.default_rng(0)
    boxes = np.array([obb3.from_random(rng) for _ in range(3)])
    plotter = show(boxes, return_plotter=True, off_screen=True)
    assert isinstance(plotter, pyvista.Plotter)
    plotter.close()
