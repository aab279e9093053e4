import numpy
import pyvista
from tqdm import trange

from obbkit.geometry.obb3 import as_obb, corner_points


def to_polydata(obb):
    """
    Convert an OBB into a single-cell hexahedral PyVista mesh.

    The corners come from :func:`obbkit.geometry.obb3.corner_points`, whose
    ordering (one face quad followed by the opposite face quad) is the VTK
    hexahedron ordering.

    Parameters
    ----------
    obb : numpy.ndarray
        A (12,) box.

    Returns
    -------
    pyvista.UnstructuredGrid
    """
    points = numpy.asarray(corner_points(obb), dtype=float)
    cells = numpy.hstack([[8], numpy.arange(8)])
    celltypes = numpy.array([pyvista.CellType.HEXAHEDRON], dtype=numpy.uint8)
    return pyvista.UnstructuredGrid(cells, celltypes, points)


def show(obbs, color='red', opacity=0.5, return_plotter=False, **kwargs):
    """
    Visualize a collection of oriented bounding boxes using PyVista.

    Parameters
    ----------
    obbs : array-like
        A single (12,) box or an (N, 12) array of boxes.

    color : str, optional
        The color of the boxes in the visualization. Default is 'red'.

    opacity : float, optional
        Opacity of the box surfaces. Default is 0.5.

    return_plotter : bool, optional
        If True, the PyVista `Plotter` object is returned instead of displaying the plot immediately.
        Default is False.

    **kwargs : dict, optional
        Additional keyword arguments passed to the PyVista `Plotter` initializer.

    Returns
    -------
    plotter : pyvista.Plotter, optional
        If `return_plotter` is True, the PyVista `Plotter` object is returned.

    Examples
    --------

    .. code-block:: python

        >>> import numpy as np
        >>> from obbkit.geometry import obb3
        >>> from obbkit.visualize.obb.show import show
        >>> rng = np.random.default_rng(0)
        >>> boxes = np.array([obb3.from_random(rng) for _ in range(5)])
        >>> show(boxes)

    """
    obbs = numpy.asarray(obbs)
    if obbs.ndim == 1:
        obbs = obbs.reshape(1, -1)
    plotter = pyvista.Plotter(**kwargs)
    for i in trange(obbs.shape[0], desc='Building plot', unit='box', leave=False):
        plotter.add_mesh(to_polydata(as_obb(obbs[i, :])), color=color, opacity=opacity, show_edges=True)
    if return_plotter:
        return plotter
    plotter.show()
