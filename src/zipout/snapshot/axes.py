"""Coordinate and time axes of a snapshot series.

The x and y axes come from the first snapshot only: the stored 2-D grids
are collapsed to 1-D by taking the first column of x and the first row of
y. The grid is assumed rectilinear; that is not checked.
"""

import logging

import numpy as np

from zipout.snapshot.formats import return_extension
from zipout.snapshot.reader import SnapshotReader

__all__ = ['get_spatial_dimensions', 'get_times']

logger = logging.getLogger(__name__)


def _collapse(grid, axis: int) -> np.ndarray:
    grid = np.asarray(grid, dtype=np.float64)
    if grid.ndim == 2:
        return grid[:, 0] if axis == 0 else grid[0, :]
    # Already a 1-D axis (or malformed; assert_axes catches that)
    return grid


def get_spatial_dimensions(fname, x_key: str = "x", y_key: str = "y",
                           reader: SnapshotReader | None = None):
    """Return one-dimensional x and y axes from the snapshot at fname.

    Returns
    -------
    x, y : np.ndarray
        x[:, 0] and y[0, :] of the stored grids, as float64.

    Raises
    ------
    MissingKeyError
        If the snapshot has no x or y variable.
    """
    reader = reader or SnapshotReader()
    snapshot = reader.read(fname, return_extension(fname))
    x = _collapse(snapshot[x_key], axis=0)
    y = _collapse(snapshot[y_key], axis=1)
    logger.debug("Grid from %s: Nx=%d, Ny=%d", fname, x.size, y.size)
    return x, y


def get_times(filenames, time_key: str = "t",
              reader: SnapshotReader | None = None) -> np.ndarray:
    """Return the time stored in each file, in the order given.

    Raises
    ------
    MissingKeyError
        If any snapshot has no time variable.
    """
    reader = reader or SnapshotReader()
    t = np.zeros(len(filenames))
    for i, fname in enumerate(filenames):
        snapshot = reader.read(fname, return_extension(fname))
        t[i] = np.asarray(snapshot[time_key]).item()
    return t
