"""Axes stage contract.

Enforces the guarantee that after coordinate and time extraction, the axes
are 1-D, non-empty, and the time axis has one entry per input file.
"""

import numpy as np
from zipout.contracts.base import require


def assert_axes(x: np.ndarray, y: np.ndarray) -> None:
    """Enforce coordinate extraction contract.

    Parameters
    ----------
    x, y : np.ndarray
        Output of get_spatial_dimensions()

    Raises
    ------
    ContractViolation
        If either axis is not 1-D or is empty
    """
    for name, axis in (("x", x), ("y", y)):
        require(
            np.ndim(axis) == 1,
            f"Axes contract violated: '{name}' has {np.ndim(axis)} dims, expected 1"
        )
        require(
            len(axis) > 0,
            f"Axes contract violated: '{name}' is empty"
        )


def assert_time_axis(t: np.ndarray, paths) -> None:
    """Enforce time extraction contract: one time per input file."""
    require(
        np.ndim(t) == 1,
        f"Time contract violated: time axis has {np.ndim(t)} dims, expected 1"
    )
    require(
        len(t) == len(paths),
        f"Time contract violated: got {len(t)} times for {len(paths)} files"
    )
