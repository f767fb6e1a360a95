"""Stack per-file 2-D fields into (x, y, TIME) arrays.

The variables to aggregate are discovered from the first snapshot: every
key except the coordinate and time keys is a candidate. A candidate is
accepted only if its shape in the first snapshot equals the grid shape
(Nx, Ny); anything else is skipped with a warning and never appears in the
output. Accepted variables are copied slice by slice, file i into [:, :, i].
A variable named like an archive dimension (x, y, TIME) that is not a
coordinate key is skipped the same way.
"""

import logging
from typing import TYPE_CHECKING

import numpy as np

from zipout.contracts import ShapeMismatchError, assert_fields
from zipout.pipeline.writer import DIM_NAMES
from zipout.snapshot.reader import SnapshotReader, SnapshotSource

if TYPE_CHECKING:
    from zipout.schemas import InternalConfig

__all__ = ['VariableAggregator']

logger = logging.getLogger(__name__)


class VariableAggregator:
    """Assemble the time stacks of every grid-shaped snapshot variable.

    **Shape gate:** each candidate variable is checked against (Nx, Ny) in
    the first file only. A failing variable is dropped entirely (no partial
    or zero-filled entry) and one warning names it. Once a variable is
    accepted, a later file holding it with a different shape raises
    ShapeMismatchError; a later file missing it raises MissingKeyError.

    **Reads:** with read_strategy "reopen" (default) snapshot files are
    re-opened for every accepted variable, so at most one snapshot is held
    in memory at a time besides the output arrays. With "cache" each file
    is read once and kept for the whole aggregation.

    Examples
    --------
    >>> agg = VariableAggregator(config)
    >>> fields = agg.aggregate(paths, "jld2", nx=4, ny=5, nf=3)
    >>> fields["h"].shape
    (4, 5, 3)
    """

    def __init__(self, config: "InternalConfig", reader: SnapshotReader | None = None):
        self.config = config
        names = config.aggregator.coord_names
        self.coord_keys = (names.x, names.y, names.time)
        self.cache = config.aggregator.read_strategy == "cache"
        self.reader = reader or SnapshotReader()

    def candidate_names(self, source: SnapshotSource) -> list[str]:
        """Keys of the first snapshot, minus coordinate and time keys."""
        return [key for key in source[0].keys() if key not in self.coord_keys]

    def aggregate(self, paths, fmt, nx: int, ny: int, nf: int) -> dict[str, np.ndarray]:
        """Build one (nx, ny, nf) array per accepted variable.

        Parameters
        ----------
        paths : sequence of str
            Snapshot files in time order. Must hold nf entries.
        fmt : str or SnapshotFormat
            Format tag of every file.
        nx, ny, nf : int
            Grid size and number of files.

        Returns
        -------
        dict
            Accepted name -> array. Empty if no variable passes the gate.
        """
        source = SnapshotSource(paths, fmt, cache=self.cache, reader=self.reader)
        expected = (nx, ny)
        output = {}

        for key in self.candidate_names(source):
            if key in DIM_NAMES:
                logger.warning(
                    "found an output variable (%s) named like an archive dimension %s. "
                    "Skipping this variable from the nc output...", key, DIM_NAMES,
                )
                continue

            first = source[0]
            shape = first.shape_of(key)
            if shape != expected:
                logger.warning(
                    "found an output variable (%s) whose spatial dimensions %s do not "
                    "match the co-ordinates %s. Skipping this variable from the nc output...",
                    key, shape, expected,
                )
                continue

            dtype = np.asarray(first[key]).dtype
            var_out = np.empty((nx, ny, nf), dtype=dtype)
            for i in range(nf):
                value = first[key] if i == 0 else source[i][key]
                if np.shape(value) != expected:
                    raise ShapeMismatchError(key, np.shape(value), expected, source.paths[i])
                var_out[:, :, i] = value
            output[key] = var_out
            logger.debug("Aggregated %s: %s %s", key, var_out.shape, var_out.dtype)

        source.clear()
        assert_fields(output, nx, ny, nf)
        logger.info("Aggregated %d variable(s) over %d file(s) (%d snapshot reads)",
                    len(output), nf, source.reads)
        return output
