"""Read snapshot files into name -> value mappings.

Each supported format has one reader function, registered in READERS by
SnapshotFormat. Readers open the file, decode every top-level variable,
and close the file before returning. Values are either scalars or numpy
arrays; which one is decided here, at read time. MATLAB has no true
scalars, so MAT scalars stay 1x1 arrays; code that needs a number calls
.item() on the value.

- mat: MATLAB files via scipy.io.loadmat. Version 7.3 files are HDF5
  containers that loadmat refuses; those go through the HDF5 path.
- jld2: Julia JLD2 files, which are HDF5 containers, via h5py.

Both MATLAB and Julia store arrays column-major, so HDF5 datasets are
transposed on read to recover the shape the simulation wrote.
"""

from collections.abc import Mapping
from pathlib import Path
import logging

import h5py
import numpy as np
import scipy.io

from zipout.contracts.failure import MissingKeyError
from zipout.snapshot.formats import SnapshotFormat, resolve_format

__all__ = ['Snapshot', 'SnapshotReader', 'SnapshotSource', 'read_snapshot', 'READERS']

logger = logging.getLogger(__name__)


class Snapshot(Mapping):
    """Decoded content of one snapshot file.

    A read-only mapping from variable name to value. Looking up a name the
    file does not hold raises MissingKeyError (a KeyError) naming the file.
    """

    def __init__(self, path, values: dict):
        self.path = str(path)
        self._values = dict(values)

    def __getitem__(self, key):
        try:
            return self._values[key]
        except KeyError:
            raise MissingKeyError(key, self.path) from None

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def shape_of(self, key) -> tuple:
        """Shape of a variable; () for scalars."""
        return np.shape(self[key])

    def __repr__(self):
        return f"Snapshot({self.path!r}, keys={list(self._values)})"


def _read_hdf5(path: str) -> dict:
    """Read top-level datasets of an HDF5 container, column-major shapes."""
    values = {}
    with h5py.File(path, "r") as fh:
        for name, obj in fh.items():
            # Groups hold type tables (JLD2 "_types") or references (MATLAB "#refs#")
            if not isinstance(obj, h5py.Dataset):
                continue
            data = obj[()]
            if isinstance(data, np.ndarray) and data.ndim >= 2:
                data = data.T
            values[name] = data
    return values


def read_mat(path: str) -> dict:
    """Read a MATLAB .mat snapshot."""
    try:
        raw = scipy.io.loadmat(path)
    except NotImplementedError:
        logger.debug("%s is a v7.3 MAT file, reading as HDF5", path)
        raw = _read_hdf5(path)
    return {k: v for k, v in raw.items() if not k.startswith("__")}


def read_jld2(path: str) -> dict:
    """Read a Julia .jld2 snapshot."""
    return _read_hdf5(path)


READERS = {
    SnapshotFormat.MAT: read_mat,
    SnapshotFormat.JLD2: read_jld2,
}


class SnapshotReader:
    """Dispatch snapshot reads to the reader registered for a format.

    Parameters
    ----------
    readers : dict, optional
        SnapshotFormat -> callable(path) -> dict. Defaults to READERS.

    Examples
    --------
    >>> reader = SnapshotReader()
    >>> snap = reader.read("outfile0001.jld2", "jld2")
    >>> snap["t"]
    0.5
    """

    def __init__(self, readers: dict | None = None):
        self.readers = dict(READERS if readers is None else readers)

    def read(self, path: Path | str, fmt) -> Snapshot:
        """Read the snapshot at path using the reader for fmt.

        Raises
        ------
        UnsupportedFormatError
            If fmt is not a supported format tag.
        OSError
            If the file cannot be opened or decoded.
        """
        fmt = resolve_format(fmt)
        read = self.readers[fmt]
        logger.debug("Reading %s snapshot: %s", fmt.value, path)
        return Snapshot(path, read(str(path)))


def read_snapshot(path: Path | str, fmt) -> Snapshot:
    """Read one snapshot with the default readers."""
    return SnapshotReader().read(path, fmt)


class SnapshotSource:
    """Indexed access to the snapshots of an ordered list of files.

    By default every access re-opens and re-reads the file, so memory stays
    bounded by one snapshot. With cache=True each file is read once and kept,
    trading memory for I/O.
    """

    def __init__(self, paths, fmt, cache: bool = False, reader: SnapshotReader | None = None):
        self.paths = [str(p) for p in paths]
        self.fmt = resolve_format(fmt)
        self.cache = cache
        self.reader = reader or SnapshotReader()
        self._cached = {}
        self.reads = 0

    def __len__(self):
        return len(self.paths)

    def __getitem__(self, index: int) -> Snapshot:
        if self.cache and index in self._cached:
            return self._cached[index]
        snapshot = self.reader.read(self.paths[index], self.fmt)
        self.reads += 1
        if self.cache:
            self._cached[index] = snapshot
        return snapshot

    def clear(self):
        """Drop cached snapshots."""
        self._cached.clear()
