"""Snapshot input modules.

- formats: Format tags and extension resolution
- reader: Per-format snapshot readers
- discovery: Snapshot file listing
- axes: Coordinate and time axes
"""

from zipout.snapshot.formats import SnapshotFormat, return_extension, resolve_format
from zipout.snapshot.reader import Snapshot, SnapshotReader, SnapshotSource, read_snapshot
from zipout.snapshot.discovery import get_format_filenames
from zipout.snapshot.axes import get_spatial_dimensions, get_times

__all__ = [
    "SnapshotFormat",
    "return_extension",
    "resolve_format",
    "Snapshot",
    "SnapshotReader",
    "SnapshotSource",
    "read_snapshot",
    "get_format_filenames",
    "get_spatial_dimensions",
    "get_times",
]
