"""Snapshot format tags.

A format tag is the file suffix of a snapshot ("mat", "jld2"). Tags are
resolved to a SnapshotFormat variant before any reader is chosen, so an
unknown tag fails here rather than deep inside a reader.
"""

from enum import Enum
from pathlib import Path

from zipout.contracts.failure import UnsupportedFormatError

__all__ = ['SnapshotFormat', 'return_extension', 'resolve_format']


class SnapshotFormat(str, Enum):
    """Supported snapshot serialization formats."""
    MAT = "mat"
    JLD2 = "jld2"


def return_extension(path: Path | str) -> str:
    """Return the substring after the last '.' of path.

    A path without any '.' yields an empty string; callers decide whether
    that is an error.

    Examples
    --------
    >>> return_extension("/run/outfile0001.jld2")
    'jld2'
    >>> return_extension("noext")
    ''
    """
    path = str(path)
    idx = path.rfind(".")
    if idx < 0:
        return ""
    return path[idx + 1:]


def resolve_format(tag) -> SnapshotFormat:
    """Map a format tag (or SnapshotFormat) to its SnapshotFormat variant.

    Raises
    ------
    UnsupportedFormatError
        If the tag names no supported format.
    """
    if isinstance(tag, SnapshotFormat):
        return tag
    try:
        return SnapshotFormat(str(tag).lower())
    except ValueError:
        raise UnsupportedFormatError(tag, [f.value for f in SnapshotFormat]) from None
