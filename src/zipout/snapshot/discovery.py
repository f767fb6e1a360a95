"""Find snapshot files in a simulation output folder."""

from pathlib import Path
import logging
import os

__all__ = ['get_format_filenames']

logger = logging.getLogger(__name__)


def get_format_filenames(format: str, folder: Path | str, prefix: str = "") -> list[str]:
    """Return paths of files in folder whose name ends with format and starts with prefix.

    Names are returned in lexicographic order, joined onto folder. Only
    regular files are considered. No match is not an error: the result is
    an empty list.

    Parameters
    ----------
    format : str
        Suffix the file name must end with, e.g. "jld2".
    folder : Path or str
        Directory to list.
    prefix : str, optional
        Prefix the file name must start with.

    Raises
    ------
    FileNotFoundError
        If folder does not exist.
    """
    folder = Path(folder)
    names = sorted(entry.name for entry in os.scandir(folder) if entry.is_file())
    matches = [str(folder / name) for name in names
               if name.endswith(format) and name.startswith(prefix)]
    logger.debug("Found %d '%s' files with prefix '%s' in %s",
                 len(matches), format, prefix, folder)
    return matches
