"""Snapshot-to-archive pipeline orchestration.

Runs discovery, axis extraction, aggregation and archive writing as one
sequential call.
"""

import logging
import time
from pathlib import Path
from typing import Optional

import numpy as np

from zipout.contracts import ConfigurationError, assert_axes, assert_time_axis
from zipout.pipeline.aggregator import VariableAggregator
from zipout.pipeline.writer import ArchiveWriter
from zipout.schemas import InternalConfig, ParamConfig, resolve_config
from zipout.snapshot.discovery import get_format_filenames
from zipout.snapshot.axes import get_spatial_dimensions, get_times
from zipout.snapshot.formats import resolve_format
from zipout.snapshot.reader import SnapshotReader

__all__ = ['ZipOrchestrator', 'make_ncfile', 'zip_output']

logger = logging.getLogger(__name__)


class ZipOrchestrator:
    """Aggregate a folder of snapshot files into one NetCDF archive.

    **Pipeline:**

    1. **Discover**: list files in the folder that end with the format tag
       and start with the prefix (lexicographic order).

    2. **Axes**: one time per file, then x and y from the first file in
       archive order.

    3. **Aggregate**: stack every grid-shaped variable along TIME; skip and
       warn on variables that do not fit the grid.

    4. **Write**: replace the archive with dimensions x, y, TIME, the
       coordinate variables and one variable per aggregated field.

    A folder with no matching files is not an error: an informational
    message is logged and nothing is written.

    **Ordering:** with aggregator.order "time", discovered files are
    re-ordered by their stored time value (stable for equal times) instead
    of by file name.

    Example usage::

        from zipout.schemas import ParamConfig, resolve_config
        from zipout.pipeline import ZipOrchestrator

        config = resolve_config(ParamConfig())
        orch = ZipOrchestrator(config)
        orch.run("jld2", "/data/run01", "/data/run01/outfile.nc", "outfile")
    """

    def __init__(self, config: InternalConfig, reader: SnapshotReader | None = None):
        self.config = config
        self.reader = reader or SnapshotReader()
        self.aggregator = VariableAggregator(config, reader=self.reader)
        self.writer = ArchiveWriter(config)

    def _setup_logging(self):
        """Configure root logging from config.

        Console handler always; file handler when config.logging.log_file
        is set. Existing root handlers are replaced.
        """
        log_level = getattr(logging, self.config.logging.level, logging.INFO)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        root = logging.getLogger()
        root.setLevel(log_level)
        for handler in root.handlers[:]:
            root.removeHandler(handler)

        ch = logging.StreamHandler()
        ch.setLevel(log_level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

        log_file = self.config.logging.log_file
        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_path)
            fh.setLevel(log_level)
            fh.setFormatter(formatter)
            root.addHandler(fh)

        logger.info("Logging: level=%s, file=%s", self.config.logging.level, log_file)

    def _order_by_time(self, filenames: list[str], t: np.ndarray):
        order = np.argsort(t, kind="stable")
        return [filenames[i] for i in order], t[order]

    def run(self, input_format, input_folder, output_path, prefix: str = "") -> Optional[Path]:
        """Zip the snapshot files in input_folder into the archive at output_path.

        Parameters
        ----------
        input_format : str or SnapshotFormat
            Snapshot format tag, also the file suffix to match ("mat", "jld2").
        input_folder : Path or str
            Folder holding the snapshot files.
        output_path : Path or str
            Archive file to create (replaced if it exists).
        prefix : str, optional
            File name prefix snapshot files must start with.

        Returns
        -------
        Path or None
            The archive path, or None if no files were found.

        Raises
        ------
        UnsupportedFormatError
            If input_format is not a supported format.
        MissingKeyError
            If a snapshot lacks x, y, t, or an accepted variable.
        ShapeMismatchError
            If an accepted variable changes shape in a later file.
        """
        fmt = resolve_format(input_format)
        filenames = get_format_filenames(fmt.value, input_folder, prefix)
        if not filenames:
            logger.info("attempted to zip the outputs to nc format, but did not find any "
                        "'%s' files with prefix '%s' in %s", fmt.value, prefix, input_folder)
            return None

        return self.run_from_filenames(filenames, fmt, output_path)

    def run_from_filenames(self, filenames, input_format, output_path) -> Path:
        """Zip an explicit, ordered list of snapshot files into output_path."""
        start = time.time()
        fmt = resolve_format(input_format)
        filenames = [str(f) for f in filenames]
        names = self.config.aggregator.coord_names
        logger.info("Zipping %d %s file(s) into %s", len(filenames), fmt.value, output_path)

        t = get_times(filenames, names.time, reader=self.reader)
        assert_time_axis(t, filenames)
        if self.config.aggregator.order == "time":
            filenames, t = self._order_by_time(filenames, t)

        # Grid of the file stored at TIME index 0
        x, y = get_spatial_dimensions(filenames[0], names.x, names.y, reader=self.reader)
        assert_axes(x, y)

        fields = self.aggregator.aggregate(filenames, fmt, len(x), len(y), len(t))

        attrs = self.config.archive
        path = self.writer.write(
            output_path, x, y, t,
            attrs.x_attrs.as_dict(), attrs.y_attrs.as_dict(), attrs.time_attrs.as_dict(),
            fields,
        )
        logger.info("Zip complete in %.1f seconds", time.time() - start)
        return path

    def archive_path(self) -> Path:
        """Archive location for zip_output(): <output_path>/<archive_name or prefix.nc>."""
        output = self.config.output
        if output.output_path is None:
            raise ConfigurationError("output.output_path is required to zip simulation output")
        name = output.archive_name or f"{output.prefix}.nc"
        return Path(output.output_path) / name

    def zip_output(self) -> Optional[Path]:
        """Zip the simulation output folder named by config, if zip_format is 'nc'."""
        output = self.config.output
        if output.zip_format != "nc":
            logger.debug("zip_format is '%s', not zipping output", output.zip_format)
            return None
        return self.run(output.output_format, output.output_path, self.archive_path(),
                        output.prefix)


def make_ncfile(format, folder, nc_name, prefix: str = "",
                config: InternalConfig | None = None) -> Optional[Path]:
    """Zip the files in folder with type format into nc_name (including path)."""
    if config is None:
        config = resolve_config(ParamConfig())
    return ZipOrchestrator(config).run(format, folder, nc_name, prefix)


def zip_output(config: InternalConfig) -> Optional[Path]:
    """Zip all output files of a simulation described by config."""
    return ZipOrchestrator(config).zip_output()
