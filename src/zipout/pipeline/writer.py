"""Write aggregated fields to a NetCDF archive.

The archive has three dimensions, x (Nx), y (Ny) and TIME (Nf), one
coordinate variable per dimension carrying longname/units attributes, and
one (x, y, TIME) variable per aggregated field with the field's own dtype.
The file is written through xarray's netcdf4 engine.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import xarray as xr

from zipout.contracts import ConfigurationError

if TYPE_CHECKING:
    from zipout.schemas import InternalConfig

__all__ = ['ArchiveWriter', 'DIM_NAMES']

logger = logging.getLogger(__name__)

DIM_NAMES = ("x", "y", "TIME")


class ArchiveWriter:
    """Create a fresh NetCDF archive from axes, attributes and fields.

    Any file already at the output path is deleted before writing; there is
    no incremental update. If writing fails, the partially written file is
    removed before the error propagates.

    Examples
    --------
    >>> writer = ArchiveWriter(config)
    >>> writer.write("run01/outfile.nc", x, y, t,
    ...              {"longname": "x", "units": "m"},
    ...              {"longname": "y", "units": "m"},
    ...              {"longname": "Time", "units": "years"},
    ...              {"h": h_stack})
    """

    def __init__(self, config: "InternalConfig"):
        self.config = config
        self.compression = config.archive.compression
        self.complevel = config.archive.complevel

    def build_dataset(self, x, y, t, x_attrs: dict, y_attrs: dict, t_attrs: dict,
                      fields: dict) -> xr.Dataset:
        """Assemble the archive contents as an xarray.Dataset.

        Raises
        ------
        ConfigurationError
            If a field is named like an archive dimension.
        """
        clash = sorted(set(fields) & set(DIM_NAMES))
        if clash:
            raise ConfigurationError(
                f"Field name(s) {clash} clash with archive dimensions {DIM_NAMES}"
            )
        coords = {
            "x": ("x", np.asarray(x, dtype=np.float64), dict(x_attrs)),
            "y": ("y", np.asarray(y, dtype=np.float64), dict(y_attrs)),
            "TIME": ("TIME", np.asarray(t, dtype=np.float64), dict(t_attrs)),
        }
        data_vars = {name: (DIM_NAMES, data) for name, data in fields.items()}
        return xr.Dataset(data_vars=data_vars, coords=coords)

    def _encoding(self, ds: xr.Dataset) -> dict:
        # No _FillValue on coordinates: every coordinate entry is defined
        encoding = {name: {"_FillValue": None} for name in DIM_NAMES}
        if self.compression == "zlib":
            for var in ds.data_vars:
                encoding[var] = {"zlib": True, "complevel": self.complevel}
        return encoding

    def write(self, output_path: Path | str, x, y, t, x_attrs: dict, y_attrs: dict,
              t_attrs: dict, fields: dict) -> Path:
        """Write the archive to output_path, replacing any existing file.

        Returns
        -------
        Path
            The written archive.

        Raises
        ------
        ConfigurationError
            If a field clashes with a dimension name; nothing is deleted.
        OSError
            If the file cannot be removed or written.
        """
        output_path = Path(output_path)
        ds = self.build_dataset(x, y, t, x_attrs, y_attrs, t_attrs, fields)
        if output_path.exists():
            logger.info("Removing existing archive: %s", output_path)
            output_path.unlink()

        try:
            ds.to_netcdf(output_path, mode="w", engine="netcdf4", format="NETCDF4",
                         encoding=self._encoding(ds), compute=True)
        except Exception:
            logger.error("Failed to write archive %s", output_path)
            output_path.unlink(missing_ok=True)
            raise
        finally:
            ds.close()

        logger.info("Saved archive: %s [x=%d, y=%d, TIME=%d, %d variable(s)]",
                    output_path.name, len(x), len(y), len(t), len(fields))
        return output_path
