import pytest
import xarray as xr


@pytest.fixture
def open_archive():
    """Open a written archive fully into memory (file handle released)."""
    def _open(path):
        with xr.open_dataset(path, decode_times=False) as ds:
            return ds.load()

    return _open
