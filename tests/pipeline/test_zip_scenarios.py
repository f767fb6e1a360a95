"""End-to-end behavior of zipping a snapshot series into an archive."""

import logging

import numpy as np
import pytest

pytestmark = [pytest.mark.pipeline, pytest.mark.integration]

from zipout.pipeline.orchestrator import ZipOrchestrator
from zipout.snapshot.reader import read_snapshot
from tests.helpers.fake_snapshots import make_grid, write_jld2_snapshot


@pytest.mark.parametrize("fmt", ["jld2", "mat"])
def test_three_files_h_and_junk(internal_config, snapshot_series, snapshot_dir,
                                open_archive, caplog, fmt):
    """Three 4x5 files give a 4x5x3 h and no junk."""
    paths = snapshot_series(fmt=fmt, nt=3, shape=(4, 5))
    out = snapshot_dir / "outfile.nc"

    with caplog.at_level(logging.WARNING):
        ZipOrchestrator(internal_config).run(fmt, snapshot_dir, out, "outfile")

    ds = open_archive(out)
    assert dict(ds.sizes) == {"x": 4, "y": 5, "TIME": 3}
    assert ds["h"].dims == ("x", "y", "TIME")
    assert ds["h"].shape == (4, 5, 3)
    assert "junk" not in ds.variables

    junk_warnings = [r for r in caplog.records
                     if r.levelno == logging.WARNING and "junk" in r.getMessage()]
    assert len(junk_warnings) == 1

    for i, path in enumerate(paths):
        np.testing.assert_array_equal(ds["h"].values[:, :, i], read_snapshot(path, fmt)["h"])


def test_time_axis_matches_files_in_order(internal_config, snapshot_series, snapshot_dir,
                                          open_archive):
    """TIME holds each file's t in order."""
    snapshot_series(nt=4, times=[0.0, 0.25, 0.5, 10.0])
    out = snapshot_dir / "outfile.nc"

    ZipOrchestrator(internal_config).run("jld2", snapshot_dir, out, "outfile")

    np.testing.assert_array_equal(open_archive(out)["TIME"].values, [0.0, 0.25, 0.5, 10.0])


def test_coordinates_come_from_first_file_only(internal_config, snapshot_series, snapshot_dir,
                                               open_archive):
    """x and y come from the first file only."""
    paths = snapshot_series(nt=2, shape=(3, 2))
    # Last file has a shifted grid of the same size
    x, y = make_grid(3, 2, dx=7.0, dy=9.0)
    write_jld2_snapshot(snapshot_dir / "outfile_z.jld2",
                        {"x": x, "y": y, "t": 5.0, "h": np.ones((3, 2))})
    out = snapshot_dir / "outfile.nc"

    ZipOrchestrator(internal_config).run("jld2", snapshot_dir, out, "outfile")

    ds = open_archive(out)
    assert ds.sizes["TIME"] == 3
    first = read_snapshot(paths[0], "jld2")
    np.testing.assert_array_equal(ds["x"].values, first["x"][:, 0])
    np.testing.assert_array_equal(ds["y"].values, first["y"][0, :])
    assert ds["x"].attrs == {"longname": "x co-ordinates of ice grid points (h grid)",
                             "units": "m"}
    assert ds["TIME"].attrs["units"] == "years"


def test_rerun_is_idempotent(internal_config, snapshot_series, snapshot_dir, open_archive):
    """Zipping twice gives the same archive."""
    snapshot_series(nt=3)
    out = snapshot_dir / "outfile.nc"
    orch = ZipOrchestrator(internal_config)

    orch.run("jld2", snapshot_dir, out, "outfile")
    first = open_archive(out)
    orch.run("jld2", snapshot_dir, out, "outfile")
    second = open_archive(out)

    assert first.identical(second)
    assert first["h"].values.tobytes() == second["h"].values.tobytes()


def test_cache_and_reopen_give_same_archive(make_config, snapshot_series, snapshot_dir,
                                            open_archive):
    """Both read strategies give identical archives."""
    snapshot_series(nt=3)
    reopen_out = snapshot_dir / "reopen.nc"
    cache_out = snapshot_dir / "cache.nc"

    ZipOrchestrator(make_config(read_strategy="reopen")).run(
        "jld2", snapshot_dir, reopen_out, "outfile")
    ZipOrchestrator(make_config(read_strategy="cache")).run(
        "jld2", snapshot_dir, cache_out, "outfile")

    assert open_archive(reopen_out).identical(open_archive(cache_out))


def test_only_non_grid_fields_gives_coordinate_only_archive(internal_config, snapshot_series,
                                                            snapshot_dir, open_archive):
    """No grid-shaped fields gives a coordinate-only archive."""
    snapshot_series(nt=2, fields={"junk": lambda i: np.zeros((3, 3))})
    out = snapshot_dir / "outfile.nc"

    ZipOrchestrator(internal_config).run("jld2", snapshot_dir, out, "outfile")

    ds = open_archive(out)
    assert list(ds.data_vars) == []
    assert ds.sizes["TIME"] == 2


@pytest.mark.parametrize("fmt", ["jld2", "mat"])
def test_single_cell_grid(internal_config, snapshot_series, snapshot_dir, open_archive, fmt):
    """A 1x1 grid zips the same way in both formats."""
    snapshot_series(fmt=fmt, nt=2, shape=(1, 1),
                    fields={"h": lambda i: np.full((1, 1), float(i))})
    out = snapshot_dir / "outfile.nc"

    ZipOrchestrator(internal_config).run(fmt, snapshot_dir, out, "outfile")

    ds = open_archive(out)
    assert dict(ds.sizes) == {"x": 1, "y": 1, "TIME": 2}
    np.testing.assert_array_equal(ds["h"].values[0, 0, :], [0.0, 1.0])
    np.testing.assert_array_equal(ds["TIME"].values, [0.5, 1.0])


def test_field_named_time_does_not_break_archive(internal_config, snapshot_series,
                                                 snapshot_dir, open_archive):
    """A snapshot variable called TIME is skipped and the archive is still written."""
    snapshot_series(nt=2, fields={
        "TIME": lambda i: np.full((4, 5), 99.0),
        "h": lambda i: np.ones((4, 5)),
    })
    out = snapshot_dir / "outfile.nc"

    ZipOrchestrator(internal_config).run("jld2", snapshot_dir, out, "outfile")

    ds = open_archive(out)
    assert list(ds.data_vars) == ["h"]
    np.testing.assert_array_equal(ds["TIME"].values, [0.5, 1.0])
