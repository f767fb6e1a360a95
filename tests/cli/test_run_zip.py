import logging

import pytest

pytestmark = pytest.mark.unit

from zipout.cli.run_zip import load_user_config_dict, main, run_zip_output


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def write_config(path, body):
    path.write_text(body)
    return path


def test_load_user_config_dict(tmp_path):
    """CONFIG dict is read from a user config file."""
    cfg = write_config(tmp_path / "user_config.py", 'CONFIG = {"PREFIX": "run"}\n')
    assert load_user_config_dict(str(cfg)) == {"PREFIX": "run"}


def test_load_user_config_missing_file(tmp_path):
    """Missing config file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_user_config_dict(str(tmp_path / "nope.py"))


def test_load_user_config_without_config_dict(tmp_path):
    """Config file without a CONFIG dict is rejected."""
    cfg = write_config(tmp_path / "user_config.py", "SETTINGS = 1\n")
    with pytest.raises(ValueError, match="No CONFIG dict"):
        load_user_config_dict(str(cfg))


def test_run_zip_output_from_user_config(tmp_path, snapshot_series, snapshot_dir):
    """User config alone is enough to zip a run folder."""
    snapshot_series(nt=2, fmt="mat", prefix="run")
    cfg = write_config(tmp_path / "user_config.py",
                       f'CONFIG = {{"OUTPUT_PATH": "{snapshot_dir}", '
                       f'"OUTPUT_FORMAT": "mat", "PREFIX": "run"}}\n')

    result = run_zip_output(str(cfg))

    assert result == snapshot_dir / "run.nc"
    assert result.exists()


def test_cli_args_override_user_config(tmp_path, snapshot_series, snapshot_dir):
    """CLI arguments win over the user config file."""
    snapshot_series(nt=2)
    cfg = write_config(tmp_path / "user_config.py", 'CONFIG = {"PREFIX": "other"}\n')

    result = run_zip_output(str(cfg), {"output_path": str(snapshot_dir), "prefix": "outfile",
                                       "archive_name": "series.nc"})

    assert result == snapshot_dir / "series.nc"


def test_main_without_config_file(snapshot_series, snapshot_dir):
    """main() zips from flags only and returns 0."""
    snapshot_series(nt=2)

    code = main(["--output-path", str(snapshot_dir), "--format", "jld2",
                 "--prefix", "outfile", "--order", "time", "-v"])

    assert code == 0
    assert (snapshot_dir / "outfile.nc").exists()


def test_main_no_files_is_success(snapshot_dir):
    """An empty folder exits cleanly without writing."""
    code = main(["--output-path", str(snapshot_dir), "--prefix", "outfile"])

    assert code == 0
    assert list(snapshot_dir.iterdir()) == []


def test_main_rejects_unknown_format():
    """argparse rejects a format it has no reader for."""
    with pytest.raises(SystemExit):
        main(["--format", "csv"])
