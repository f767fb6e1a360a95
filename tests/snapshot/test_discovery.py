import pytest

pytestmark = pytest.mark.unit

from zipout.snapshot.discovery import get_format_filenames


def touch(folder, *names):
    for name in names:
        (folder / name).write_bytes(b"")


def test_filters_by_suffix_and_prefix(tmp_path):
    """Only files with the suffix and prefix are returned."""
    touch(tmp_path, "outfile0002.jld2", "outfile0001.jld2", "outfile0001.mat",
          "other0001.jld2", "outfile.log")

    found = get_format_filenames("jld2", tmp_path, "outfile")

    assert found == [str(tmp_path / "outfile0001.jld2"), str(tmp_path / "outfile0002.jld2")]


def test_empty_prefix_matches_all(tmp_path):
    """Empty prefix matches every file with the suffix."""
    touch(tmp_path, "b.mat", "a.mat", "c.jld2")

    found = get_format_filenames("mat", tmp_path)

    assert found == [str(tmp_path / "a.mat"), str(tmp_path / "b.mat")]


def test_order_is_lexicographic_not_numeric(tmp_path):
    """Names sort as strings, not as numbers."""
    touch(tmp_path, "out10.mat", "out9.mat", "out1.mat")

    found = get_format_filenames("mat", tmp_path, "out")

    assert [p.rsplit("/", 1)[-1] for p in found] == ["out1.mat", "out10.mat", "out9.mat"]


def test_directories_are_ignored(tmp_path):
    """Directories never match."""
    (tmp_path / "outfile_dir.mat").mkdir()
    touch(tmp_path, "outfile1.mat")

    assert get_format_filenames("mat", tmp_path, "outfile") == [str(tmp_path / "outfile1.mat")]


def test_no_matches_returns_empty_list(tmp_path):
    """No match gives an empty list."""
    touch(tmp_path, "notes.txt")
    assert get_format_filenames("jld2", tmp_path, "outfile") == []


def test_missing_folder_raises(tmp_path):
    """A missing folder raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        get_format_filenames("jld2", tmp_path / "missing", "")
