import pytest

from mddiff.core.common.enums import DiffType
from mddiff.features.diff.service.api import compare_directories
from mddiff.features.inventory.domain.models import InventoryScanError

def test_compare_directories_flow(source_and_target):
    """
    Integration Test:
    Real trees on disk through collector + engine with default wiring.
    """
    src, tgt = source_and_target

    report = compare_directories(str(src), str(tgt))

    assert report.summary.total_missing == 1
    assert report.summary.total_modified == 1

    by_type = {(i.type, i.path) for i in report.items}
    assert by_type == {
        (DiffType.MISSING, "missing.mkv"),
        (DiffType.MODIFIED, "movie.mkv"),
        (DiffType.EXTRA, "extra.mkv"),
    }

    (modified,) = report.modified
    assert "Extension changed" in modified.reason
    assert modified.src_size == modified.tgt_size == len("content")

def test_directory_hiding(tree_factory):
    """
    Empty directories are reported themselves; non-empty ones only through their files.
    """
    src = tree_factory("src", {
        "missing_empty": None,
        "missing_non_empty/file.txt": "content",
    })
    tgt = tree_factory("tgt", {
        "extra_empty": None,
        "extra_non_empty/file.txt": "content",
    })

    report = compare_directories(str(src), str(tgt))

    missing = [i.path for i in report.missing]
    extra = [i.path for i in report.extra]

    assert "missing_empty" in missing
    assert "missing_non_empty" not in missing
    assert "missing_non_empty/file.txt" in missing

    assert "extra_empty" in extra
    assert "extra_non_empty" not in extra
    assert "extra_non_empty/file.txt" in extra

def test_ignored_names_never_reach_the_report(tree_factory):
    src = tree_factory("src", {
        ".DS_Store": "junk",
        ".git/HEAD": "ref: refs/heads/main",
        "film.mkv": "data",
    })
    tgt = tree_factory("tgt", {
        "Thumbs.db": "junk",
        ".vscode/settings.json": "{}",
        "film.mkv": "data",
    })

    report = compare_directories(str(src), str(tgt))

    assert report.is_empty

def test_threshold_is_applied(tree_factory):
    src = tree_factory("src", {"clip.mp4": "x" * 100})
    tgt = tree_factory("tgt", {"clip.mp4": "x" * 104})

    assert compare_directories(str(src), str(tgt), size_threshold=4).is_empty

    report = compare_directories(str(src), str(tgt), size_threshold=3)
    (item,) = report.items
    assert (item.type, item.reason) == (DiffType.MODIFIED, "Size changed")

def test_nested_renames(tree_factory):
    src = tree_factory("src", {
        "Shows/Show/S01E01.mkv": "aaaa",
        "Shows/Show/S01E02.mkv": "bbbb",
    })
    tgt = tree_factory("tgt", {
        "Shows/Show/S01E01.mp4": "aaaa",
        "Shows/Show/S01E02 - Pilot.mkv": "bbbb",
    })

    report = compare_directories(str(src), str(tgt))

    assert [(i.type, i.path) for i in report.items] == [
        (DiffType.MODIFIED, "Shows/Show/S01E01.mkv"),
        (DiffType.MISSING, "Shows/Show/S01E02.mkv"),
        (DiffType.EXTRA, "Shows/Show/S01E02 - Pilot.mkv"),
    ]

def test_invalid_roots(tmp_path):
    good = tmp_path / "good"
    good.mkdir()
    not_a_dir = tmp_path / "file.mkv"
    not_a_dir.write_text("x")

    with pytest.raises(FileNotFoundError):
        compare_directories(str(tmp_path / "missing"), str(good))
    with pytest.raises(NotADirectoryError):
        compare_directories(str(good), str(not_a_dir))

def test_scan_errors_propagate(tree_factory, monkeypatch):
    src = tree_factory("src", {"a.mkv": "x"})
    tgt = tree_factory("tgt", {"a.mkv": "x"})

    def deny(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("mddiff.features.inventory.data.file_walker.os.walk", deny)

    with pytest.raises(InventoryScanError):
        compare_directories(str(src), str(tgt))
