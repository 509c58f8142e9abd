import pytest

from domains.image_ingest.scanner import count_files, iter_files, sample_entries


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "Movies" / "1994").mkdir(parents=True)
    (tmp_path / "Toys").mkdir()
    (tmp_path / "cover.jpg").write_bytes(b"a")
    (tmp_path / "Movies" / "1994" / "pulp.PNG").write_bytes(b"bb")
    (tmp_path / "Toys" / "pogs.gif").write_bytes(b"ccc")
    (tmp_path / "Toys" / "readme.txt").write_text("not an image")
    return tmp_path


def test_iter_files_recurses_with_relative_paths(tree):
    found = {f.relative_path: f for f in iter_files(tree)}

    assert set(found) == {"cover.jpg", "Movies/1994/pulp.PNG", "Toys/pogs.gif", "Toys/readme.txt"}
    assert found["Movies/1994/pulp.PNG"].filename == "pulp.PNG"
    assert found["Toys/pogs.gif"].full_path == tree / "Toys" / "pogs.gif"


def test_iter_files_skips_directories(tree):
    (tree / "Empty").mkdir()

    assert all(not f.relative_path.startswith("Empty") for f in iter_files(tree))


def test_iter_files_propagates_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(iter_files(tmp_path / "missing"))


def test_count_files(tree):
    counts = count_files(tree)

    assert counts.total_files == 4
    assert counts.image_files == 3
    assert counts.unreadable_dirs == 0


def test_count_files_logs_unreadable_root(tmp_path):
    counts = count_files(tmp_path / "missing")

    assert counts.total_files == 0
    assert counts.unreadable_dirs == 1


def test_sample_entries_limit(tree):
    for i in range(10):
        (tree / f"extra{i}.jpg").write_bytes(b"x")

    assert len(sample_entries(tree)) == 5
    assert len(sample_entries(tree, limit=2)) == 2
