"""Test cases for filesystem size measurement."""

import os

import pytest
from utils.filesystem import get_dir_size, iter_entries


@pytest.fixture
def tree(tmp_path):
    """Directory with a 100 byte file and nested subdirectories."""
    (tmp_path / "a.bin").write_bytes(b"x" * 100)
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.bin").write_bytes(b"y" * 50)
    deeper = sub / "deeper"
    deeper.mkdir()
    (deeper / "c.bin").write_bytes(b"z" * 7)
    return tmp_path


def test_non_recursive_skips_subdirectories(tree):
    assert get_dir_size(str(tree)) == 100
    assert get_dir_size(str(tree), recursive=False) == 100


def test_recursive_includes_subdirectories(tree):
    assert get_dir_size(str(tree), recursive=True) == 157


def test_single_file_ignores_recursive_flag(tmp_path):
    target = tmp_path / "single.bin"
    target.write_bytes(b"q" * 42)
    assert get_dir_size(str(target)) == 42
    assert get_dir_size(str(target), recursive=True) == 42


def test_empty_directory(tmp_path):
    assert get_dir_size(str(tmp_path), recursive=True) == 0


def test_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_dir_size(str(tmp_path / "nope"))


def test_iter_entries_visits_each_entry_once(tree):
    paths = [p for p, _ in iter_entries(str(tree), recursive=True)]
    assert paths[0] == str(tree)
    assert len(paths) == len(set(paths))
    assert sorted(os.path.relpath(p, tree) for p in paths[1:]) == sorted(
        [
            "a.bin",
            "sub",
            os.path.join("sub", "b.bin"),
            os.path.join("sub", "deeper"),
            os.path.join("sub", "deeper", "c.bin"),
        ]
    )


def test_iter_entries_lists_but_does_not_enter_subdirectories(tree):
    paths = {os.path.relpath(p, tree) for p, _ in iter_entries(str(tree))}
    assert paths == {".", "a.bin", "sub"}


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_symlink_counted_as_link_not_target(tmp_path):
    target_dir = tmp_path / "target"
    target_dir.mkdir()
    (target_dir / "payload.bin").write_bytes(b"p" * 4096)
    root = tmp_path / "root"
    root.mkdir()
    link = root / "link"
    os.symlink(target_dir, link)

    assert get_dir_size(str(root), recursive=True) == os.lstat(link).st_size


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permissions are not enforced for root",
)
def test_unreadable_subdirectory_fails_whole_measurement(tree):
    locked = tree / "sub" / "deeper"
    locked.chmod(0)
    try:
        with pytest.raises(PermissionError):
            get_dir_size(str(tree), recursive=True)
        # Not descended into, so the lock does not matter
        assert get_dir_size(str(tree), recursive=False) == 100
    finally:
        locked.chmod(0o755)
