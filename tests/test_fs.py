"""
Tests for hydroutils.fs module.
"""

import os

import pytest

from hydroutils.fs import folder_size


def _lstat_size(path):
    return os.lstat(path).st_size


class TestFolderSize:
    """Tests for recursive folder size."""

    def test_counts_files_and_directories(self, sample_tree):
        expected = sum(
            _lstat_size(p)
            for p in [
                sample_tree,
                sample_tree / "a.txt",
                sample_tree / "sub",
                sample_tree / "sub" / "b.bin",
                sample_tree / "sub" / "empty",
            ]
        )
        assert folder_size(sample_tree) == expected

    def test_accepts_str_path(self, sample_tree):
        assert folder_size(str(sample_tree)) == folder_size(sample_tree)

    def test_single_file(self, sample_tree):
        assert folder_size(sample_tree / "a.txt") == 100

    def test_empty_path_returns_zero(self):
        assert folder_size("") == 0
        assert folder_size(None) == 0

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            folder_size(tmp_path / "missing")

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_skipped(self, sample_tree, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "big.bin").write_bytes(b"z" * 10_000)
        os.symlink(outside, sample_tree / "link_dir")
        os.symlink(sample_tree / "a.txt", sample_tree / "link_file")

        # Only real entries count; the root's own size is read after linking
        expected = sum(
            _lstat_size(p)
            for p in [
                sample_tree,
                sample_tree / "a.txt",
                sample_tree / "sub",
                sample_tree / "sub" / "b.bin",
                sample_tree / "sub" / "empty",
            ]
        )
        assert folder_size(sample_tree) == expected
