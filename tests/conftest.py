"""
Pytest configuration and fixtures for hydroutils tests
"""

import pytest

from hydroutils.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from HYDRO_UTILS_* variables and cached settings"""
    import os

    for key in list(os.environ):
        if key.startswith("HYDRO_UTILS_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small directory tree with known file sizes"""
    root = tmp_path / "tree"
    root.mkdir()
    (root / "a.txt").write_bytes(b"x" * 100)
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.bin").write_bytes(b"y" * 250)
    (sub / "empty").write_bytes(b"")
    return root
