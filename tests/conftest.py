import os

import pytest

# the window tests run without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setenv("MATHBUDDY_CONFIG", str(path))
    return path
