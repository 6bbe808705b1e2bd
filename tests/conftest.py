import json

import pytest

DARK = {"red": "#E06C75", "bg0": "#282C34"}


@pytest.fixture
def dark_colors():
    return dict(DARK)


@pytest.fixture
def palettes_file(tmp_path):
    path = tmp_path / "palettes.json"
    path.write_text(json.dumps({"dark": DARK}), encoding="utf-8")
    return path


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    """Run with cwd in a scratch dir so assets/ lands there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
