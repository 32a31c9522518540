"""Shared fixtures: a temp save directory and a helper to drop saves into it."""

import os
from pathlib import Path

import pytest

from satisfactory_saves.core.config import build_config
from satisfactory_saves.web.local_server import create_app

BASE_MTIME = 1_700_000_000


@pytest.fixture
def save_dir(tmp_path: Path) -> Path:
    path = tmp_path / "SaveGames"
    path.mkdir()
    return path


@pytest.fixture
def make_save(save_dir: Path):
    """Create a save file with a given age offset (seconds after BASE_MTIME)."""

    def _make(name: str, offset: int = 0, content: bytes = b"save data") -> Path:
        path = save_dir / name
        path.write_bytes(content)
        mtime = BASE_MTIME + offset
        os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture
def client(save_dir: Path):
    app = create_app(build_config(str(save_dir)))
    app.config["TESTING"] = True
    return app.test_client()
