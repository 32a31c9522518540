"""Tests for startup configuration and the command line."""

import os
from pathlib import Path

import pytest

from satisfactory_saves import __version__, cli
from satisfactory_saves.core.config import ConfigError, ServerConfig, build_config


class TestBuildConfig:
    def test_defaults(self, save_dir: Path) -> None:
        config = build_config(str(save_dir))

        assert config.save_dir == os.path.abspath(str(save_dir))
        assert config.ip == "0.0.0.0"
        assert config.port == 1234
        assert config.bind_address == "0.0.0.0:1234"

    def test_missing_argument(self) -> None:
        with pytest.raises(ConfigError, match="required"):
            build_config(None)

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="does not exist"):
            build_config(str(tmp_path / "nope"))

    def test_file_is_not_a_directory(self, tmp_path: Path) -> None:
        path = tmp_path / "A_x.sav"
        path.write_bytes(b"")

        with pytest.raises(ConfigError):
            build_config(str(path))

    def test_bad_port(self, save_dir: Path) -> None:
        with pytest.raises(ConfigError):
            build_config(str(save_dir), port=70000)


class TestCli:
    def test_missing_save_dir_exits_1(self, capsys) -> None:
        assert cli.main([]) == 1
        assert "saves directory is required" in capsys.readouterr().err

    def test_nonexistent_save_dir_exits_1(self, tmp_path: Path, capsys) -> None:
        assert cli.main([str(tmp_path / "nope")]) == 1
        assert "Save path does not exist." in capsys.readouterr().err

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["--version"])

        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_starts_server(self, save_dir: Path, monkeypatch) -> None:
        started = []
        monkeypatch.setattr(cli, "run_server", started.append)

        assert cli.main(["-p", "8080", "-i", "127.0.0.1", str(save_dir)]) == 0

        assert started == [ServerConfig(os.path.abspath(str(save_dir)), "127.0.0.1", 8080)]
