"""Tests for config file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from cordova_android.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        assert find_config(tmp_path) == config

    def test_walks_up(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == config.resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        elsewhere = tmp_path / "elsewhere.toml"
        elsewhere.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(elsewhere))
        assert find_config(tmp_path) == elsewhere

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None
