"""Fixtures for CLI command tests."""

from __future__ import annotations

import shutil
from collections.abc import Generator
from pathlib import Path

import pytest

from cordova_android.config.discovery import CONFIG_ENV_VAR
from cordova_android.infrastructure.sdk import SdkRequirements
from cordova_android.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _isolated_cli(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None]:
    """Run every command from ``tmp_path`` with no ambient config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv("CORDOVA_ANDROID_PLATFORM_ROOT", raising=False)
    yield
    disable_telemetry()


@pytest.fixture
def sdk_ready(monkeypatch: pytest.MonkeyPatch, sdk_calls: list[list[str]]) -> list[list[str]]:
    """Treat the build environment as installed; record linker calls."""
    monkeypatch.setattr(SdkRequirements, "run", lambda self: None)
    return sdk_calls


@pytest.fixture
def sdk_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(shutil, "which", lambda cmd: None)
