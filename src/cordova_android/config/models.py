"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``cordova-android.toml`` only
contains overrides. Most installs need no file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from cordova_android.domain.project import (
    DEFAULT_PACKAGE_NAME,
    DEFAULT_PROJECT_NAME,
    DEFAULT_PROJECT_PATH,
)


class PlatformConfig(BaseModel):
    """[platform] section.

    ``root`` is resolved relative to the config file's directory.
    """

    model_config = {"frozen": True}

    root: Path | None = None


class SdkConfig(BaseModel):
    """[sdk] section — external command names."""

    model_config = {"frozen": True}

    android_command: str = "android"
    java_command: str = "java"
    ant_command: str = "ant"


class ProjectConfig(BaseModel):
    """[project] section — defaults for omitted ``create`` arguments."""

    model_config = {"frozen": True}

    default_path: str = DEFAULT_PROJECT_PATH
    default_package: str = DEFAULT_PACKAGE_NAME
    default_name: str = DEFAULT_PROJECT_NAME
