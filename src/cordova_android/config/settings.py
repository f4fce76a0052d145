"""AndroidSettings — one frozen object built from every configuration layer.

Layers, strongest first:

1. keyword arguments (the global CLI flags)
2. ``CORDOVA_ANDROID_*`` environment variables, ``__`` for nesting
   (``CORDOVA_ANDROID_SDK__ANDROID_COMMAND``)
3. ``cordova-android.toml``
4. defaults on the section models in :mod:`cordova_android.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from cordova_android.config.discovery import find_config
from cordova_android.config.models import PlatformConfig, ProjectConfig, SdkConfig

# TOML file for the settings object currently under construction.
_active_toml: ContextVar[Path | None] = ContextVar("_active_toml", default=None)


def load_toml(path: Path) -> dict[str, Any]:
    """Parse *path*, turning syntax errors into a user-facing Click error."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single ``cordova-android.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._sections = load_toml(toml_path) if toml_path and toml_path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._sections.get(field_name), field_name, field_name in self._sections

    def __call__(self) -> dict[str, Any]:
        return self._sections


class AndroidSettings(BaseSettings):
    """Frozen settings shared by every command via :class:`AppContext`.

    Attributes:
        platform_root: ``--root`` (or ``CORDOVA_ANDROID_PLATFORM_ROOT``).
            Use :attr:`root` for the effective platform directory.
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CORDOVA_ANDROID_",
        "env_nested_delimiter": "__",
    }

    platform_root: Path | None = None
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    platform: PlatformConfig = Field(default_factory=PlatformConfig)
    sdk: SdkConfig = Field(default_factory=SdkConfig)
    project: ProjectConfig = Field(default_factory=ProjectConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No dotenv or secrets files; TOML sits below the environment.
        return init_settings, env_settings, TomlSettingsSource(settings_cls, _active_toml.get())

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        platform_root: Path | None = None,
        **cli_flags: Any,
    ) -> AndroidSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist means "no config
        file" rather than falling back to discovery.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config()

        if platform_root is not None:
            cli_flags["platform_root"] = platform_root

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _active_toml.reset(token)

    @property
    def root(self) -> Path:
        """Effective platform root.

        ``--root`` wins; otherwise ``[platform] root`` relative to the
        config file's directory; otherwise that directory itself; and
        with no config file at all, the current directory.
        """
        if self.platform_root is not None:
            return self.platform_root
        anchor = Path.cwd() if self.config_path is None else self.config_path.parent
        if self.platform.root is None:
            return anchor
        return anchor / self.platform.root
