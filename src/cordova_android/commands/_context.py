"""AppContext — the object every subcommand receives via ``@click.pass_obj``.

It turns the global flags into a configured process (logging, telemetry),
builds services against the resolved platform layout, and writes results
with the CLI's exit-code convention: 0 on success, 1 on a failed result.
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from cordova_android.config.logging import configure_logging
from cordova_android.infrastructure.layout import PlatformLayout
from cordova_android.output.formatters import OutputSettings, format_result
from cordova_android.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from cordova_android.config.settings import AndroidSettings
    from cordova_android.plugins.manager import PluginManager
    from cordova_android.services.check import RequirementsService
    from cordova_android.services.project import ProjectService
    from cordova_android.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by ``create``, ``update`` and ``check-reqs``."""

    def __init__(self, settings: AndroidSettings) -> None:
        self.settings = settings
        self.layout = PlatformLayout(settings.root)
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @cached_property
    def plugins(self) -> PluginManager:
        """Entry-point plugins, loaded only by commands that fire hooks."""
        from cordova_android.plugins.manager import PluginManager

        manager = PluginManager()
        manager.discover_and_load()
        return manager

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def project_service(self) -> ProjectService:
        from cordova_android.services.project import ProjectService

        return ProjectService.from_settings(self.settings, self.layout, plugins=self.plugins)

    def requirements_service(self) -> RequirementsService:
        from cordova_android.services.check import RequirementsService

        return RequirementsService(self.layout, sdk=self.settings.sdk)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 if it is a failure.

        Failures go to stderr. Warnings on a successful result also go to
        stderr, except in JSON mode where they are part of the payload.
        """
        out = self.output_settings
        text = format_result(result, settings=out)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if out.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
