"""``cordova-android`` entry point: global options and subcommand registration."""

from __future__ import annotations

from pathlib import Path

import click

from cordova_android import __version__
from cordova_android.commands import register_commands
from cordova_android.commands._context import AppContext
from cordova_android.config.settings import AndroidSettings

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, prog_name="cordova-android")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the project path (or OK/ERROR).")
@click.option("-v", "--verbose", is_flag=True, help="Show progress logs, error detail and timings.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    metavar="FILE",
    help="Use this cordova-android.toml instead of searching for one.",
)
@click.option(
    "--root",
    "platform_root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Platform checkout to copy from (contains framework/, bin/ and VERSION).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    platform_root: Path | None,
) -> None:
    """Create and update Cordova Android projects."""
    ctx.obj = AppContext(
        AndroidSettings.from_cli(
            config_path=config_path,
            platform_root=platform_root,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
