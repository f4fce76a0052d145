"""Command: create a new Android project from the platform template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cordova_android.commands._base import AndroidCommand

if TYPE_CHECKING:
    from cordova_android.commands._context import AppContext

_CREATE_EXAMPLES = """\
  cordova-android create
  cordova-android create out/App com.example.app MyApp
  cordova-android create out/App com.example.app MyApp --shared
  cordova-android create out/App com.example.app MyApp --cli --template ./my-template
  cordova-android --root ~/cordova-android --json create out/App com.example.app MyApp"""


@click.command("create", cls=AndroidCommand, examples=_CREATE_EXAMPLES)
@click.argument("path", required=False)
@click.argument("package", required=False)
@click.argument("name", required=False)
@click.option(
    "--template",
    "template_dir",
    type=click.Path(file_okay=False, exists=True),
    default=None,
    help="Project template directory (overrides the built-in template).",
)
@click.option(
    "--shared",
    is_flag=True,
    help="Reference the platform framework in place instead of copying CordovaLib.",
)
@click.option(
    "--cli",
    "cli_template",
    is_flag=True,
    help="Use the CLI-managed Eclipse project file.",
)
@click.pass_obj
def create(
    app: AppContext,
    path: str | None,
    package: str | None,
    name: str | None,
    template_dir: str | None,
    shared: bool,
    cli_template: bool,
) -> None:
    """Create a new Cordova Android project at PATH.

    PACKAGE is a reverse-domain Java package (com.company.Name) and NAME
    the display name; the activity class is NAME with non-word characters
    removed. Omitted arguments fall back to the [project] defaults in
    cordova-android.toml. PATH must not exist yet.
    """
    result = app.project_service().create_project(
        path,
        package,
        name,
        template_dir=template_dir,
        shared=shared,
        cli_template=cli_template,
    )
    app.emit(result)
