"""``cordova-android update PATH``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cordova_android.commands._base import AndroidCommand

if TYPE_CHECKING:
    from cordova_android.commands._context import AppContext

_UPDATE_EXAMPLES = """\
  cordova-android update out/App
  cordova-android --root ~/cordova-android -v update out/App"""


@click.command("update", cls=AndroidCommand, examples=_UPDATE_EXAMPLES)
@click.argument("path", type=click.Path(file_okay=False, exists=True))
@click.pass_obj
def update(app: AppContext, path: str) -> None:
    """Refresh CordovaLib, helper scripts, and build rules of the project at PATH.

    The activity name is read back from PATH/AndroidManifest.xml, and a
    debuggable="true" attribute left by old templates is removed.
    """
    app.emit(app.project_service().update_project(path))
