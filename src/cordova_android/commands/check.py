"""``cordova-android check-reqs``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cordova_android.commands._base import AndroidCommand

if TYPE_CHECKING:
    from cordova_android.commands._context import AppContext

_CHECK_EXAMPLES = """\
  cordova-android check-reqs
  cordova-android --json check-reqs
  CORDOVA_ANDROID_SDK__JAVA_COMMAND=/opt/jdk/bin/java cordova-android check-reqs"""


@click.command("check-reqs", cls=AndroidCommand, examples=_CHECK_EXAMPLES)
@click.pass_obj
def check_reqs(app: AppContext) -> None:
    """Check for java, ant, the android tool, and the required SDK target."""
    app.emit(app.requirements_service().check())
