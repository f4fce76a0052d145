"""Subcommand modules for cordova-android.

Provides register_commands() which uses deferred imports to keep
``cordova-android --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from cordova_android.commands.check import check_reqs
    from cordova_android.commands.create import create
    from cordova_android.commands.update import update

    cli.add_command(create)
    cli.add_command(update)
    cli.add_command(check_reqs)
