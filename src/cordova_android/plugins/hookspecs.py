"""Pluggy hook specifications for project lifecycle events."""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("cordova_android")


class AndroidHookSpec:
    """Hook specifications for the cordova-android plugin system."""

    @hookspec
    def post_create(
        self,
        project_path: str,
        package_name: str,
        project_name: str,
        target: str,
    ) -> None:
        """Called after a project has been created and linked."""

    @hookspec
    def post_update(
        self,
        project_path: str,
        project_name: str,
        version: str,
    ) -> None:
        """Called after an existing project has been updated and relinked."""
