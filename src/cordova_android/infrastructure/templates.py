"""TemplateCopier — stage framework, scripts, and build rules into a project.

Each method is safe to re-run over an existing project: scripts and
framework sources are deleted and copied fresh, never merged.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cordova_android.infrastructure.filesystem import FileSystem
from cordova_android.infrastructure.layout import SCRIPTS_DIR, PlatformLayout

logger = logging.getLogger(__name__)

_ECLIPSE_PROJECT_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    "<projectDescription><name>{name}-CordovaLib</name></projectDescription>"
)


class TemplateCopier:
    """Copies platform files into a project tree."""

    def __init__(self, layout: PlatformLayout, fs: FileSystem) -> None:
        self._layout = layout
        self._fs = fs

    def copy_js_and_library(self, project_path: Path, *, shared: bool, project_name: str) -> None:
        """Install ``cordova.js`` and (unless *shared*) a fresh ``CordovaLib`` copy."""
        framework = self._layout.framework_dir
        nested_lib = self._layout.framework_dir_for(project_path, shared=False)

        self._fs.copy_file(
            framework / "assets" / "www" / "cordova.js",
            project_path / "assets" / "www" / "cordova.js",
        )

        with self._fs.ignore_failures():
            for old_jar in self._fs.glob(project_path / "libs", "cordova-*.jar"):
                logger.info("Deleting %s", old_jar)
                self._fs.remove(old_jar)
            if shared:
                self._fs.remove(nested_lib)
            else:
                # Keep an existing .project so IDE imports survive the update.
                self._fs.remove(nested_lib / "src")

        if shared:
            return

        self._fs.mkdir(nested_lib)
        self._fs.copy_file(framework / "AndroidManifest.xml", nested_lib)
        self._fs.copy_file(framework / "project.properties", nested_lib)
        self._fs.copy_tree(framework / "src", nested_lib / "src")

        # A unique name lets several CordovaLib projects share one IDE workspace.
        eclipse_project = nested_lib / ".project"
        if not eclipse_project.exists():
            self._fs.write_text(eclipse_project, _ECLIPSE_PROJECT_TEMPLATE.format(name=project_name))

    def copy_scripts(self, project_path: Path) -> None:
        """Replace the project's ``cordova/`` helper scripts with the platform's."""
        bin_dir = self._layout.bin_dir
        dest = project_path / SCRIPTS_DIR

        self._fs.remove(dest)
        self._fs.copy_tree(self._layout.scripts_template_dir, dest)
        self._fs.copy_tree(bin_dir / "node_modules", dest / "node_modules")
        self._fs.mkdir(dest / "lib")
        self._fs.copy_file(bin_dir / "check_reqs", dest / "check_reqs")
        self._fs.copy_file(bin_dir / "lib" / "check_reqs.js", dest / "lib" / "check_reqs.js")
        self._fs.copy_file(bin_dir / "android_sdk_version", dest / "android_sdk_version")
        self._fs.copy_file(
            bin_dir / "lib" / "android_sdk_version.js",
            dest / "lib" / "android_sdk_version.js",
        )

    def copy_ant_rules(self, project_path: Path) -> None:
        """Install ``custom_rules.xml`` at the project root."""
        self._fs.copy_file(
            self._layout.project_template_dir / "custom_rules.xml",
            project_path / "custom_rules.xml",
        )
