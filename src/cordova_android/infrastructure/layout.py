"""PlatformLayout — paths inside an installed cordova-android platform.

The platform root is resolved once from settings and handed to every
component that reads from it, so nothing depends on where this package
itself is installed.

Layout::

    <root>/VERSION
    <root>/framework/{AndroidManifest.xml,project.properties,src,res/xml}
    <root>/framework/assets/www/cordova.js
    <root>/bin/templates/project/   (default project template)
    <root>/bin/templates/cordova/   (helper scripts)
    <root>/bin/node_modules/
    <root>/bin/{check_reqs,android_sdk_version}
    <root>/bin/lib/{check_reqs.js,android_sdk_version.js}
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cordova_android.domain.errors import FilesystemError

# Directory name of the vendored framework inside a generated project.
NESTED_FRAMEWORK_DIR = "CordovaLib"
SCRIPTS_DIR = "cordova"


@dataclass(frozen=True)
class PlatformLayout:
    """Resolved paths under one platform root."""

    root: Path

    @property
    def framework_dir(self) -> Path:
        return self.root / "framework"

    @property
    def bin_dir(self) -> Path:
        return self.root / "bin"

    @property
    def project_template_dir(self) -> Path:
        """Default project template (``assets``, ``res``, ``Activity.java``, ...)."""
        return self.bin_dir / "templates" / "project"

    @property
    def scripts_template_dir(self) -> Path:
        return self.bin_dir / "templates" / SCRIPTS_DIR

    @property
    def version_file(self) -> Path:
        return self.root / "VERSION"

    def framework_dir_for(self, project_path: Path, *, shared: bool) -> Path:
        """Framework location a project links against.

        Shared projects reference the platform's framework in place; all
        others carry their own ``CordovaLib`` copy.
        """
        if shared:
            return self.framework_dir
        return project_path / NESTED_FRAMEWORK_DIR

    def version(self) -> str:
        """Platform version string from ``<root>/VERSION``."""
        try:
            return self.version_file.read_text(encoding="utf-8").strip()
        except OSError as exc:
            msg = f"Cannot read platform version from {self.version_file}: {exc}"
            raise FilesystemError(msg, detail={"path": str(self.version_file)}) from exc
