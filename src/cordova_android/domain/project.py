"""ProjectRequest — the normalized inputs of a create invocation."""

from __future__ import annotations

import os
import re
from pathlib import Path

from pydantic import BaseModel

DEFAULT_PROJECT_PATH = "CordovaExample"
DEFAULT_PACKAGE_NAME = "my.cordova.project"
DEFAULT_PROJECT_NAME = "CordovaExample"

# ASCII only: the result must be a plain Java identifier.
_NON_WORD = re.compile(r"\W", re.ASCII)


def safe_activity_name(project_name: str) -> str:
    """Strip every non-word character so the name is a valid Java identifier.

    Examples:
        >>> safe_activity_name("My App!")
        'MyApp'
        >>> safe_activity_name("hello_world")
        'hello_world'
    """
    return _NON_WORD.sub("", project_name)


def package_as_path(package_name: str) -> str:
    """Turn ``com.example.app`` into ``com/example/app`` (OS separator)."""
    return package_name.replace(".", os.sep)


class ProjectRequest(BaseModel):
    """Normalized inputs for creating a project.

    Attributes:
        project_path: Destination directory. Must not exist yet.
        package_name: Reverse-domain Java package.
        project_name: Display name written into resources.
        template_dir: Project template root.
        shared: Reference the platform framework in place instead of
            vendoring a ``CordovaLib`` copy into the project.
        cli_template: Use the CLI-managed Eclipse project file.
    """

    model_config = {"frozen": True}

    project_path: Path
    package_name: str
    project_name: str
    template_dir: Path
    shared: bool = False
    cli_template: bool = False

    @property
    def activity_name(self) -> str:
        return safe_activity_name(self.project_name)

    @property
    def activity_dir(self) -> Path:
        return self.project_path / "src" / package_as_path(self.package_name)

    @property
    def activity_path(self) -> Path:
        return self.activity_dir / f"{self.activity_name}.java"

    @property
    def manifest_path(self) -> Path:
        return self.project_path / "AndroidManifest.xml"
