"""Android SDK collaborators — project linking and requirements checks.

All subprocess calls go through :func:`run_tool`, which captures output
and converts spawn failures and non-zero exits into
:class:`ExternalToolError` carrying the captured stdout/stderr.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from cordova_android.domain.errors import EnvironmentCheckError, ExternalToolError
from cordova_android.infrastructure.layout import PlatformLayout

logger = logging.getLogger(__name__)

_TARGET_LINE = re.compile(r"^\s*target\s*=\s*(\S+)\s*$", re.MULTILINE)


def run_tool(args: list[str], *, cwd: Path | None = None) -> str:
    """Run an external command and return its stdout.

    Raises:
        ExternalToolError: The command could not be spawned or exited non-zero.
    """
    command = " ".join(args)
    logger.info("Running: %s", command)
    try:
        proc = subprocess.run(
            args,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as exc:
        if exc.stderr:
            logger.error("%s", exc.stderr.rstrip())
        msg = f"Command failed with exit code {exc.returncode}: {command}"
        raise ExternalToolError(
            msg,
            detail={
                "command": command,
                "returncode": exc.returncode,
                "stdout": exc.stdout or "",
                "stderr": exc.stderr or "",
            },
        ) from exc
    except OSError as exc:
        msg = f"Could not run {args[0]}: {exc}"
        raise ExternalToolError(msg, detail={"command": command}) from exc

    if proc.stdout:
        logger.info("%s", proc.stdout.rstrip())
    if proc.stderr:
        logger.info("%s", proc.stderr.rstrip())
    return proc.stdout


# ---------------------------------------------------------------------------
# Project linker
# ---------------------------------------------------------------------------


class ProjectLinker:
    """Registers a project with the SDK via ``android update project``."""

    def __init__(self, layout: PlatformLayout, *, android_command: str = "android") -> None:
        self._layout = layout
        self._android = android_command

    def build_command(self, project_path: Path, target: str, *, shared: bool) -> list[str]:
        """The ``android update project`` argument vector for *project_path*."""
        framework = self._layout.framework_dir_for(project_path, shared=shared)
        library = os.path.relpath(framework.resolve(), project_path.resolve())
        return [
            self._android,
            "update",
            "project",
            "--subprojects",
            "--path",
            str(project_path),
            "--target",
            target,
            "--library",
            library,
        ]

    def link(self, project_path: Path, target: str, *, shared: bool) -> str:
        """Link *project_path* against *target*; returns the tool's stdout."""
        return run_tool(self.build_command(project_path, target, shared=shared))


# ---------------------------------------------------------------------------
# Requirements
# ---------------------------------------------------------------------------


class Requirements(Protocol):
    """Environment collaborator consulted before any project is written."""

    def run(self) -> None:
        """Raise :class:`EnvironmentCheckError` if prerequisites are missing."""
        ...

    def get_target(self) -> str:
        """Return the target platform identifier, e.g. ``android-19``."""
        ...


class SdkRequirements:
    """Checks for java, ant, the ``android`` tool, and the platform's target."""

    def __init__(
        self,
        layout: PlatformLayout,
        *,
        android_command: str = "android",
        java_command: str = "java",
        ant_command: str = "ant",
    ) -> None:
        self._layout = layout
        self._android = android_command
        self._java = java_command
        self._ant = ant_command

    def get_target(self) -> str:
        """Read ``target=`` from the framework's (or root's) ``project.properties``."""
        candidates = [
            self._layout.framework_dir / "project.properties",
            self._layout.root / "project.properties",
        ]
        for properties in candidates:
            if not properties.is_file():
                continue
            match = _TARGET_LINE.search(properties.read_text(encoding="utf-8"))
            if match is not None:
                return match.group(1)
        msg = f"No Android target found in {candidates[0]}"
        raise EnvironmentCheckError(msg, detail={"searched": [str(p) for p in candidates]})

    def run(self) -> None:
        self.check_java()
        self.check_ant()
        self.check_android()

    def _require_tool(self, command: str, hint: str) -> str:
        resolved = shutil.which(command)
        if resolved is None:
            msg = f"Failed to find '{command}'. {hint}"
            raise EnvironmentCheckError(msg, detail={"command": command})
        return resolved

    def check_java(self) -> None:
        java = self._require_tool(
            self._java,
            "Make sure a JDK is installed and JAVA_HOME/bin is on your PATH.",
        )
        self._probe([java, "-version"], "java")

    def check_ant(self) -> None:
        ant = self._require_tool(self._ant, "Make sure Apache Ant is installed and on your PATH.")
        self._probe([ant, "-version"], "ant")

    def check_android(self) -> None:
        """Verify the ``android`` tool runs and has the required target installed."""
        android = self._require_tool(
            self._android,
            "Make sure the Android SDK is installed and its tools/ folder is on your PATH.",
        )
        target = self.get_target()
        listing = self._probe([android, "list", "targets"], "android")
        if not _listed(target, listing):
            msg = (
                f"Please install Android target {target}. "
                'Run "android" from your command line to install missing SDKs or tools.'
            )
            raise EnvironmentCheckError(msg, detail={"target": target})

    @staticmethod
    def _probe(args: list[str], name: str) -> str:
        try:
            return run_tool(args)
        except ExternalToolError as exc:
            msg = f"The command '{name}' failed: {exc.message}"
            raise EnvironmentCheckError(msg, detail=exc.detail) from exc


def _listed(target: str, listing: str) -> bool:
    """Whether *target* appears in *listing* as a whole id, not as a prefix of a longer one."""
    return re.search(rf"(?<![\w.-]){re.escape(target)}(?![\w.-])", listing) is not None
