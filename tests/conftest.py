"""Shared pytest fixtures and test helpers for cordova-android tests."""

from __future__ import annotations

import subprocess
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from cordova_android.domain.errors import EnvironmentCheckError
from cordova_android.infrastructure.layout import PlatformLayout
from cordova_android.services.project import ProjectService

TARGET = "android-19"

ACTIVITY_TEMPLATE = """\
package __ID__;

import org.apache.cordova.*;

public class __ACTIVITY__ extends CordovaActivity
{
}
"""

MANIFEST_TEMPLATE = """\
<?xml version='1.0' encoding='utf-8'?>
<manifest package="__PACKAGE__" xmlns:android="http://schemas.android.com/apk/res/android">
    <application android:label="@string/app_name">
        <activity android:name="__ACTIVITY__" android:label="@string/app_name">
        </activity>
    </application>
    <uses-sdk android:minSdkVersion="10" android:targetSdkVersion="__APILEVEL__" />
</manifest>
"""

STRINGS_TEMPLATE = """\
<?xml version='1.0' encoding='utf-8'?>
<resources>
    <string name="app_name">__NAME__</string>
</resources>
"""


def _write(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def build_platform(root: Path, *, target: str = TARGET) -> Path:
    """Lay out a minimal cordova-android platform checkout under *root*.

    This is the single source of truth for the platform layout used in tests.
    """
    _write(root / "VERSION", "3.5.0\n")

    framework = root / "framework"
    _write(framework / "AndroidManifest.xml", '<manifest package="org.apache.cordova" />\n')
    _write(framework / "project.properties", f"android.library=true\ntarget={target}\n")
    _write(framework / "src" / "org" / "apache" / "cordova" / "CordovaActivity.java", "class A {}\n")
    _write(framework / "res" / "xml" / "config.xml", "<widget />\n")
    _write(framework / "assets" / "www" / "cordova.js", "// cordova.js 3.5.0\n")

    template = root / "bin" / "templates" / "project"
    _write(template / "assets" / "www" / "index.html", "<html></html>\n")
    _write(template / "res" / "values" / "strings.xml", STRINGS_TEMPLATE)
    _write(
        template / "eclipse-project",
        "<projectDescription><name>__NAME__</name></projectDescription>\n",
    )
    _write(
        template / "eclipse-project-CLI",
        "<projectDescription><name>__NAME__</name><filteredResources/></projectDescription>\n",
    )
    _write(template / "Activity.java", ACTIVITY_TEMPLATE)
    _write(template / "AndroidManifest.xml", MANIFEST_TEMPLATE)
    _write(template / "custom_rules.xml", "<project name=\"custom_rules\" />\n")

    scripts = root / "bin" / "templates" / "cordova"
    _write(scripts / "build", "#!/usr/bin/env node\n")
    _write(scripts / "lib" / "build.js", "// build\n")

    bin_dir = root / "bin"
    _write(bin_dir / "node_modules" / "shelljs" / "package.json", "{}\n")
    _write(bin_dir / "check_reqs", "#!/usr/bin/env node\n")
    _write(bin_dir / "lib" / "check_reqs.js", "// check_reqs\n")
    _write(bin_dir / "android_sdk_version", "#!/usr/bin/env node\n")
    _write(bin_dir / "lib" / "android_sdk_version.js", "// android_sdk_version\n")
    return root


class FakeRequirements:
    """Stand-in for the SDK requirements check."""

    def __init__(self, target: str = TARGET, error: Exception | None = None) -> None:
        self.target = target
        self.error = error
        self.run_calls = 0

    def run(self) -> None:
        self.run_calls += 1
        if self.error is not None:
            raise self.error

    def get_target(self) -> str:
        return self.target


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def platform_root(tmp_path: Path) -> Path:
    """A fake platform checkout in ``tmp_path/platform``."""
    return build_platform(tmp_path / "platform")


@pytest.fixture
def layout(platform_root: Path) -> PlatformLayout:
    return PlatformLayout(platform_root)


@pytest.fixture
def requirements() -> FakeRequirements:
    return FakeRequirements()


@pytest.fixture
def failing_requirements() -> FakeRequirements:
    return FakeRequirements(error=EnvironmentCheckError("Failed to find 'ant'."))


@pytest.fixture
def sdk_calls(monkeypatch: pytest.MonkeyPatch) -> Generator[list[list[str]]]:
    """Record subprocess invocations instead of running the Android SDK.

    Every call succeeds with canned stdout.
    """
    calls: list[list[str]] = []

    def _fake_run(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, stdout="Updated project.\n", stderr="")

    monkeypatch.setattr(subprocess, "run", _fake_run)
    yield calls


@pytest.fixture
def project_service(
    layout: PlatformLayout,
    requirements: FakeRequirements,
    sdk_calls: list[list[str]],
) -> ProjectService:
    """ProjectService wired to the fake platform, requirements, and SDK."""
    return ProjectService(layout, requirements=requirements)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def create_project(service: ProjectService, project_path: Path, **kwargs: Any) -> dict[str, Any]:
    """Create a project via ProjectService, asserting success."""
    kwargs.setdefault("package_name", "com.example.app")
    kwargs.setdefault("project_name", "MyApp")
    result = service.create_project(project_path, **kwargs)
    assert result.ok, result.error
    return result.data
