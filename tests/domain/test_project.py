"""Tests for ProjectRequest and name/path derivation."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from cordova_android.domain.project import ProjectRequest, package_as_path, safe_activity_name


class TestSafeActivityName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("MyApp", "MyApp"),
            ("My App", "MyApp"),
            ("Hello, World!", "HelloWorld"),
            ("snake_case", "snake_case"),
            ("dash-ed.name", "dashedname"),
            ("Café", "Caf"),
        ],
    )
    def test_strips_non_word_characters(self, name: str, expected: str) -> None:
        assert safe_activity_name(name) == expected


class TestProjectRequest:
    def _request(self, **overrides: object) -> ProjectRequest:
        fields: dict[str, object] = {
            "project_path": Path("out/App"),
            "package_name": "com.example.app",
            "project_name": "My App",
            "template_dir": Path("tpl"),
        }
        fields.update(overrides)
        return ProjectRequest.model_validate(fields)

    def test_package_as_path_uses_os_separator(self) -> None:
        assert package_as_path("com.example.app") == os.sep.join(["com", "example", "app"])

    def test_derived_paths(self) -> None:
        request = self._request()
        assert request.activity_name == "MyApp"
        assert request.activity_dir == Path("out/App/src/com/example/app")
        assert request.activity_path == Path("out/App/src/com/example/app/MyApp.java")
        assert request.manifest_path == Path("out/App/AndroidManifest.xml")

    def test_flags_default_off(self) -> None:
        request = self._request()
        assert request.shared is False
        assert request.cli_template is False

    def test_frozen(self) -> None:
        request = self._request()
        with pytest.raises(Exception):
            request.shared = True  # type: ignore[misc]
