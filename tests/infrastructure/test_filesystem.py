"""Tests for FileSystem primitives — copy, delete, substitution, best-effort mode."""

from __future__ import annotations

import re
import shutil
from pathlib import Path

import pytest

from cordova_android.domain.errors import FilesystemError
from cordova_android.infrastructure.filesystem import FileSystem


class TestCopy:
    def test_copy_file_overwrites(self, tmp_path: Path) -> None:
        src = tmp_path / "a.txt"
        dst = tmp_path / "b.txt"
        src.write_text("new")
        dst.write_text("old")
        FileSystem().copy_file(src, dst)
        assert dst.read_text() == "new"

    def test_copy_file_into_directory(self, tmp_path: Path) -> None:
        src = tmp_path / "a.txt"
        src.write_text("x")
        target = tmp_path / "dir"
        target.mkdir()
        FileSystem().copy_file(src, target)
        assert (target / "a.txt").read_text() == "x"

    def test_copy_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FilesystemError) as exc_info:
            FileSystem().copy_file(tmp_path / "missing", tmp_path / "out")
        assert exc_info.value.detail["action"] == "copy"

    def test_copy_tree_merges(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        (src / "sub").mkdir(parents=True)
        (src / "sub" / "f.txt").write_text("1")
        dst = tmp_path / "dst"
        (dst / "keep").mkdir(parents=True)
        FileSystem().copy_tree(src, dst)
        assert (dst / "sub" / "f.txt").read_text() == "1"
        assert (dst / "keep").is_dir()


class TestRemove:
    def test_remove_directory_tree(self, tmp_path: Path) -> None:
        tree = tmp_path / "tree"
        (tree / "a" / "b").mkdir(parents=True)
        FileSystem().remove(tree)
        assert not tree.exists()

    def test_remove_missing_is_not_an_error(self, tmp_path: Path) -> None:
        FileSystem().remove(tmp_path / "nothing-here")


class TestIgnoreFailures:
    def test_failures_are_skipped_inside_block(self, tmp_path: Path) -> None:
        fs = FileSystem()
        with fs.ignore_failures():
            fs.copy_file(tmp_path / "missing", tmp_path / "out")
            fs.mkdir(tmp_path / "made")
        assert (tmp_path / "made").is_dir()

    def test_fatal_mode_restored_after_block(self, tmp_path: Path) -> None:
        fs = FileSystem()
        with fs.ignore_failures():
            assert fs.fatal is False
        assert fs.fatal is True
        with pytest.raises(FilesystemError):
            fs.copy_file(tmp_path / "missing", tmp_path / "out")

    def test_fatal_mode_restored_when_block_raises(self) -> None:
        fs = FileSystem()
        with pytest.raises(RuntimeError), fs.ignore_failures():
            raise RuntimeError("boom")
        assert fs.fatal is True

    def test_non_fatal_mode_restored_as_non_fatal(self) -> None:
        fs = FileSystem(fatal=False)
        with fs.ignore_failures():
            pass
        assert fs.fatal is False

    def test_remove_failure_is_ignored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        target = tmp_path / "locked"
        target.mkdir()

        def _deny(path: Path) -> None:
            raise PermissionError("denied")

        monkeypatch.setattr(shutil, "rmtree", _deny)
        fs = FileSystem()
        with fs.ignore_failures():
            fs.remove(target)
        with pytest.raises(FilesystemError):
            fs.remove(target)


class TestGlob:
    def test_matches_pattern(self, tmp_path: Path) -> None:
        (tmp_path / "cordova-3.4.0.jar").write_text("")
        (tmp_path / "other.jar").write_text("")
        assert FileSystem().glob(tmp_path, "cordova-*.jar") == [tmp_path / "cordova-3.4.0.jar"]

    def test_missing_directory_yields_nothing(self, tmp_path: Path) -> None:
        assert FileSystem().glob(tmp_path / "libs", "*.jar") == []


class TestReplaceToken:
    def test_replaces_first_occurrence_only(self, tmp_path: Path) -> None:
        path = tmp_path / "strings.xml"
        path.write_text("<a>__NAME__</a><b>__NAME__</b>")
        assert FileSystem().replace_token(path, "__NAME__", "MyApp") is True
        assert path.read_text() == "<a>MyApp</a><b>__NAME__</b>"

    def test_replacement_is_literal(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_text("x __ID__ y")
        FileSystem().replace_token(path, "__ID__", r"\1 $& \g<0>")
        assert path.read_text() == r"x \1 $& \g<0> y"

    def test_token_is_not_a_regex(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_text("a.b axb")
        FileSystem().replace_token(path, "a.b", "Z")
        assert path.read_text() == "Z axb"

    def test_absent_token_leaves_file_untouched(self, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_text("already customized")
        assert FileSystem().replace_token(path, "__NAME__", "MyApp") is False
        assert path.read_text() == "already customized"

    def test_missing_file_raises_even_when_ignoring_failures(self, tmp_path: Path) -> None:
        fs = FileSystem()
        with pytest.raises(FilesystemError), fs.ignore_failures():
            fs.replace_token(tmp_path / "missing.xml", "__NAME__", "x")

    def test_substitute_with_pattern(self, tmp_path: Path) -> None:
        path = tmp_path / "m.xml"
        path.write_text('<app android:debuggable="true" />')
        FileSystem().substitute(path, re.compile(r'\s*android:debuggable="true"'), "")
        assert path.read_text() == "<app />"
