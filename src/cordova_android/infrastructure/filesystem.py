"""Filesystem primitives used while staging a project tree.

Every operation goes through :class:`FileSystem` so failures surface as
:class:`FilesystemError`. Cleanup of stale artifacts runs inside
:meth:`FileSystem.ignore_failures`, where errors are logged and skipped
instead of aborting the whole create/update sequence.
"""

from __future__ import annotations

import logging
import re
import shutil
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from cordova_android.domain.errors import FilesystemError

logger = logging.getLogger(__name__)


class FileSystem:
    """Copy/delete/substitute helpers with a scoped fatal toggle.

    Attributes:
        fatal: When True (the default), a failing operation raises
            :class:`FilesystemError`. When False, it is logged and skipped.
    """

    def __init__(self, *, fatal: bool = True) -> None:
        self.fatal = fatal

    @contextmanager
    def ignore_failures(self) -> Generator[None]:
        """Run a block in best-effort mode, restoring the previous mode on exit."""
        previous = self.fatal
        self.fatal = False
        try:
            yield
        finally:
            self.fatal = previous

    def _fail(self, action: str, path: Path, exc: OSError) -> None:
        if self.fatal:
            msg = f"Failed to {action} {path}: {exc}"
            raise FilesystemError(msg, detail={"path": str(path), "action": action}) from exc
        logger.debug("Ignoring failure to %s %s: %s", action, path, exc)

    # ------------------------------------------------------------------
    # Copy / delete / create
    # ------------------------------------------------------------------

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy *src* to *dst* with its permission bits, overwriting.

        A directory *dst* receives ``src.name``. Mode bits matter for the
        helper scripts, which must stay executable.
        """
        if dst.is_dir():
            dst = dst / src.name
        try:
            shutil.copy(src, dst)
        except OSError as exc:
            self._fail("copy", src, exc)

    def copy_tree(self, src: Path, dst: Path) -> None:
        """Recursively copy directory *src* to *dst*, merging into *dst* if present."""
        try:
            shutil.copytree(src, dst, dirs_exist_ok=True)
        except OSError as exc:
            self._fail("copy", src, exc)

    def remove(self, path: Path) -> None:
        """Delete a file or directory tree. A missing *path* is not an error."""
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink(missing_ok=True)
        except OSError as exc:
            self._fail("remove", path, exc)

    def mkdir(self, path: Path) -> None:
        """Create *path* and any missing parents."""
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            self._fail("create", path, exc)

    def glob(self, directory: Path, pattern: str) -> list[Path]:
        """List entries of *directory* matching *pattern* (empty if it is missing)."""
        if not directory.is_dir():
            return []
        return sorted(directory.glob(pattern))

    def write_text(self, path: Path, content: str) -> None:
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            self._fail("write", path, exc)

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file. Always raises on failure."""
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Failed to read {path}: {exc}"
            raise FilesystemError(msg, detail={"path": str(path), "action": "read"}) from exc

    # ------------------------------------------------------------------
    # In-place substitution
    # ------------------------------------------------------------------

    def substitute(self, path: Path, pattern: re.Pattern[str], replacement: str) -> bool:
        """Replace the first match of *pattern* in *path* with literal *replacement*.

        Returns True when a match was replaced. The file must exist; a
        missing file always raises, even in best-effort mode, since the
        files being customized are expected to have just been copied.
        """
        if not path.is_file():
            msg = f"Cannot substitute in missing file: {path}"
            raise FilesystemError(msg, detail={"path": str(path), "action": "substitute"})

        text = self.read_text(path)
        updated, count = pattern.subn(lambda _m: replacement, text, count=1)
        if count:
            self.write_text(path, updated)
        return bool(count)

    def replace_token(self, path: Path, token: str, value: str) -> bool:
        """Replace the first occurrence of placeholder *token* in *path* with *value*.

        Only the first occurrence is replaced; template files carry each
        placeholder once. Re-running on an already customized file is a no-op.
        """
        logger.debug("Substituting %s in %s", token, path)
        return self.substitute(path, re.compile(re.escape(token)), value)
