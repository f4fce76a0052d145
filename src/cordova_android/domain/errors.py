"""Error taxonomy for project creation and update.

Every failure raised below the service layer is a :class:`ProjectError`.
Services catch it at their boundary and convert it into a failed
``ServiceResult`` carrying ``code``, the message, and ``detail``.
"""

from __future__ import annotations

from typing import Any


class ProjectError(Exception):
    """Base class for all errors surfaced by create/update operations."""

    code: str = "PROJECT_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.detail: dict[str, Any] = detail or {}


class InputValidationError(ProjectError):
    """Bad package identifier or project name. Raised before any mutation."""

    code = "INVALID_INPUT"


class PreconditionError(ProjectError):
    """The destination already exists. Raised before any mutation."""

    code = "PROJECT_EXISTS"


class EnvironmentCheckError(ProjectError):
    """Missing SDK, tools, or platform target."""

    code = "REQUIREMENTS_FAILED"


class FilesystemError(ProjectError):
    """A copy, delete, or write failed mid-orchestration."""

    code = "FILESYSTEM_ERROR"


class ManifestParseError(ProjectError):
    """The existing manifest lacks the expected activity declaration."""

    code = "MANIFEST_PARSE_ERROR"


class ExternalToolError(ProjectError):
    """The SDK tool exited non-zero or could not be spawned."""

    code = "EXTERNAL_TOOL_FAILED"
