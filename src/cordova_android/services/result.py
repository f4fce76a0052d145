"""The value every service operation returns.

Commands never see exceptions from the service layer: a
:class:`~cordova_android.domain.errors.ProjectError` raised anywhere
below a service is turned into ``ServiceResult(ok=False, error=...)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from cordova_android.domain.errors import ProjectError


class ServiceError(BaseModel):
    """Machine-readable failure: a stable ``code`` plus a human ``message``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: ProjectError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=dict(exc.detail))


class ServiceResult(BaseModel):
    """Outcome of ``create_project``, ``update_project`` or ``check_requirements``.

    Attributes:
        ok: True when every step completed.
        op: Operation name; selects the renderer.
        data: Success payload (``path``, ``name``, ``target``, ...).
        warnings: Non-fatal problems, e.g. a failing plugin hook.
        error: Set exactly when ``ok`` is False.
        meta: ``{"telemetry": ...}`` under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
