"""RequirementsService — report whether the build environment is usable."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cordova_android.domain.errors import ProjectError
from cordova_android.infrastructure.sdk import Requirements, SdkRequirements
from cordova_android.services.base import BaseService
from cordova_android.services.result import ServiceResult
from cordova_android.services.telemetry import traced

if TYPE_CHECKING:
    from cordova_android.config.models import SdkConfig
    from cordova_android.infrastructure.layout import PlatformLayout


class RequirementsService(BaseService):
    """Runs the same environment check that gates ``create`` and ``update``."""

    def __init__(
        self,
        layout: PlatformLayout,
        *,
        requirements: Requirements | None = None,
        sdk: SdkConfig | None = None,
    ) -> None:
        super().__init__(layout)
        if requirements is None:
            requirements = SdkRequirements(
                layout,
                **(sdk.model_dump() if sdk is not None else {}),
            )
        self._requirements = requirements

    @traced
    def check(self) -> ServiceResult:
        op = "check_requirements"
        try:
            self._requirements.run()
            target = self._requirements.get_target()
        except ProjectError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={"root": str(self._layout.root), "target": target},
        )
