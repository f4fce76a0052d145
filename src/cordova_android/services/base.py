"""BaseService — shared plumbing for the project and requirements services.

Services take a :class:`PlatformLayout` rather than reading the platform
root from settings, so tests can point them at a throwaway tree.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cordova_android.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from cordova_android.domain.errors import ProjectError
    from cordova_android.infrastructure.layout import PlatformLayout
    from cordova_android.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Holds the platform layout and the optional plugin manager."""

    def __init__(self, layout: PlatformLayout, *, plugins: PluginManager | None = None) -> None:
        self._layout = layout
        self._plugins = plugins

    @property
    def layout(self) -> PlatformLayout:
        return self._layout

    @staticmethod
    def _failure(op: str, exc: ProjectError) -> ServiceResult:
        logger.debug("%s failed with %s: %s", op, exc.code, exc.message, exc_info=exc)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))

    def _dispatch_event(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Fire *hook_name* on all plugins after a successful operation.

        The project is already on disk by then, so a plugin exception is
        recorded in *warnings* and the operation still reports success.
        """
        if self._plugins is None:
            return
        hook = getattr(self._plugins.hook, hook_name)
        try:
            hook(**payload)
        except Exception:
            logger.warning("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
