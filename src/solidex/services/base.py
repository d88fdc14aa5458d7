"""BaseService: shared plumbing for solidex services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from solidex.config.settings import SolidexSettings
    from solidex.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Holds settings and an optional plugin manager.

    Usage::

        class ShowcaseService(BaseService):
            def run(self) -> ServiceResult:
                ...
                self._dispatch_event("post_showcase", {...}, warnings)
    """

    def __init__(self, settings: SolidexSettings, *, plugins: PluginManager | None = None) -> None:
        self._settings = settings
        self._plugins = plugins

    def _dispatch_event(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Call *hook_name* on all plugins. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")
