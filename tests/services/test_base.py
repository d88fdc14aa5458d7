"""Tests for BaseService event dispatch."""

from __future__ import annotations

from solidex.config.settings import SolidexSettings
from solidex.plugins import PluginManager, hookimpl
from solidex.services.base import BaseService


class _Capture:
    def __init__(self) -> None:
        self.seen: list[str] = []

    @hookimpl
    def post_showcase(self, principle: str, lines: list[str]) -> None:
        self.seen.append(principle)


class TestDispatchEvent:
    def test_noop_without_plugins(self, settings: SolidexSettings) -> None:
        warnings: list[str] = []
        BaseService(settings)._dispatch_event(
            "post_showcase", {"principle": "srp", "lines": []}, warnings
        )
        assert warnings == []

    def test_calls_hook(self, settings: SolidexSettings) -> None:
        pm = PluginManager()
        capture = _Capture()
        pm.register_plugin(capture)
        warnings: list[str] = []
        BaseService(settings, plugins=pm)._dispatch_event(
            "post_showcase", {"principle": "dip", "lines": ["x"]}, warnings
        )
        assert capture.seen == ["dip"]
        assert warnings == []

    def test_unknown_hook_is_a_warning(self, settings: SolidexSettings) -> None:
        warnings: list[str] = []
        BaseService(settings, plugins=PluginManager())._dispatch_event("no_such_hook", {}, warnings)
        assert warnings == ["Event dispatch failed for no_such_hook"]
