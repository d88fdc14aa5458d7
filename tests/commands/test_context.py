"""Tests for AppContext result emission and plugin lifecycle."""

from __future__ import annotations

from pathlib import Path

import pytest

from solidex.commands._context import AppContext
from solidex.config.settings import SolidexSettings
from solidex.domain.discounts import DISCOUNT_REGISTRY
from solidex.services.result import ServiceError, ServiceResult
from tests.conftest import write_local_plugin


class TestEmit:
    def test_success_to_stdout(
        self, settings: SolidexSettings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        result = ServiceResult(
            ok=True,
            op="run_showcase",
            data={"header": "SOLID examples:", "sections": [], "lines": []},
            warnings=["careful"],
        )
        AppContext(settings).emit(result)
        captured = capsys.readouterr()
        assert "SOLID examples:" in captured.out
        assert "WARNING: careful" in captured.err

    def test_failure_exits_1(
        self, settings: SolidexSettings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        result = ServiceResult(ok=False, op="run_showcase", error=ServiceError(code="X", message="nope"))
        with pytest.raises(SystemExit) as exc_info:
            AppContext(settings).emit(result)
        assert exc_info.value.code == 1
        assert "nope" in capsys.readouterr().err


class TestPlugins:
    def test_disabled(self, project_root: Path) -> None:
        app = AppContext(SolidexSettings.from_cli(root=project_root, no_plugins=True))
        assert app.plugins is None

    def test_lazy_load_and_close(self, project_root: Path) -> None:
        write_local_plugin(project_root)
        app = AppContext(SolidexSettings.from_cli(root=project_root))
        assert "half" not in DISCOUNT_REGISTRY
        assert app.plugins is not None
        assert app.plugins is app.plugins
        assert "half" in DISCOUNT_REGISTRY
        app.close()
        assert "half" not in DISCOUNT_REGISTRY
