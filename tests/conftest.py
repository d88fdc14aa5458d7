"""Shared pytest fixtures and test helpers for solidex tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from solidex.config.settings import SolidexSettings
from solidex.domain.discounts import DISCOUNT_REGISTRY
from solidex.domain.storage import STORAGE_REGISTRY


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory with no config, and no config env overrides."""
    monkeypatch.delenv("SOLIDEX_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> SolidexSettings:
    """Default settings rooted at an empty temp directory."""
    return SolidexSettings.from_cli(root=project_root)


@pytest.fixture(autouse=True)
def _clean_registries() -> Generator[None]:
    """Remove any non-built-in variants a test left behind."""
    yield
    for registry in (DISCOUNT_REGISTRY, STORAGE_REGISTRY):
        for name in registry.names():
            if not registry.is_builtin(name):
                registry.unregister(name)


PLUGIN_SOURCE = '''\
from decimal import Decimal

from solidex.domain.discounts import Discount
from solidex.domain.storage import Storage
from solidex.plugins import hookimpl


class HalfPriceDiscount(Discount):
    def apply(self, price):
        return price * Decimal("0.5")


class CacheStorage(Storage):
    destination = "cache"

    def write(self, data):
        self._echo(f"Saving to cache: {data}")


class SalePlugin:
    @hookimpl
    def register_discounts(self):
        return {"half": HalfPriceDiscount}

    @hookimpl
    def register_storages(self):
        return {"cache": CacheStorage}
'''


def write_local_plugin(root: Path, name: str = "sale.py", source: str = PLUGIN_SOURCE) -> Path:
    """Drop a single-file plugin into ``<root>/.solidex/plugins``."""
    plugin_dir = root / ".solidex" / "plugins"
    plugin_dir.mkdir(parents=True, exist_ok=True)
    path = plugin_dir / name
    path.write_text(source, encoding="utf-8")
    return path
