"""Tests for configuration models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from solidex.config.models import (
    LoggerConfig,
    OutputConfig,
    PluginsConfig,
    ProductConfig,
    ShowcaseConfig,
)
from solidex.domain.types import Principle


class TestDefaults:
    def test_product(self) -> None:
        cfg = ProductConfig()
        assert cfg.name == "Laptop"
        assert cfg.price == Decimal("999.99")

    def test_output(self) -> None:
        cfg = OutputConfig()
        assert cfg.currency == "€"
        assert cfg.speed_unit == "km/h"

    def test_logger(self) -> None:
        cfg = LoggerConfig()
        assert cfg.timestamp_format == "%Y-%m-%d %H:%M:%S"
        assert cfg.message_template.format(destination="file") == "Test log in file"

    def test_showcase_runs_everything(self) -> None:
        assert ShowcaseConfig().principles == list(Principle)

    def test_plugins(self) -> None:
        cfg = PluginsConfig()
        assert cfg.enabled is True
        assert cfg.local_dir == ".solidex/plugins"


class TestValidation:
    def test_sparse_override(self) -> None:
        cfg = ProductConfig.model_validate({"name": "Phone"})
        assert cfg.name == "Phone"
        assert cfg.price == Decimal("999.99")

    def test_float_price_becomes_exact_decimal(self) -> None:
        cfg = ProductConfig.model_validate({"price": 999.99})
        assert cfg.price == Decimal("999.99")

    def test_principles_from_strings(self) -> None:
        cfg = ShowcaseConfig.model_validate({"principles": ["dip", "srp"]})
        assert cfg.principles == [Principle.DIP, Principle.SRP]

    def test_unknown_principle_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ShowcaseConfig.model_validate({"principles": ["dry"]})

    def test_frozen(self) -> None:
        cfg = ProductConfig()
        with pytest.raises(ValidationError):
            cfg.name = "x"  # type: ignore[misc]


class TestMessageTemplate:
    @pytest.mark.parametrize(
        "template",
        ["Test log in {destination}", "{destination}: entry", "static text", "{{literal}} {destination}"],
    )
    def test_accepted(self, template: str) -> None:
        assert LoggerConfig(message_template=template).message_template == template

    @pytest.mark.parametrize(
        "template",
        ["Log in {place}", "Log {0}", "Log {destination", "Log {destination.upper.x}"],
        ids=["unknown-name", "positional", "unbalanced", "bad-attribute"],
    )
    def test_rejected(self, template: str) -> None:
        with pytest.raises(ValidationError, match="message_template"):
            LoggerConfig(message_template=template)
