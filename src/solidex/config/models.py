"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, solidex.toml only contains
overrides. An empty (or missing) file reproduces the stock showcase.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from solidex.domain.storage import DEFAULT_TIMESTAMP_FORMAT
from solidex.domain.types import Principle


class ProductConfig(BaseModel):
    """[product] section."""

    model_config = {"frozen": True}

    name: str = "Laptop"
    price: Decimal = Decimal("999.99")


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    currency: str = "€"
    speed_unit: str = "km/h"


class LoggerConfig(BaseModel):
    """[logger] section.

    ``message_template`` is formatted with the storage's ``destination``.
    """

    model_config = {"frozen": True}

    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    message_template: str = "Test log in {destination}"

    @field_validator("message_template")
    @classmethod
    def _known_placeholders(cls, value: str) -> str:
        try:
            value.format(destination="storage")
        except (AttributeError, KeyError, IndexError, ValueError) as exc:
            msg = f"message_template may only use the {{destination}} placeholder: {exc!r}"
            raise ValueError(msg) from exc
        return value


class ShowcaseConfig(BaseModel):
    """[showcase] section."""

    model_config = {"frozen": True}

    principles: list[Principle] = Field(default_factory=lambda: list(Principle))


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".solidex/plugins"

