"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs : CLI flags passed by Click
  2. Env vars    : ``SOLIDEX_*`` prefix, ``__`` between nested keys
  3. TOML file   : ``solidex.toml`` discovered via walk-up
  4. Code defaults: baked into :mod:`solidex.config.models`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from solidex.config.discovery import find_config
from solidex.config.models import (
    LoggerConfig,
    OutputConfig,
    PluginsConfig,
    ProductConfig,
    ShowcaseConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``solidex.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path has to reach settings_customise_sources, which pydantic
# calls as a classmethod during __init__.
_tls = threading.local()


class SolidexSettings(BaseSettings):
    """Everything the CLI and services need, frozen after construction.

    Attributes:
        root: Directory of the discovered ``solidex.toml``, or CWD.
        config_path: The TOML file actually loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SOLIDEX_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_plugins: bool = False

    # --- TOML sections ---
    product: ProductConfig = Field(default_factory=ProductConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logger: LoggerConfig = Field(default_factory=LoggerConfig)
    showcase: ShowcaseConfig = Field(default_factory=ShowcaseConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @property
    def plugins_enabled(self) -> bool:
        return self.plugins.enabled and not self.no_plugins

    @property
    def local_plugin_dir(self) -> Path:
        return self.root / self.plugins.local_dir

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> SolidexSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* wins over discovery; a path that does not
        exist is ignored. *root* defaults to the config file's directory.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(root=resolved_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
