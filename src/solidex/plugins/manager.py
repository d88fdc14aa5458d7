"""Plugin discovery and loading.

Discovery: entry points in the ``solidex.plugins`` group, plus
single-file plugins from a local directory (``.solidex/plugins/`` by
default). Variant hooks feed the discount and storage registries.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pluggy

from solidex.plugins.hookspecs import PROJECT_NAME, SolidexHookSpec

if TYPE_CHECKING:
    from solidex.domain.registry import VariantRegistry

ENTRY_POINT_GROUP = "solidex.plugins"

logger = logging.getLogger(__name__)


def _variant_hooks() -> dict[str, VariantRegistry[Any]]:
    from solidex.domain.discounts import DISCOUNT_REGISTRY
    from solidex.domain.storage import STORAGE_REGISTRY

    return {
        "register_discounts": DISCOUNT_REGISTRY,
        "register_storages": STORAGE_REGISTRY,
    }


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(SolidexHookSpec)
        self._loaded: bool = False
        # (registry, variant name) pairs added on behalf of plugins.
        self._registered: list[tuple[VariantRegistry[Any], str]] = []

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        for plugin in self._pm.get_plugins():
            self._register_variants(plugin, self._plugin_name(plugin))
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._register_variants(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def release_variants(self) -> None:
        """Remove every variant this manager added to the domain registries."""
        for registry, variant_name in self._registered:
            registry.unregister(variant_name)
        self._registered.clear()

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._plugin_name(p) for p in self._pm.get_plugins()]

    def _plugin_name(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Load every ``*.py`` in *local_dir* not starting with ``_``.

        Classes defined in those modules that carry hookimpl-decorated
        methods are instantiated and registered. A broken file is logged
        and skipped.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"solidex_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name or not self._has_hook_impls(obj):
                    continue
                try:
                    self._pm.register(obj(), name=f"{module_name}.{obj.__name__}")
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )
                    continue
                logger.debug("Loaded local plugin %s from %s", obj.__name__, py_file)

    def _normalize_plugin_instances(self) -> None:
        """Replace plugin classes registered by entry points with instances.

        Hook dispatch against a class leaves ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)

    def _register_variants(self, plugin: object, plugin_name: str) -> None:
        """Feed one plugin's variant hooks into the domain registries."""
        for hook_name, registry in _variant_hooks().items():
            hook = getattr(plugin, hook_name, None)
            if hook is None:
                continue

            try:
                variant_map = hook()
            except Exception:
                logger.warning(
                    "Failed to collect %s from plugin %s",
                    hook_name,
                    plugin_name,
                    exc_info=True,
                )
                continue

            if variant_map is None:
                continue
            if not isinstance(variant_map, dict):
                logger.warning("Plugin %s returned non-dict from %s", plugin_name, hook_name)
                continue

            for variant_name, variant_cls in variant_map.items():
                try:
                    registry.register(variant_name, variant_cls)
                except (TypeError, ValueError):
                    logger.warning(
                        "Skipping %s variant %r from plugin %s",
                        registry.abstraction.__name__,
                        variant_name,
                        plugin_name,
                        exc_info=True,
                    )
                    continue
                self._registered.append((registry, variant_name.strip()))

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether *cls* has any method decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("solidex")`` sets a ``solidex_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False
