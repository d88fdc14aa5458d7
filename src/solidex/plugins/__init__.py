"""Extension layer: plugin system via pluggy.

Plugins add discount and storage variants and observe showcase runs.
INVARIANT: Plugin failures are warnings, never errors.
"""

from solidex.plugins.hookspecs import hookimpl
from solidex.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
