"""Process-wide plugin manager for release-uploader hooks."""

from __future__ import annotations

import pluggy

from .specs import ReleaseUploaderHookSpecs

_plugin_manager: pluggy.PluginManager | None = None


def get_plugin_manager() -> pluggy.PluginManager:
    """Return the shared plugin manager, creating it on first use."""
    global _plugin_manager

    if _plugin_manager is None:
        _plugin_manager = pluggy.PluginManager("release_uploader")
        _plugin_manager.add_hookspecs(ReleaseUploaderHookSpecs)
        _plugin_manager.load_setuptools_entrypoints("release_uploader")
    return _plugin_manager


def reset_plugin_manager() -> None:
    global _plugin_manager
    _plugin_manager = None
