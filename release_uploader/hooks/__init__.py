"""Hook system for release-uploader integrations."""

from .manager import get_plugin_manager, reset_plugin_manager
from .specs import ReleaseUploaderHookSpecs, hookimpl, hookspec

__all__ = [
    "hookspec",
    "hookimpl",
    "ReleaseUploaderHookSpecs",
    "get_plugin_manager",
    "reset_plugin_manager",
]
