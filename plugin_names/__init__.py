"""
Plugin name utilities for the marketplace.

Keeps plugin names consistent across listings and commands.
"""

from plugin_names.formatter import (
    DEFAULT_COMMAND_PREFIX,
    format_add_command,
    resolve_command_name,
    resolve_display_name,
    to_title_case,
)
from plugin_names.records import PluginRecord

__all__ = [
    "DEFAULT_COMMAND_PREFIX",
    "PluginRecord",
    "format_add_command",
    "resolve_command_name",
    "resolve_display_name",
    "to_title_case",
]
