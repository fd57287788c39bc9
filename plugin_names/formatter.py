"""
Formatting helpers for plugin names.

Tiles and cards show a human-readable title. When a plugin has no
displayName, its kebab-case name is converted to title case. Commands
such as /add-plugin always use the original kebab-case name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plugin_names.records import PluginRecord

DEFAULT_COMMAND_PREFIX = "/add-plugin"


def to_title_case(identifier: str) -> str:
    """Convert a kebab-case identifier to title case.

    Only the first character of each word is uppercased; the rest is kept
    as-is, so 'context7-plugin' becomes 'Context7 Plugin'. Malformed input
    is not rejected: 'a--b' becomes 'A  B'.
    """
    if not identifier:
        return ""

    return " ".join(word[:1].upper() + word[1:] for word in identifier.split("-"))


def resolve_display_name(record: PluginRecord) -> str:
    """Return the display override if set, else the title-cased name."""
    if record.display_name:
        return record.display_name

    return to_title_case(record.name)


def resolve_command_name(record: PluginRecord) -> str:
    """Return the kebab-case name used in commands."""
    return record.name


def format_add_command(record: PluginRecord, prefix: str = DEFAULT_COMMAND_PREFIX) -> str:
    """Build the install command for a plugin, e.g. '/add-plugin hex-mcp'."""
    return f"{prefix} {resolve_command_name(record)}"
