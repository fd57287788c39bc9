"""Plugin record value type."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class PluginRecord:
    """Name and optional display override for one installable plugin."""

    name: str
    display_name: Optional[str] = None

    @classmethod
    def from_manifest(
        cls, data: Mapping[str, Any], default_name: Optional[str] = None
    ) -> "PluginRecord":
        """Build a record from a parsed plugin.json mapping."""
        name = data.get("name") or default_name or ""
        return cls(name=name, display_name=data.get("displayName"))
