#!/usr/bin/env python3
"""
Generate marketplace.json from all plugins in the registry.

Plugins live either directly under plugins/ or one level down inside a
category directory. Each plugin's manifest is read only for its name,
displayName and listing fields; manifests are not validated.
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from plugin_names.formatter import resolve_command_name, resolve_display_name
from plugin_names.records import PluginRecord

MARKETPLACE_VERSION = "1.0.0"
MANIFEST_DIRS = (".cursor-plugin", ".claude-plugin")
MANIFEST_FILE = "plugin.json"

DEFAULT_PLUGINS_DIR = Path("plugins")
DEFAULT_OUTPUT = Path("marketplace.json")


def find_manifest(plugin_dir: Path) -> Optional[Path]:
    """Return the plugin.json path for a plugin directory, if any."""
    for manifest_dir in MANIFEST_DIRS:
        manifest_path = plugin_dir / manifest_dir / MANIFEST_FILE
        if manifest_path.is_file():
            return manifest_path
    return None


def _read_entry(
    plugin_dir: Path, manifest_path: Path, root_dir: Path, category: Optional[str]
) -> Optional[dict[str, Any]]:
    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            plugin_data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        print(f"Warning: Could not read {manifest_path}: {e}", file=sys.stderr)
        return None

    if not isinstance(plugin_data, dict):
        print(f"Warning: Skipping {manifest_path}: not a JSON object", file=sys.stderr)
        return None

    for field in ("name", "displayName"):
        value = plugin_data.get(field)
        if value is not None and not isinstance(value, str):
            print(
                f"Warning: Skipping {manifest_path}: '{field}' is not a string",
                file=sys.stderr,
            )
            return None

    record = PluginRecord.from_manifest(plugin_data, default_name=plugin_dir.name)
    return {
        "name": record.name,
        "displayName": resolve_display_name(record),
        "command": resolve_command_name(record),
        "version": plugin_data.get("version", "1.0.0"),
        "description": plugin_data.get("description", ""),
        "author": plugin_data.get("author", {}),
        "category": category,
        "path": plugin_dir.relative_to(root_dir).as_posix(),
    }


def collect_plugins(plugins_dir: Path) -> list[dict[str, Any]]:
    """Collect listing entries for all plugins, sorted by name."""
    plugins: list[dict[str, Any]] = []

    if not plugins_dir.is_dir():
        return plugins

    plugins_dir = plugins_dir.resolve()
    root_dir = plugins_dir.parent

    for child in sorted(plugins_dir.iterdir()):
        if not child.is_dir():
            continue

        manifest_path = find_manifest(child)
        if manifest_path is not None:
            entry = _read_entry(child, manifest_path, root_dir, None)
            if entry is not None:
                plugins.append(entry)
            continue

        # Not a plugin itself, so treat it as a category
        for plugin_dir in sorted(child.iterdir()):
            if not plugin_dir.is_dir():
                continue

            manifest_path = find_manifest(plugin_dir)
            if manifest_path is None:
                continue

            entry = _read_entry(plugin_dir, manifest_path, root_dir, child.name)
            if entry is not None:
                plugins.append(entry)

    plugins.sort(key=lambda entry: entry["name"])
    return plugins


def build_marketplace(
    plugins: list[dict[str, Any]],
    repository: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> dict[str, Any]:
    """Assemble the marketplace document."""
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)

    marketplace: dict[str, Any] = {
        "version": MARKETPLACE_VERSION,
        "generated_at": generated_at.strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
    }
    if repository:
        marketplace["repository"] = repository
    marketplace["plugins"] = plugins
    return marketplace


def write_marketplace(marketplace: dict[str, Any], path: Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(marketplace, f, indent=2)
        f.write("\n")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="plugin-marketplace",
        description="Generate marketplace.json from a plugins directory.",
    )
    parser.add_argument("--plugins-dir", type=Path, default=DEFAULT_PLUGINS_DIR)
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT)
    parser.add_argument("--repository", default=None)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Generate marketplace.json."""
    args = build_arg_parser().parse_args(argv)

    plugins = collect_plugins(args.plugins_dir)
    marketplace = build_marketplace(plugins, repository=args.repository)

    try:
        write_marketplace(marketplace, args.output)
    except OSError as e:
        print(f"Error: Could not write {args.output}: {e}", file=sys.stderr)
        return 1

    print(f"Generated {args.output} with {len(plugins)} plugins")
    return 0


if __name__ == "__main__":
    sys.exit(main())
