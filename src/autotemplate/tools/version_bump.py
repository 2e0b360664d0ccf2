"""Bump the plugin manifest version and record it in versions.json.

Sets `version` in src/manifest.json (and dist/manifest.json when present)
to the target version, then maps the target version to the manifest's
`minAppVersion` in versions.json. JSON files are written tab-indented.

Target version, first found wins:
    1. --version argument
    2. npm_package_version environment variable
    3. [project].version in pyproject.toml

Usage:
    autotemplate-version-bump --version 1.2.0
    autotemplate-version-bump --root path/to/plugin

Exit Codes:
    0   Versions updated
    1   No target version, or a required file is missing or invalid

Python 3.13+. No external dependencies.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import tomllib
from pathlib import Path
from typing import Any

__all__ = ["bump_version", "get_pyproject_version", "main", "resolve_target_version"]

MANIFEST_PATH = Path("src") / "manifest.json"
DIST_MANIFEST_PATH = Path("dist") / "manifest.json"
VERSIONS_PATH = Path("versions.json")
VERSION_ENV_VAR = "npm_package_version"


def _read_json(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        msg = f"{path} must contain a JSON object"
        raise ValueError(msg)
    return data


def _write_json(path: Path, data: dict[str, Any]) -> None:
    path.write_text(json.dumps(data, indent="\t", ensure_ascii=False), encoding="utf-8")


def get_pyproject_version(root: Path) -> str | None:
    """Extract [project].version from pyproject.toml, or None."""
    pyproject_path = root / "pyproject.toml"
    if not pyproject_path.exists():
        return None
    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)
    return data.get("project", {}).get("version")


def resolve_target_version(root: Path, explicit: str | None = None) -> str | None:
    """Pick the target version from argument, environment, or pyproject.toml."""
    if explicit:
        return explicit
    from_env = os.environ.get(VERSION_ENV_VAR)
    if from_env:
        return from_env
    return get_pyproject_version(root)


def bump_version(root: Path, target_version: str) -> bool:
    """Write target_version into the manifests and versions.json.

    Args:
        root: Plugin root directory
        target_version: Version to set

    Returns:
        True if dist/manifest.json was also updated

    Raises:
        FileNotFoundError: If src/manifest.json or versions.json is missing
        ValueError: If a JSON file is malformed

    All files are read before any is written, so a failure leaves them untouched.
    """
    manifest_path = root / MANIFEST_PATH
    dist_path = root / DIST_MANIFEST_PATH
    versions_path = root / VERSIONS_PATH

    manifest = _read_json(manifest_path)
    dist_manifest = _read_json(dist_path) if dist_path.is_file() else None
    versions = _read_json(versions_path)

    manifest["version"] = target_version
    versions[target_version] = manifest.get("minAppVersion")

    _write_json(manifest_path, manifest)
    if dist_manifest is not None:
        dist_manifest["version"] = target_version
        _write_json(dist_path, dist_manifest)
    _write_json(versions_path, versions)
    return dist_manifest is not None


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Bump the plugin manifest version and update versions.json.",
    )
    parser.add_argument(
        "--version",
        dest="target_version",
        help=f"Version to set (default: ${VERSION_ENV_VAR}, then pyproject.toml)",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Plugin root directory (default: current directory)",
    )
    args = parser.parse_args(argv)

    try:
        target_version = resolve_target_version(args.root, args.target_version)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Error: cannot read pyproject.toml: {e}", file=sys.stderr)
        return 1
    if not target_version:
        print(
            f"Error: no target version. Pass --version or set {VERSION_ENV_VAR}.",
            file=sys.stderr,
        )
        return 1

    try:
        dist_updated = bump_version(args.root, target_version)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not dist_updated:
        print("dist/manifest.json not found, skipping update")
    print(f"Bumped version to {target_version}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
