"""Manifest loading.

Reads WorkloadManifest files from disk and validates them into
``WorkloadManifest`` models. YAML and JSON are both accepted since
``yaml.safe_load`` parses JSON documents as well.

Public API (the "studs"):
    MANIFEST_FILENAMES: File names recognized as manifests
    load_manifest: Load a single manifest file or directory
    discover_manifests: Find manifest files under a root directory
    load_manifests: Load every manifest under a list of roots
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..exceptions import InvalidManifestError
from .models import WorkloadManifest

_logger = logging.getLogger(__name__)

MANIFEST_FILENAMES = ("WorkloadManifest.yaml", "WorkloadManifest.yml", "WorkloadManifest.json")

_VERSION_PART = re.compile(r"^\d+(?:\.\d+)*$")


def _manifest_file_in(directory: Path) -> Path:
    for name in MANIFEST_FILENAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(f"No WorkloadManifest file found in {directory}")


def load_manifest(path: Path | str) -> WorkloadManifest:
    """Load a workload manifest.

    Args:
        path: A manifest file, or a directory containing one

    Returns:
        Parsed WorkloadManifest

    Raises:
        FileNotFoundError: If no manifest exists at path
        InvalidManifestError: If the file is not a valid manifest
    """
    path = Path(path)
    manifest_file = _manifest_file_in(path) if path.is_dir() else path

    if not manifest_file.exists():
        raise FileNotFoundError(f"Manifest not found: {manifest_file}")

    try:
        with open(manifest_file) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidManifestError(f"Invalid YAML in manifest {manifest_file}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidManifestError(f"Manifest {manifest_file} must contain a mapping")

    try:
        manifest = WorkloadManifest(**data)
    except ValidationError as e:
        raise InvalidManifestError(f"Invalid manifest {manifest_file}: {e}") from e

    _logger.debug(
        "Loaded manifest %s %s (%d workloads, %d packs) from %s",
        manifest.id,
        manifest.version,
        len(manifest.workloads),
        len(manifest.packs),
        manifest_file,
    )
    return manifest


def _path_sort_key(path: Path) -> tuple:
    # Dotted numeric parts ("6.0.100") compare as versions, the rest as text
    key = []
    for part in path.parts:
        if _VERSION_PART.match(part):
            key.append((0, tuple(int(n) for n in part.split(".")), ""))
        else:
            key.append((1, (), part))
    return tuple(key)


def discover_manifests(root: Path | str) -> list[Path]:
    """Find manifest files below a root directory.

    Each directory contributes one manifest, chosen by MANIFEST_FILENAMES
    preference. Results are sorted by path with version directories in
    numeric order, so load order, and therefore declaration order across
    manifests, is stable between runs.
    """
    root = Path(root)
    if not root.is_dir():
        _logger.warning("Manifest root %s does not exist or is not a directory", root)
        return []

    directories: set[Path] = set()
    for name in MANIFEST_FILENAMES:
        directories.update(match.parent for match in root.rglob(name) if match.is_file())

    found = [_manifest_file_in(directory) for directory in directories]
    return sorted(found, key=_path_sort_key)


def load_manifests(roots: Iterable[Path | str]) -> list[WorkloadManifest]:
    """Load every manifest found under the given roots, in root order."""
    manifests: list[WorkloadManifest] = []
    for root in roots:
        for manifest_file in discover_manifests(root):
            manifests.append(load_manifest(manifest_file))
    return manifests


__all__ = ["MANIFEST_FILENAMES", "load_manifest", "discover_manifests", "load_manifests"]
