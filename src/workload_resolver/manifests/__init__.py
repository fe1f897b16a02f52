"""Workload manifests: models, loading and the registry index.

This module defines the declarative description of workloads and the
immutable registry every resolution runs against.
"""

from .loader import discover_manifests, load_manifest, load_manifests
from .models import WorkloadDefinition, WorkloadManifest, WorkloadPack, WorkloadPackKind
from .registry import ManifestRegistry, get_shared_registry, reset_shared_registry

__all__ = [
    "WorkloadManifest",
    "WorkloadDefinition",
    "WorkloadPack",
    "WorkloadPackKind",
    "ManifestRegistry",
    "get_shared_registry",
    "reset_shared_registry",
    "load_manifest",
    "load_manifests",
    "discover_manifests",
]
