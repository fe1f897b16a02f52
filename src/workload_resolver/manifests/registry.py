"""Manifest Registry - Immutable index over loaded workload manifests.

The registry is responsible for:
1. Folding every loaded manifest into platform, workload and pack lookups
2. Rejecting manifest sets that break ownership or reference rules
3. Providing one shared, lazily built registry per process
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..config import ResolverSettings
from ..exceptions import (
    DuplicatePackError,
    DuplicatePlatformOwnershipError,
    DuplicateWorkloadError,
    UndefinedPackError,
)
from .loader import load_manifests
from .models import WorkloadDefinition, WorkloadManifest, WorkloadPack

_logger = logging.getLogger(__name__)


class ManifestRegistry:
    """Read-only index over a set of workload manifests.

    Construction validates the whole manifest set. After that the registry
    never changes, so one instance can be shared by any number of
    concurrent resolutions.

    Integrity rules checked at construction:
        - a platform token is owned by at most one workload
        - workload ids and pack ids are unique across all manifests
        - every pack a workload lists is defined by some manifest
    """

    def __init__(self, manifests: Iterable[WorkloadManifest] = ()) -> None:
        """Build the index.

        Args:
            manifests: Loaded manifests, in declaration order

        Raises:
            ManifestConfigurationError: If the manifest set is inconsistent
        """
        self._manifests: tuple[WorkloadManifest, ...] = tuple(manifests)
        self._platforms: dict[str, WorkloadDefinition] = {}
        self._workloads: dict[str, WorkloadDefinition] = {}
        self._packs: dict[str, WorkloadPack] = {}

        workload_sources: dict[str, str] = {}
        pack_sources: dict[str, str] = {}

        for manifest in self._manifests:
            for pack in manifest.packs:
                if pack.id in self._packs:
                    raise DuplicatePackError(pack.id, pack_sources[pack.id], manifest.id)
                self._packs[pack.id] = pack
                pack_sources[pack.id] = manifest.id

            for workload in manifest.workloads:
                if workload.id in self._workloads:
                    raise DuplicateWorkloadError(
                        workload.id, workload_sources[workload.id], manifest.id
                    )
                self._workloads[workload.id] = workload
                workload_sources[workload.id] = manifest.id

                for platform in workload.platforms:
                    owner = self._platforms.get(platform)
                    if owner is not None:
                        raise DuplicatePlatformOwnershipError(platform, owner.id, workload.id)
                    self._platforms[platform] = workload

        # Packs may be defined in a later manifest than the workload using them
        for workload in self._workloads.values():
            for pack_id in workload.packs:
                if pack_id not in self._packs:
                    raise UndefinedPackError(pack_id, workload.id)

        _logger.debug(
            "Built manifest registry: %d manifests, %d workloads, %d platforms, %d packs",
            len(self._manifests),
            len(self._workloads),
            len(self._platforms),
            len(self._packs),
        )

    @classmethod
    def from_paths(cls, roots: Iterable[Path | str]) -> ManifestRegistry:
        """Load all manifests under the given roots and index them."""
        return cls(load_manifests(roots))

    @property
    def manifests(self) -> tuple[WorkloadManifest, ...]:
        return self._manifests

    @property
    def workloads(self) -> Iterator[WorkloadDefinition]:
        """Workload definitions in manifest declaration order."""
        return iter(self._workloads.values())

    @property
    def platforms(self) -> list[str]:
        """Platform tokens claimed by some workload."""
        return list(self._platforms)

    def lookup_platform(self, token: str) -> WorkloadDefinition | None:
        """Get the workload owning a platform token.

        Matching is exact after lowercasing; prefixes never match.

        Args:
            token: Platform token, e.g. "android"

        Returns:
            Owning WorkloadDefinition or None if no manifest claims the token
        """
        return self._platforms.get(token.lower())

    def lookup_workload(self, workload_id: str) -> WorkloadDefinition | None:
        return self._workloads.get(workload_id)

    def lookup_pack(self, pack_id: str) -> WorkloadPack | None:
        return self._packs.get(pack_id)

    def __len__(self) -> int:
        return len(self._workloads)

    def __repr__(self) -> str:
        return (
            f"ManifestRegistry(manifests={[m.id for m in self._manifests]!r}, "
            f"platforms={self.platforms!r})"
        )


# Process-wide registry, built once on first use
_shared_registry: ManifestRegistry | None = None
_shared_registry_lock = threading.Lock()


def get_shared_registry(settings: ResolverSettings | None = None) -> ManifestRegistry:
    """Get or build the process-wide manifest registry.

    The first caller loads manifests from ``settings.manifest_roots``;
    every later caller gets the same instance regardless of the settings
    it passes.

    Args:
        settings: Settings to build from (default: ResolverSettings.from_env())

    Returns:
        The shared ManifestRegistry
    """
    global _shared_registry
    if _shared_registry is not None:
        return _shared_registry

    with _shared_registry_lock:
        if _shared_registry is None:
            if settings is None:
                settings = ResolverSettings.from_env()
            _shared_registry = ManifestRegistry.from_paths(settings.manifest_roots)
        return _shared_registry


def reset_shared_registry() -> None:
    """Drop the shared registry so the next call rebuilds it."""
    global _shared_registry
    with _shared_registry_lock:
        _shared_registry = None


__all__ = ["ManifestRegistry", "get_shared_registry", "reset_shared_registry"]
