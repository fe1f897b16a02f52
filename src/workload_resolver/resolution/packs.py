"""Pack alias resolution.

Public API (the "studs"):
    resolve_pack_alias: Concrete pack id for a pack on a host
    select_packs: Concrete packs contributed by a set of workloads
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..exceptions import UnknownPackError, UnknownWorkloadError
from ..host import HostDescriptor
from ..manifests.registry import ManifestRegistry

_logger = logging.getLogger(__name__)


def resolve_pack_alias(registry: ManifestRegistry, pack_id: str, host: HostDescriptor) -> str:
    """Resolve a pack id to the pack actually used on a host.

    Args:
        registry: Manifest registry defining the pack
        pack_id: Pack identifier
        host: Host the build runs on

    Returns:
        The aliased pack id for ``host.os``, or ``pack_id`` when the pack
        declares no alias for that host

    Raises:
        UnknownPackError: If no loaded manifest defines ``pack_id``
    """
    pack = registry.lookup_pack(pack_id)
    if pack is None:
        raise UnknownPackError(pack_id)

    concrete = pack.alias_to.get(host.os, pack.id)
    if concrete != pack.id:
        _logger.debug("Pack %s aliased to %s on %s", pack.id, concrete, host.os.value)
    return concrete


def select_packs(
    registry: ManifestRegistry, workload_ids: Iterable[str], host: HostDescriptor
) -> list[str]:
    """Concrete pack ids contributed by the given workloads.

    Packs keep workload order then per-workload declaration order, and
    each concrete id appears once.

    Raises:
        UnknownWorkloadError: If a workload id is not defined by any manifest
    """
    selected: list[str] = []
    for workload_id in workload_ids:
        workload = registry.lookup_workload(workload_id)
        if workload is None:
            raise UnknownWorkloadError(workload_id)
        for pack_id in workload.packs:
            concrete = resolve_pack_alias(registry, pack_id, host)
            if concrete not in selected:
                selected.append(concrete)
    return selected


__all__ = ["resolve_pack_alias", "select_packs"]
