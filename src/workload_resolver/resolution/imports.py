"""Auto-import selection.

Installed workloads can ship build logic that is imported into every
project, whatever it targets. Which file is imported depends on the host
OS class.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..host import HostDescriptor
from ..manifests.registry import ManifestRegistry

_logger = logging.getLogger(__name__)


def select_imports(
    registry: ManifestRegistry, installed: Iterable[str], host: HostDescriptor
) -> list[str]:
    """Select auto-import identifiers for the installed workloads.

    Workloads are visited in manifest declaration order, not in the order
    of ``installed``. Installed ids unknown to the registry contribute
    nothing. The first occurrence of an import id wins.

    Args:
        registry: Manifest registry
        installed: Ids of the installed workloads
        host: Host the build runs on

    Returns:
        Ordered, de-duplicated import identifiers
    """
    installed_set = frozenset(installed)
    selected: list[str] = []

    for workload in registry.workloads:
        if workload.id not in installed_set:
            continue
        for import_id in workload.imports_for(host.os):
            if import_id not in selected:
                selected.append(import_id)

    _logger.debug("Selected %d auto-import(s) for %s host", len(selected), host.os.value)
    return selected


__all__ = ["select_imports"]
