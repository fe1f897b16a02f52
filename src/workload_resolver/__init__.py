"""SDK Workload Resolver - Workload and platform resolution for build toolchains.

Given the target platforms a project declares, the resolver determines which
optional workloads are required, whether they are installed, and which packs
and auto-import files to activate on the current host.

Key components:
    - ManifestRegistry: Immutable index over loaded workload manifests
    - WorkloadRequirementResolver: Classifies a single platform token
    - MultiTargetAggregator: Resolves every target of a project at once
    - resolve_pack_alias / select_imports: Host-specific pack and import selection
    - CLI: Inspection commands for manifests and projects

Quick start:
    # Resolve a multi-targeted project against installed workloads
    workload-resolver resolve "net6.0-android;net6.0-ios" \\
        --manifests ./sdk-manifests --installed microsoft-android-sdk-full

    # Offer installation for whatever is missing
    workload-resolver suggest "net6.0-android;net6.0-ios" --manifests ./sdk-manifests
"""

from .config import ResolverSettings
from .exceptions import ManifestConfigurationError, WorkloadResolverError
from .host import HostDescriptor, HostOS
from .manifests import (
    ManifestRegistry,
    WorkloadDefinition,
    WorkloadManifest,
    WorkloadPack,
    WorkloadPackKind,
)
from .resolution import (
    MultiTargetAggregator,
    ResolutionResult,
    SuggestedWorkload,
    WorkloadRequirementResolver,
    parse_target_framework,
    resolve_pack_alias,
    select_imports,
)

__version__ = "0.1.0"

__all__ = [
    "ResolverSettings",
    "WorkloadResolverError",
    "ManifestConfigurationError",
    "HostOS",
    "HostDescriptor",
    "ManifestRegistry",
    "WorkloadManifest",
    "WorkloadDefinition",
    "WorkloadPack",
    "WorkloadPackKind",
    "WorkloadRequirementResolver",
    "MultiTargetAggregator",
    "ResolutionResult",
    "SuggestedWorkload",
    "parse_target_framework",
    "resolve_pack_alias",
    "select_imports",
    "__version__",
]
