"""Workload resolution: platform parsing, requirement checks and selection.

Public API (the "studs"):
    parse_target_framework / parse_target_frameworks: Moniker parsing
    WorkloadRequirementResolver: Classifies one platform token
    MultiTargetAggregator: Resolves all targets of a project
    resolve_pack_alias / select_packs: Host-specific pack selection
    select_imports: Host-specific auto-import selection
"""

from .aggregator import MultiTargetAggregator, ResolutionResult
from .diagnostics import (
    MISSING_WORKLOAD_CODE,
    UNKNOWN_PLATFORM_CODE,
    BuildError,
    Diagnostic,
    DiagnosticKind,
    MissingWorkloadDiagnostic,
    SuggestedWorkload,
    UnknownPlatformDiagnostic,
    render_errors,
)
from .imports import select_imports
from .packs import resolve_pack_alias, select_packs
from .platform import PlatformToken, parse_target_framework, parse_target_frameworks, platform_name
from .resolver import OutcomeStatus, ResolutionOutcome, WorkloadRequirementResolver

__all__ = [
    # Parsing
    "PlatformToken",
    "platform_name",
    "parse_target_framework",
    "parse_target_frameworks",
    # Resolution
    "OutcomeStatus",
    "ResolutionOutcome",
    "WorkloadRequirementResolver",
    "MultiTargetAggregator",
    "ResolutionResult",
    # Diagnostics
    "UNKNOWN_PLATFORM_CODE",
    "MISSING_WORKLOAD_CODE",
    "DiagnosticKind",
    "UnknownPlatformDiagnostic",
    "MissingWorkloadDiagnostic",
    "Diagnostic",
    "SuggestedWorkload",
    "BuildError",
    "render_errors",
    # Selection
    "resolve_pack_alias",
    "select_packs",
    "select_imports",
]
