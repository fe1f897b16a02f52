"""Multi-target aggregation.

Resolves every platform a project targets and reports all failures
together instead of stopping at the first one.

Public API (the "studs"):
    ResolutionResult: Aggregate result for one project evaluation
    MultiTargetAggregator: Runs the requirement resolver across all targets
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .diagnostics import (
    BuildError,
    Diagnostic,
    MissingWorkloadDiagnostic,
    SuggestedWorkload,
    render_errors,
)
from .platform import PlatformToken, parse_target_frameworks, platform_name
from .resolver import ResolutionOutcome, WorkloadRequirementResolver

_logger = logging.getLogger(__name__)


class ResolutionResult(BaseModel):
    """Everything one project evaluation needs from workload resolution.

    Attributes:
        all_satisfied: True when no diagnostic was produced
        outcomes: Per-token outcomes in declaration order
        diagnostics: Diagnostics for every unsatisfied token, in order
        suggested_workloads: Workloads to offer for installation
    """

    model_config = ConfigDict(frozen=True)

    all_satisfied: bool = Field(..., description="No diagnostics were produced")
    outcomes: tuple[ResolutionOutcome, ...] = Field(default=(), description="Per-token outcomes")
    diagnostics: tuple[Diagnostic, ...] = Field(default=(), description="Ordered diagnostics")
    suggested_workloads: tuple[SuggestedWorkload, ...] = Field(
        default=(), description="Install suggestions"
    )

    @property
    def errors(self) -> list[BuildError]:
        """Build errors, at most one per diagnostic code."""
        return render_errors(self.diagnostics)

    @property
    def satisfied_tokens(self) -> list[str]:
        return [outcome.token for outcome in self.outcomes if outcome.satisfied]


def _distinct_names(tokens: Iterable[PlatformToken | str]) -> list[str]:
    names: list[str] = []
    for token in tokens:
        name = platform_name(token)
        if name and name not in names:
            names.append(name)
    return names


class MultiTargetAggregator:
    """Resolves all platform tokens of a project in one pass.

    Each call works only on its own arguments, so one aggregator can serve
    concurrent project evaluations.
    """

    def __init__(self, resolver: WorkloadRequirementResolver) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> WorkloadRequirementResolver:
        return self._resolver

    def resolve_all(
        self,
        tokens: Iterable[PlatformToken | str],
        installed: Iterable[str],
        resolver_enabled: bool = True,
    ) -> ResolutionResult:
        """Resolve every distinct platform token.

        Tokens are resolved once each, in declaration order. Every
        unsatisfied token yields a diagnostic; nothing short-circuits.

        Args:
            tokens: Platform tokens declared by the project
            installed: Ids of the installed workloads
            resolver_enabled: False ignores all manifests

        Returns:
            ResolutionResult with outcomes, diagnostics and suggestions
        """
        installed_set = frozenset(installed)
        registry = self._resolver.registry

        outcomes: list[ResolutionOutcome] = []
        diagnostics: list[Diagnostic] = []
        suggestions: list[SuggestedWorkload] = []
        suggested_ids: set[str] = set()

        for name in _distinct_names(tokens):
            outcome = self._resolver.resolve(name, installed_set, resolver_enabled)
            outcomes.append(outcome)

            diagnostic = outcome.to_diagnostic()
            if diagnostic is None:
                continue
            diagnostics.append(diagnostic)

            if isinstance(diagnostic, MissingWorkloadDiagnostic):
                for workload_id in diagnostic.candidate_workload_ids:
                    workload = registry.lookup_workload(workload_id)
                    if workload is None or workload_id in suggested_ids:
                        continue
                    suggested_ids.add(workload_id)
                    suggestions.append(
                        SuggestedWorkload(workload_id=workload_id, component_id=workload.component_id)
                    )

        if diagnostics:
            _logger.debug(
                "Workload resolution found %d problem(s): %s",
                len(diagnostics),
                ", ".join(d.token for d in diagnostics),
            )

        return ResolutionResult(
            all_satisfied=not diagnostics,
            outcomes=tuple(outcomes),
            diagnostics=tuple(diagnostics),
            suggested_workloads=tuple(suggestions),
        )

    def resolve_target_frameworks(
        self,
        target_frameworks: str | Iterable[str],
        installed: Iterable[str],
        resolver_enabled: bool = True,
    ) -> ResolutionResult:
        """Resolve a project's target-framework monikers.

        Monikers without a platform suffix are skipped.

        Args:
            target_frameworks: ";"-separated TargetFrameworks value, or monikers
            installed: Ids of the installed workloads
            resolver_enabled: False ignores all manifests
        """
        tokens = parse_target_frameworks(target_frameworks)
        return self.resolve_all(tokens, installed, resolver_enabled)

    def suggest_workloads(
        self,
        tokens: Iterable[PlatformToken | str],
        installed: Iterable[str],
        resolver_enabled: bool = True,
    ) -> list[SuggestedWorkload]:
        """Workloads to offer for installation; never fails."""
        return list(self.resolve_all(tokens, installed, resolver_enabled).suggested_workloads)


__all__ = ["ResolutionResult", "MultiTargetAggregator"]
