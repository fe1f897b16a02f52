"""Workload requirement resolution for a single platform token.

Public API (the "studs"):
    OutcomeStatus: Classification of one platform token
    ResolutionOutcome: Result of resolving one platform token
    WorkloadRequirementResolver: Classifies tokens against a manifest registry
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_BUILTIN_PLATFORMS
from ..manifests.registry import ManifestRegistry
from .diagnostics import Diagnostic, MissingWorkloadDiagnostic, UnknownPlatformDiagnostic
from .platform import PlatformToken, platform_name

_logger = logging.getLogger(__name__)


class OutcomeStatus(str, Enum):
    """How a platform token resolved."""

    SATISFIED = "satisfied"
    UNKNOWN_PLATFORM = "unknown_platform"
    MISSING_WORKLOAD = "missing_workload"


class ResolutionOutcome(BaseModel):
    """Outcome of resolving one platform token.

    ``candidates`` is non-empty only for MISSING_WORKLOAD and holds the
    workload that owns the token.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., description="Normalized platform token")
    status: OutcomeStatus = Field(..., description="Resolution status")
    candidates: tuple[str, ...] = Field(default=(), description="Workloads able to satisfy it")

    @property
    def satisfied(self) -> bool:
        return self.status is OutcomeStatus.SATISFIED

    def to_diagnostic(self) -> Diagnostic | None:
        """Diagnostic record for this outcome, or None when satisfied."""
        if self.status is OutcomeStatus.UNKNOWN_PLATFORM:
            return UnknownPlatformDiagnostic(token=self.token)
        if self.status is OutcomeStatus.MISSING_WORKLOAD:
            return MissingWorkloadDiagnostic(token=self.token, candidate_workload_ids=self.candidates)
        return None


class WorkloadRequirementResolver:
    """Decides whether a platform token is usable with the installed workloads.

    Built-in platforms are part of the base framework: they are satisfied
    without a workload, and remain recognized when the resolver is turned
    off. Everything else needs a manifest that claims the token.
    """

    def __init__(
        self,
        registry: ManifestRegistry,
        builtin_platforms: Iterable[str] = DEFAULT_BUILTIN_PLATFORMS,
    ) -> None:
        """Initialize the resolver.

        Args:
            registry: Manifest registry to look platform owners up in
            builtin_platforms: Platform tokens supported without a workload
        """
        self._registry = registry
        self._builtin_platforms = frozenset(p.lower() for p in builtin_platforms)

    @property
    def registry(self) -> ManifestRegistry:
        return self._registry

    @property
    def builtin_platforms(self) -> frozenset[str]:
        return self._builtin_platforms

    def resolve(
        self,
        token: PlatformToken | str,
        installed: Iterable[str],
        resolver_enabled: bool = True,
    ) -> ResolutionOutcome:
        """Resolve one platform token.

        Args:
            token: Platform token (version suffixes are ignored)
            installed: Ids of the workloads installed on this host
            resolver_enabled: False ignores all manifests

        Returns:
            ResolutionOutcome for the token
        """
        name = platform_name(token)

        if not resolver_enabled:
            status = (
                OutcomeStatus.SATISFIED
                if name in self._builtin_platforms
                else OutcomeStatus.UNKNOWN_PLATFORM
            )
            _logger.debug("Workload resolver disabled: platform %s is %s", name, status.value)
            return ResolutionOutcome(token=name, status=status)

        owner = self._registry.lookup_platform(name)
        if owner is None:
            if name in self._builtin_platforms:
                _logger.debug("Platform %s is built in", name)
                return ResolutionOutcome(token=name, status=OutcomeStatus.SATISFIED)
            _logger.debug("Platform %s is not claimed by any workload", name)
            return ResolutionOutcome(token=name, status=OutcomeStatus.UNKNOWN_PLATFORM)

        if owner.id in frozenset(installed):
            _logger.debug("Platform %s satisfied by installed workload %s", name, owner.id)
            return ResolutionOutcome(token=name, status=OutcomeStatus.SATISFIED)

        _logger.debug("Platform %s requires missing workload %s", name, owner.id)
        return ResolutionOutcome(
            token=name, status=OutcomeStatus.MISSING_WORKLOAD, candidates=(owner.id,)
        )


__all__ = ["OutcomeStatus", "ResolutionOutcome", "WorkloadRequirementResolver"]
