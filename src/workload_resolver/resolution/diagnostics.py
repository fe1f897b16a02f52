"""Resolution diagnostics.

Diagnostics are plain data: the resolver never raises for an unknown
platform or a missing workload. Callers decide whether to fail the build
from the rendered ``BuildError`` records.

Public API (the "studs"):
    UNKNOWN_PLATFORM_CODE: Stable code for unrecognized platform identifiers
    MISSING_WORKLOAD_CODE: Stable code for uninstalled required workloads
    DiagnosticKind: Tag for the diagnostic union
    UnknownPlatformDiagnostic: A platform no manifest claims
    MissingWorkloadDiagnostic: A platform whose owning workload is not installed
    Diagnostic: Discriminated union of the two diagnostic records
    SuggestedWorkload: Workload an IDE or installer should offer
    BuildError: Aggregate error rendered from diagnostics
    render_errors: Combine diagnostics into build errors
"""

from collections.abc import Iterable
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_PLATFORM_CODE = "NETSDK1139"
MISSING_WORKLOAD_CODE = "NETSDK1147"


class DiagnosticKind(str, Enum):
    """Kinds of resolution diagnostic."""

    UNKNOWN_PLATFORM = "unknown_platform"
    MISSING_WORKLOAD = "missing_workload"


class UnknownPlatformDiagnostic(BaseModel):
    """The target platform identifier is not claimed by any workload."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown_platform"] = DiagnosticKind.UNKNOWN_PLATFORM.value
    token: str = Field(..., description="Unrecognized platform token")

    @property
    def code(self) -> str:
        return UNKNOWN_PLATFORM_CODE

    @property
    def message(self) -> str:
        return f"The target platform identifier {self.token} was not recognized."


class MissingWorkloadDiagnostic(BaseModel):
    """The platform is known but its workload is not installed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["missing_workload"] = DiagnosticKind.MISSING_WORKLOAD.value
    token: str = Field(..., description="Platform token lacking a workload")
    candidate_workload_ids: tuple[str, ...] = Field(..., description="Workloads that would satisfy it")

    @property
    def code(self) -> str:
        return MISSING_WORKLOAD_CODE

    @property
    def message(self) -> str:
        return (
            f"To build this project, the following workloads must be installed: "
            f"{', '.join(self.candidate_workload_ids)} (target platform {self.token})."
        )


Diagnostic = Annotated[
    Union[UnknownPlatformDiagnostic, MissingWorkloadDiagnostic], Field(discriminator="kind")
]


class SuggestedWorkload(BaseModel):
    """A workload tooling should offer to install.

    Attributes:
        workload_id: Workload identifier
        component_id: Visual Studio component id, if the manifest declares one
    """

    model_config = ConfigDict(frozen=True)

    workload_id: str = Field(..., description="Workload identifier")
    component_id: str | None = Field(default=None, description="IDE component identifier")


class BuildError(BaseModel):
    """A failure reported to the build, combining diagnostics of one kind."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Stable diagnostic code")
    message: str = Field(..., description="Human-readable message without the code")
    tokens: tuple[str, ...] = Field(..., description="Platform tokens the error covers")

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


def _unknown_platform_error(diagnostics: list[UnknownPlatformDiagnostic]) -> BuildError:
    tokens = tuple(d.token for d in diagnostics)
    if len(tokens) == 1:
        message = diagnostics[0].message
    else:
        message = f"The target platform identifiers {', '.join(tokens)} were not recognized."
    return BuildError(code=UNKNOWN_PLATFORM_CODE, message=message, tokens=tokens)


def _missing_workload_error(diagnostics: list[MissingWorkloadDiagnostic]) -> BuildError:
    tokens = tuple(d.token for d in diagnostics)
    workload_ids: list[str] = []
    for diagnostic in diagnostics:
        for workload_id in diagnostic.candidate_workload_ids:
            if workload_id not in workload_ids:
                workload_ids.append(workload_id)
    message = (
        f"To build this project, the following workloads must be installed: "
        f"{', '.join(workload_ids)} (target platforms: {', '.join(tokens)})."
    )
    return BuildError(code=MISSING_WORKLOAD_CODE, message=message, tokens=tokens)


def render_errors(diagnostics: Iterable[Diagnostic]) -> list[BuildError]:
    """Combine diagnostics into at most one error per kind.

    Unknown-platform diagnostics come first, then missing-workload ones,
    so a project that multi-targets several failing platforms gets every
    token listed in a single message per code.
    """
    unknown: list[UnknownPlatformDiagnostic] = []
    missing: list[MissingWorkloadDiagnostic] = []
    for diagnostic in diagnostics:
        if isinstance(diagnostic, UnknownPlatformDiagnostic):
            unknown.append(diagnostic)
        else:
            missing.append(diagnostic)

    errors: list[BuildError] = []
    if unknown:
        errors.append(_unknown_platform_error(unknown))
    if missing:
        errors.append(_missing_workload_error(missing))
    return errors


__all__ = [
    "UNKNOWN_PLATFORM_CODE",
    "MISSING_WORKLOAD_CODE",
    "DiagnosticKind",
    "UnknownPlatformDiagnostic",
    "MissingWorkloadDiagnostic",
    "Diagnostic",
    "SuggestedWorkload",
    "BuildError",
    "render_errors",
]
