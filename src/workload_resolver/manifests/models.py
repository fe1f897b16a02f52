"""Workload manifest data models.

Immutable models describing workloads, the platforms they satisfy and the
packs they contribute. Read from WorkloadManifest.yaml (or .json) files by
the loader, or constructed directly by callers that already hold parsed
manifest data.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..host import HostOS


class WorkloadPackKind(str, Enum):
    """Kinds of pack a workload can contribute."""

    SDK = "sdk"
    FRAMEWORK = "framework"
    TEMPLATE = "template"


def _normalize_identifier(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("identifier must not be empty")
    return value


class WorkloadPack(BaseModel):
    """A named artifact contributed by a workload.

    ``alias_to`` maps a host OS class to the concrete pack that is used in
    place of this one on that host. Hosts without an entry use the pack
    itself.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Pack identifier")
    kind: WorkloadPackKind = Field(default=WorkloadPackKind.SDK, description="Pack kind")
    alias_to: dict[HostOS, str] = Field(
        default_factory=dict, alias="alias-to", description="Host-specific concrete pack ids"
    )

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return _normalize_identifier(v)

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: Any) -> Any:
        """Accept "Sdk", "Framework", "Template" as written in SDK manifests."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class WorkloadDefinition(BaseModel):
    """A single installable workload.

    Attributes:
        id: Workload identifier, e.g. "microsoft-net-sdk-android"
        description: Human-readable description
        platforms: Platform tokens this workload satisfies (lowercase)
        packs: Pack ids this workload contributes
        component_id: Visual Studio component id offered by IDE install prompts
        auto_imports: Build-logic import ids activated per host OS class
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Workload identifier")
    description: str = Field(default="", description="Human-readable description")
    platforms: tuple[str, ...] = Field(default=(), description="Platform tokens satisfied")
    packs: tuple[str, ...] = Field(default=(), description="Pack ids contributed")
    component_id: str | None = Field(
        default=None, alias="component-id", description="IDE component id for install suggestions"
    )
    auto_imports: dict[HostOS, tuple[str, ...]] = Field(
        default_factory=dict, alias="auto-imports", description="Host-conditioned imports"
    )

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return _normalize_identifier(v)

    @field_validator("platforms")
    @classmethod
    def normalize_platforms(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Lowercase platform tokens and reject blanks and repeats."""
        normalized: list[str] = []
        for token in v:
            token = _normalize_identifier(token).lower()
            if token in normalized:
                raise ValueError(f"platform {token!r} listed more than once")
            normalized.append(token)
        return tuple(normalized)

    @field_validator("auto_imports", mode="before")
    @classmethod
    def coerce_single_import(cls, v: Any) -> Any:
        """Allow ``windows: Foo.props`` as shorthand for a one-item list."""
        if isinstance(v, dict):
            return {host: [item] if isinstance(item, str) else item for host, item in v.items()}
        return v

    def imports_for(self, host_os: HostOS) -> tuple[str, ...]:
        """Import ids this workload activates on the given host class."""
        return self.auto_imports.get(host_os, ())


class WorkloadManifest(BaseModel):
    """Manifest describing a set of workloads and their packs.

    Read from WorkloadManifest.yaml in manifest directories.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Manifest identifier")
    version: str = Field(..., description="Manifest version")
    description: str = Field(default="", description="Human-readable description")
    workloads: tuple[WorkloadDefinition, ...] = Field(default=(), description="Workloads, in order")
    packs: tuple[WorkloadPack, ...] = Field(default=(), description="Packs, in order")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return _normalize_identifier(v)

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        # YAML reads "5.0" as a float
        if isinstance(v, (int, float)):
            return str(v)
        return v


__all__ = [
    "WorkloadPackKind",
    "WorkloadPack",
    "WorkloadDefinition",
    "WorkloadManifest",
]
