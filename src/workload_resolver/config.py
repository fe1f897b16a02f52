"""Configuration model for workload resolution.

Public API (the "studs"):
    DEFAULT_BUILTIN_PLATFORMS: Platforms the framework supports without a workload
    ResolverSettings: Settings for one resolver process or evaluation context
"""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .host import HostDescriptor, HostOS

# Platforms that are part of the base framework and never need a workload
DEFAULT_BUILTIN_PLATFORMS: tuple[str, ...] = ("windows",)

# Data-driven mapping: settings field -> env var
_ENV_MAP: dict[str, str] = {
    "enable_workload_resolver": "MSBuildEnableWorkloadResolver",
    "manifest_roots": "WORKLOAD_RESOLVER_MANIFEST_ROOTS",
    "installed_workloads": "WORKLOAD_RESOLVER_INSTALLED",
    "host_os": "WORKLOAD_RESOLVER_HOST_OS",
}


def _split(value: str, separator: str) -> list[str]:
    return [item.strip() for item in value.split(separator) if item.strip()]


class ResolverSettings(BaseModel):
    """Settings for workload resolution.

    Attributes:
        enable_workload_resolver: False bypasses manifests entirely
        manifest_roots: Directories searched for WorkloadManifest files
        installed_workloads: Workload ids present on this host
        host_os: Host OS class override (None = detect)
        builtin_platforms: Platform tokens supported without any workload
    """

    model_config = ConfigDict(frozen=True)

    enable_workload_resolver: bool = Field(True, description="Use workload manifests")
    manifest_roots: tuple[Path, ...] = Field((), description="Manifest search roots")
    installed_workloads: frozenset[str] = Field(frozenset(), description="Installed workload ids")
    host_os: HostOS | None = Field(None, description="Host OS class override")
    builtin_platforms: tuple[str, ...] = Field(
        DEFAULT_BUILTIN_PLATFORMS, description="Framework-native platform tokens"
    )

    @field_validator("enable_workload_resolver", mode="before")
    @classmethod
    def parse_switch(cls, v: Any) -> Any:
        """Only the literal "false" (any case) turns the resolver off."""
        if isinstance(v, str):
            return v.strip().lower() != "false"
        return v

    @field_validator("manifest_roots", mode="before")
    @classmethod
    def parse_roots(cls, v: Any) -> Any:
        if isinstance(v, str):
            return _split(v, os.pathsep)
        return v

    @field_validator("installed_workloads", mode="before")
    @classmethod
    def parse_installed(cls, v: Any) -> Any:
        if isinstance(v, str):
            return _split(v, ",")
        return v

    @field_validator("host_os", mode="before")
    @classmethod
    def parse_host_os(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    @field_validator("builtin_platforms")
    @classmethod
    def normalize_builtins(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(token.strip().lower() for token in v if token.strip())

    def host(self) -> HostDescriptor:
        """Host descriptor for this configuration."""
        if self.host_os is None:
            return HostDescriptor.current()
        return HostDescriptor(os=self.host_os)

    @classmethod
    def from_env(cls) -> "ResolverSettings":
        """Create ResolverSettings from environment variables.

        Environment variables:
            MSBuildEnableWorkloadResolver: "false" disables the resolver
            WORKLOAD_RESOLVER_MANIFEST_ROOTS: os.pathsep separated directories
            WORKLOAD_RESOLVER_INSTALLED: Comma separated workload ids
            WORKLOAD_RESOLVER_HOST_OS: "windows" or "unix" (default: detect)

        Returns:
            ResolverSettings instance

        Raises:
            ValueError: If a variable holds an invalid value
        """
        kwargs: dict[str, Any] = {}
        for field, env_var in _ENV_MAP.items():
            value = os.environ.get(env_var)
            if value is not None:
                kwargs[field] = value

        return cls(**kwargs)


__all__ = ["DEFAULT_BUILTIN_PLATFORMS", "ResolverSettings"]
