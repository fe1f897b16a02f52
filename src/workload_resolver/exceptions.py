"""Exceptions for the workload resolver.

Only configuration-integrity problems are raised. Per-build conditions
(unknown platform, missing workload) are returned as diagnostics.

Public API (the "studs"):
    WorkloadResolverError: Base exception for all resolver errors
    ManifestConfigurationError: The loaded manifest set is broken
    InvalidManifestError: A manifest file could not be parsed or validated
    DuplicatePlatformOwnershipError: Two workloads claim one platform
    DuplicateWorkloadError: Two workloads share an identifier
    DuplicatePackError: Two packs share an identifier
    UndefinedPackError: A workload references a pack nobody defines
    UnknownPackError: A pack id was asked for that no manifest defines
    UnknownWorkloadError: A workload id was asked for that no manifest defines
"""


class WorkloadResolverError(Exception):
    """Base exception for all workload resolver errors."""

    pass


class ManifestConfigurationError(WorkloadResolverError):
    """The set of loaded manifests violates an integrity rule."""

    pass


class InvalidManifestError(ManifestConfigurationError):
    """A manifest file is not valid YAML/JSON or fails validation."""

    pass


class DuplicatePlatformOwnershipError(ManifestConfigurationError):
    """A platform token is claimed by more than one workload."""

    def __init__(self, platform: str, first_owner: str, second_owner: str) -> None:
        self.platform = platform
        self.first_owner = first_owner
        self.second_owner = second_owner
        super().__init__(
            f"Platform {platform!r} is claimed by both workload {first_owner!r} "
            f"and workload {second_owner!r}"
        )


class DuplicateWorkloadError(ManifestConfigurationError):
    """A workload identifier is defined more than once."""

    def __init__(self, workload_id: str, first_manifest: str, second_manifest: str) -> None:
        self.workload_id = workload_id
        super().__init__(
            f"Workload {workload_id!r} is defined in manifest {first_manifest!r} "
            f"and again in manifest {second_manifest!r}"
        )


class DuplicatePackError(ManifestConfigurationError):
    """A pack identifier is defined more than once."""

    def __init__(self, pack_id: str, first_manifest: str, second_manifest: str) -> None:
        self.pack_id = pack_id
        super().__init__(
            f"Pack {pack_id!r} is defined in manifest {first_manifest!r} "
            f"and again in manifest {second_manifest!r}"
        )


class UndefinedPackError(ManifestConfigurationError):
    """A workload lists a pack that no loaded manifest defines."""

    def __init__(self, pack_id: str, workload_id: str) -> None:
        self.pack_id = pack_id
        self.workload_id = workload_id
        super().__init__(f"Workload {workload_id!r} references undefined pack {pack_id!r}")


class UnknownPackError(ManifestConfigurationError):
    """A pack id was requested that is not present in the registry."""

    def __init__(self, pack_id: str) -> None:
        self.pack_id = pack_id
        super().__init__(f"Pack {pack_id!r} is not defined by any loaded manifest")


class UnknownWorkloadError(ManifestConfigurationError):
    """A workload id was requested that is not present in the registry."""

    def __init__(self, workload_id: str) -> None:
        self.workload_id = workload_id
        super().__init__(f"Workload {workload_id!r} is not defined by any loaded manifest")


__all__ = [
    "WorkloadResolverError",
    "ManifestConfigurationError",
    "InvalidManifestError",
    "DuplicatePlatformOwnershipError",
    "DuplicateWorkloadError",
    "DuplicatePackError",
    "UndefinedPackError",
    "UnknownPackError",
    "UnknownWorkloadError",
]
