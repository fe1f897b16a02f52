"""Shared test fixtures."""

import copy
from pathlib import Path

import pytest
import yaml

from workload_resolver.manifests import ManifestRegistry, WorkloadManifest, reset_shared_registry
from workload_resolver.resolution import MultiTargetAggregator, WorkloadRequirementResolver

_ENV_VARS = (
    "MSBuildEnableWorkloadResolver",
    "WORKLOAD_RESOLVER_MANIFEST_ROOTS",
    "WORKLOAD_RESOLVER_INSTALLED",
    "WORKLOAD_RESOLVER_HOST_OS",
)

TEST_MANIFEST = {
    "id": "Microsoft.NET.Sdk.TestWorkload",
    "version": "5.0.100",
    "workloads": [
        {
            "id": "microsoft-net-sdk-testworkload",
            "description": "Workload for the test platform",
            "platforms": ["workloadtestplatform"],
            "packs": ["Microsoft.NET.Sdk.TestWorkload.Pack"],
            "component-id": "microsoft.net.sdk.testworkload",
            "auto-imports": {
                "windows": "WinTestWorkload.AutoImport.props",
                "unix": "UnixTestWorkload.AutoImport.props",
            },
        },
        {
            "id": "microsoft-net-sdk-missingtestworkload",
            "description": "Workload that is never installed",
            "platforms": ["missingworkloadtestplatform"],
            "component-id": "microsoft.net.sdk.missingtestworkload",
        },
    ],
    "packs": [
        {
            "id": "Microsoft.NET.Sdk.TestWorkload.Pack",
            "kind": "Sdk",
            "alias-to": {
                "windows": "Microsoft.NET.Sdk.TestWorkload.Pack.Win",
                "unix": "Microsoft.NET.Sdk.TestWorkload.Pack.Unix",
            },
        },
    ],
}

MOBILE_MANIFEST = {
    "id": "Microsoft.NET.Workload.Mobile",
    "version": "6.0.100",
    "workloads": [
        {
            "id": "microsoft-android-sdk-full",
            "description": "Android SDK",
            "platforms": ["android"],
            "packs": ["Microsoft.Android.Sdk", "Microsoft.Android.Templates"],
            "component-id": "microsoft.net.component.android",
            "auto-imports": {
                "windows": ["Android.Win.props", "Mobile.Shared.props"],
                "unix": ["Mobile.Shared.props"],
            },
        },
        {
            "id": "microsoft-ios-sdk-full",
            "description": "iOS SDK",
            "platforms": ["ios"],
            "packs": ["Microsoft.iOS.Sdk"],
            "component-id": "microsoft.net.component.ios",
            "auto-imports": {
                "windows": ["Mobile.Shared.props", "iOS.Win.props"],
                "unix": ["Mobile.Shared.props", "iOS.Unix.props"],
            },
        },
    ],
    "packs": [
        {
            "id": "Microsoft.Android.Sdk",
            "kind": "sdk",
            "alias-to": {"windows": "Microsoft.Android.Sdk.Windows"},
        },
        {"id": "Microsoft.Android.Templates", "kind": "template"},
        {"id": "Microsoft.iOS.Sdk", "kind": "framework"},
    ],
}


@pytest.fixture(autouse=True)
def _isolate_resolver_state(monkeypatch):
    """Clear resolver environment variables and the shared registry."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_shared_registry()
    yield
    reset_shared_registry()


@pytest.fixture
def test_manifest_data():
    return copy.deepcopy(TEST_MANIFEST)


@pytest.fixture
def mobile_manifest_data():
    return copy.deepcopy(MOBILE_MANIFEST)


@pytest.fixture
def manifests(test_manifest_data, mobile_manifest_data):
    return [WorkloadManifest(**test_manifest_data), WorkloadManifest(**mobile_manifest_data)]


@pytest.fixture
def registry(manifests):
    return ManifestRegistry(manifests)


@pytest.fixture
def resolver(registry):
    return WorkloadRequirementResolver(registry)


@pytest.fixture
def aggregator(resolver):
    return MultiTargetAggregator(resolver)


@pytest.fixture
def manifest_writer():
    return write_manifest


@pytest.fixture
def manifest_root(tmp_path, test_manifest_data, mobile_manifest_data):
    """A manifest root laid out like sdk-manifests/<version>/<id>/."""
    root = tmp_path / "sdk-manifests"
    write_manifest(root / "5.0.100" / "microsoft.net.sdk.testworkload", test_manifest_data)
    write_manifest(root / "6.0.100" / "microsoft.net.workload.mobile", mobile_manifest_data)
    return root


def write_manifest(directory: Path, data: dict, filename: str = "WorkloadManifest.yaml") -> Path:
    """Write manifest data as YAML into directory."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(yaml.dump(data))
    return path
