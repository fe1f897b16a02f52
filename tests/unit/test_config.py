"""Tests for resolver configuration and host classification."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from workload_resolver.config import DEFAULT_BUILTIN_PLATFORMS, ResolverSettings
from workload_resolver.host import HostDescriptor, HostOS


class TestHostOS:
    """Tests for HostOS classification."""

    @pytest.mark.parametrize("name", ["win32", "cygwin", "msys", "Windows"])
    def test_windows_platforms(self, name):
        assert HostOS.from_platform(name) == HostOS.WINDOWS

    @pytest.mark.parametrize("name", ["linux", "darwin", "freebsd13"])
    def test_unix_platforms(self, name):
        assert HostOS.from_platform(name) == HostOS.UNIX

    def test_current_host(self):
        with patch("workload_resolver.host.sys.platform", "win32"):
            assert HostDescriptor.current().os == HostOS.WINDOWS
        with patch("workload_resolver.host.sys.platform", "linux"):
            host = HostDescriptor.current()
            assert host.os == HostOS.UNIX
            assert not host.is_windows


class TestResolverSettings:
    """Tests for ResolverSettings model."""

    def test_defaults(self):
        settings = ResolverSettings()
        assert settings.enable_workload_resolver is True
        assert settings.manifest_roots == ()
        assert settings.installed_workloads == frozenset()
        assert settings.host_os is None
        assert settings.builtin_platforms == DEFAULT_BUILTIN_PLATFORMS

    def test_switch_only_false_disables(self):
        assert ResolverSettings(enable_workload_resolver="false").enable_workload_resolver is False
        assert ResolverSettings(enable_workload_resolver="FALSE").enable_workload_resolver is False
        assert ResolverSettings(enable_workload_resolver="true").enable_workload_resolver is True
        assert ResolverSettings(enable_workload_resolver="0").enable_workload_resolver is True
        assert ResolverSettings(enable_workload_resolver=False).enable_workload_resolver is False

    def test_installed_from_string(self):
        settings = ResolverSettings(installed_workloads="wl-a, wl-b,,")
        assert settings.installed_workloads == frozenset({"wl-a", "wl-b"})

    def test_roots_from_string(self):
        settings = ResolverSettings(manifest_roots=os.pathsep.join(["/a", "/b"]))
        assert settings.manifest_roots == (Path("/a"), Path("/b"))

    def test_host_override(self):
        settings = ResolverSettings(host_os="Windows")
        assert settings.host() == HostDescriptor(os=HostOS.WINDOWS)

    def test_host_detected_when_unset(self):
        with patch("workload_resolver.host.sys.platform", "darwin"):
            assert ResolverSettings(host_os="").host().os == HostOS.UNIX

    def test_invalid_host_rejected(self):
        with pytest.raises(ValidationError):
            ResolverSettings(host_os="amiga")

    def test_builtins_normalized(self):
        assert ResolverSettings(builtin_platforms=["Windows", " "]).builtin_platforms == ("windows",)


class TestResolverSettingsFromEnv:
    """Tests for ResolverSettings.from_env."""

    def test_empty_environment(self):
        assert ResolverSettings.from_env() == ResolverSettings()

    def test_reads_all_variables(self):
        env = {
            "MSBuildEnableWorkloadResolver": "false",
            "WORKLOAD_RESOLVER_MANIFEST_ROOTS": "/opt/sdk-manifests",
            "WORKLOAD_RESOLVER_INSTALLED": "microsoft-android-sdk-full",
            "WORKLOAD_RESOLVER_HOST_OS": "unix",
        }
        with patch.dict(os.environ, env):
            settings = ResolverSettings.from_env()

        assert settings.enable_workload_resolver is False
        assert settings.manifest_roots == (Path("/opt/sdk-manifests"),)
        assert settings.installed_workloads == frozenset({"microsoft-android-sdk-full"})
        assert settings.host_os == HostOS.UNIX

    def test_invalid_value_raises(self):
        with patch.dict(os.environ, {"WORKLOAD_RESOLVER_HOST_OS": "plan9"}):
            with pytest.raises(ValueError):
                ResolverSettings.from_env()
