"""Main CLI entry point for the SDK Workload Resolver.

Provides inspection commands over workload manifests and projects:
    workload-resolver resolve <target-frameworks>
    workload-resolver suggest <target-frameworks>
    workload-resolver packs <target-frameworks>
    workload-resolver alias <pack-id>
    workload-resolver imports
    workload-resolver workload list
    workload-resolver workload info <workload-id>
    workload-resolver manifests
"""

import logging
from collections.abc import Callable
from typing import Any

import click
from pydantic import BaseModel, ConfigDict

from .. import __version__
from ..config import ResolverSettings
from ..exceptions import WorkloadResolverError
from ..host import HostDescriptor, HostOS
from ..manifests import ManifestRegistry, get_shared_registry
from ..resolution import MultiTargetAggregator, WorkloadRequirementResolver


class ResolutionContext(BaseModel):
    """Inputs for one CLI resolution, merged from options and environment."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    registry: ManifestRegistry
    installed: frozenset[str]
    host: HostDescriptor
    resolver_enabled: bool
    settings: ResolverSettings

    def aggregator(self) -> MultiTargetAggregator:
        resolver = WorkloadRequirementResolver(
            self.registry, builtin_platforms=self.settings.builtin_platforms
        )
        return MultiTargetAggregator(resolver)


def get_registry(manifest_roots: tuple[str, ...], settings: ResolverSettings) -> ManifestRegistry:
    """Get the registry for explicit roots, or the shared one from settings."""
    try:
        if manifest_roots:
            return ManifestRegistry.from_paths(manifest_roots)
        return get_shared_registry(settings)
    except (WorkloadResolverError, FileNotFoundError) as e:
        raise click.ClickException(f"Failed to load workload manifests: {e}") from None


def build_context(
    manifests: tuple[str, ...],
    installed: tuple[str, ...],
    host: str | None = None,
    disable_resolver: bool = False,
) -> ResolutionContext:
    """Merge CLI options over ResolverSettings.from_env().

    Raises:
        click.ClickException: If the environment or manifests are invalid
    """
    try:
        settings = ResolverSettings.from_env()
    except ValueError as e:
        raise click.ClickException(f"Invalid resolver configuration: {e}") from None

    return ResolutionContext(
        registry=get_registry(manifests, settings),
        installed=frozenset(installed) if installed else settings.installed_workloads,
        host=HostDescriptor(os=HostOS(host)) if host else settings.host(),
        resolver_enabled=settings.enable_workload_resolver and not disable_resolver,
        settings=settings,
    )


def _apply(func: Callable[..., Any], options: list[Callable[..., Any]]) -> Callable[..., Any]:
    for option in reversed(options):
        func = option(func)
    return func


def manifest_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options for commands that only read manifests and installed workloads."""
    return _apply(
        func,
        [
            click.option(
                "--manifests",
                "-m",
                multiple=True,
                type=click.Path(),
                help="Manifest root directory (repeatable; default: environment)",
            ),
            click.option(
                "--installed",
                "-i",
                multiple=True,
                help="Installed workload id (repeatable; default: environment)",
            ),
        ],
    )


def resolution_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every command that resolves against manifests."""
    options = [
        manifest_options,
        click.option(
            "--host",
            type=click.Choice([h.value for h in HostOS]),
            help="Host OS class (default: detect)",
        ),
        click.option(
            "--disable-resolver",
            is_flag=True,
            help="Ignore all manifests, as MSBuildEnableWorkloadResolver=false does",
        ),
    ]
    return _apply(func, options)


@click.group()
@click.version_option(version=__version__, prog_name="sdk-workload-resolver")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """SDK Workload Resolver - Workload and platform resolution.

    Determines which optional workloads a project's target platforms need,
    whether they are installed, and which packs and imports apply.

    \b
    Resolve a project:
        workload-resolver resolve "net6.0-android;net6.0-ios"
        workload-resolver suggest "net6.0-android;net6.0-ios"

    \b
    Inspect manifests:
        workload-resolver workload list
        workload-resolver manifests
        workload-resolver alias <pack-id> --host windows
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def main() -> None:
    """Main entry point."""
    cli()


# Command modules register themselves on ``cli``
from . import resolve, selection, workload_mgmt  # noqa: E402, F401

if __name__ == "__main__":
    main()
