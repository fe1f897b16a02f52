"""Resolution commands for the SDK Workload Resolver CLI.

Provides resolve and suggest, the command-line counterparts of a build
checking its workloads and of an IDE asking which workloads to offer.
"""

import json
import sys

import click

from ..resolution import ResolutionResult
from .main import build_context, cli, resolution_options


def _result_json(result: ResolutionResult) -> str:
    data = result.model_dump(mode="json")
    data["errors"] = [error.model_dump(mode="json") for error in result.errors]
    return json.dumps(data, indent=2)


@cli.command()
@click.argument("target_frameworks")
@resolution_options
@click.option(
    "--format", "-f", "output_format", type=click.Choice(["text", "json"]), default="text"
)
def resolve(
    target_frameworks: str,
    manifests: tuple[str, ...],
    installed: tuple[str, ...],
    host: str | None,
    disable_resolver: bool,
    output_format: str,
) -> None:
    """Check that every target platform of a project is usable.

    TARGET_FRAMEWORKS is a ";"-separated list of target-framework monikers.
    Exits with status 1 if any platform is unknown or needs a missing
    workload; every problem is reported, not just the first.

    \b
    Examples:
        workload-resolver resolve net6.0-android
        workload-resolver resolve "net6.0-android;net6.0-ios" --format json
    """
    ctx = build_context(manifests, installed, host, disable_resolver)
    try:
        result = ctx.aggregator().resolve_target_frameworks(
            target_frameworks, ctx.installed, ctx.resolver_enabled
        )
    except ValueError as e:
        raise click.ClickException(str(e)) from None

    if output_format == "json":
        click.echo(_result_json(result))
    else:
        for error in result.errors:
            click.echo(f"error {error}")
        if result.suggested_workloads:
            click.echo("Suggested workloads:")
            for suggestion in result.suggested_workloads:
                component = suggestion.component_id or "-"
                click.echo(f"  - {suggestion.workload_id} (component: {component})")
        if result.all_satisfied:
            click.echo("All target platforms are satisfied.")

    if not result.all_satisfied:
        sys.exit(1)


@cli.command()
@click.argument("target_frameworks")
@resolution_options
@click.option(
    "--format", "-f", "output_format", type=click.Choice(["text", "json"]), default="text"
)
def suggest(
    target_frameworks: str,
    manifests: tuple[str, ...],
    installed: tuple[str, ...],
    host: str | None,
    disable_resolver: bool,
    output_format: str,
) -> None:
    """List workloads to install for a project's target platforms.

    Succeeds even when the project would fail to build.

    \b
    Examples:
        workload-resolver suggest net6.0-ios
    """
    ctx = build_context(manifests, installed, host, disable_resolver)
    try:
        suggestions = ctx.aggregator().resolve_target_frameworks(
            target_frameworks, ctx.installed, ctx.resolver_enabled
        ).suggested_workloads
    except ValueError as e:
        raise click.ClickException(str(e)) from None

    if output_format == "json":
        click.echo(json.dumps([s.model_dump(mode="json") for s in suggestions], indent=2))
        return

    if not suggestions:
        click.echo("No workloads to suggest.")
        return

    for suggestion in suggestions:
        click.echo(f"{suggestion.workload_id}\t{suggestion.component_id or ''}")
