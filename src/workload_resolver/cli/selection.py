"""Pack and import selection commands for the SDK Workload Resolver CLI."""

import click

from ..exceptions import WorkloadResolverError
from ..resolution import resolve_pack_alias, select_imports, select_packs
from .main import build_context, cli, resolution_options


@cli.command()
@click.argument("pack_id")
@resolution_options
def alias(
    pack_id: str,
    manifests: tuple[str, ...],
    installed: tuple[str, ...],
    host: str | None,
    disable_resolver: bool,
) -> None:
    """Print the concrete pack used for PACK_ID on the host.

    \b
    Examples:
        workload-resolver alias Microsoft.NET.Sdk.Android --host windows
    """
    ctx = build_context(manifests, installed, host, disable_resolver)
    try:
        click.echo(resolve_pack_alias(ctx.registry, pack_id, ctx.host))
    except WorkloadResolverError as e:
        raise click.ClickException(str(e)) from None


@cli.command()
@resolution_options
def imports(
    manifests: tuple[str, ...],
    installed: tuple[str, ...],
    host: str | None,
    disable_resolver: bool,
) -> None:
    """Print the auto-imports activated by the installed workloads."""
    ctx = build_context(manifests, installed, host, disable_resolver)
    if not ctx.resolver_enabled:
        return

    for import_id in select_imports(ctx.registry, ctx.installed, ctx.host):
        click.echo(import_id)


@cli.command()
@click.argument("target_frameworks")
@resolution_options
def packs(
    target_frameworks: str,
    manifests: tuple[str, ...],
    installed: tuple[str, ...],
    host: str | None,
    disable_resolver: bool,
) -> None:
    """Print the concrete packs for a project's satisfied target platforms.

    \b
    Examples:
        workload-resolver packs "net6.0-android;net6.0-ios" --host unix
    """
    ctx = build_context(manifests, installed, host, disable_resolver)
    try:
        result = ctx.aggregator().resolve_target_frameworks(
            target_frameworks, ctx.installed, ctx.resolver_enabled
        )
    except ValueError as e:
        raise click.ClickException(str(e)) from None

    workload_ids: list[str] = []
    for token in result.satisfied_tokens:
        owner = ctx.registry.lookup_platform(token) if ctx.resolver_enabled else None
        if owner is not None and owner.id not in workload_ids:
            workload_ids.append(owner.id)

    for pack_id in select_packs(ctx.registry, workload_ids, ctx.host):
        click.echo(pack_id)
