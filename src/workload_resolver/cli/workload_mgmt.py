"""Workload inspection commands for the SDK Workload Resolver CLI.

Provides commands for listing and inspecting workloads in the manifests.
"""

import sys

import click

from .main import build_context, cli, manifest_options


@cli.group()
def workload() -> None:
    """Inspect workloads defined by the manifests.

    \b
    Commands:
        workload-resolver workload list
        workload-resolver workload info <workload-id>
    """
    pass


@workload.command("list")
@manifest_options
def workload_list(
    manifests: tuple[str, ...],
    installed: tuple[str, ...],
) -> None:
    """List workloads and the platforms they own."""
    ctx = build_context(manifests, installed)
    definitions = list(ctx.registry.workloads)

    if not definitions:
        click.echo("No workload manifests loaded.")
        click.echo("Point --manifests or WORKLOAD_RESOLVER_MANIFEST_ROOTS at a manifest root.")
        return

    click.echo("Workloads:")
    for definition in definitions:
        marker = "*" if definition.id in ctx.installed else " "
        platforms = ", ".join(definition.platforms) or "-"
        click.echo(f"{marker} {definition.id}  [{platforms}]")


@workload.command("info")
@click.argument("workload_id")
@manifest_options
def workload_info(
    workload_id: str,
    manifests: tuple[str, ...],
    installed: tuple[str, ...],
) -> None:
    """Show information about a workload."""
    ctx = build_context(manifests, installed)
    definition = ctx.registry.lookup_workload(workload_id)

    if not definition:
        click.echo(f"Error: Workload '{workload_id}' not found.")
        sys.exit(1)

    click.echo(f"Workload: {definition.id}")
    if definition.description:
        click.echo(f"  Description: {definition.description}")
    click.echo(f"  Installed:   {'yes' if definition.id in ctx.installed else 'no'}")
    click.echo(f"  Platforms:   {', '.join(definition.platforms) or '-'}")
    click.echo(f"  Packs:       {', '.join(definition.packs) or '-'}")
    if definition.component_id:
        click.echo(f"  Component:   {definition.component_id}")


@cli.command("manifests")
@manifest_options
def list_manifests(manifests: tuple[str, ...], installed: tuple[str, ...]) -> None:
    """List loaded manifests with their workloads, platforms and component ids."""
    ctx = build_context(manifests, installed)
    loaded = ctx.registry.manifests

    if not loaded:
        click.echo("No workload manifests loaded.")
        return

    for manifest in loaded:
        click.echo(f"{manifest.id} {manifest.version}")
        for definition in manifest.workloads:
            marker = "*" if definition.id in ctx.installed else " "
            platforms = ", ".join(definition.platforms) or "-"
            component = definition.component_id or "-"
            click.echo(f"  {marker} {definition.id}  [{platforms}]  component: {component}")
