"""Asset commands for external DNS names."""

from __future__ import annotations

import typer

from .common import console, get_client, handle_cli_errors

app = typer.Typer(help="Manage assets.")
dns_app = typer.Typer(help="Manage external-dns-name assets.")
app.add_typer(dns_app, name="dns")


@dns_app.command("list")
@handle_cli_errors
def list_dns_assets(ctx: typer.Context) -> None:
    """List declared external DNS names."""

    result = get_client(ctx).assets_query.get_external_dns_name_assets()
    for row in result.assets:
        for asset in row:
            console.print(f"{asset.dns_name or asset.name}  deployment={asset.deployment_id}")
    console.print(f"{result.rows} row(s)")


@dns_app.command("add")
@handle_cli_errors
def add_dns_asset(
    ctx: typer.Context,
    deployment_id: str = typer.Argument(..., help="Deployment id"),
    dns_name: str = typer.Argument(..., help="DNS name to declare"),
    replaces: str | None = typer.Option(None, help="Existing DNS name to rename"),
) -> None:
    """Declare DNS_NAME on a deployment, or rename an existing one with --replaces."""

    client = get_client(ctx)
    if replaces:
        status = client.assets_write.update_external_dns_name_asset(
            deployment_id, dns_name, replaces
        )
    else:
        status = client.assets_write.create_external_dns_name_asset(deployment_id, dns_name)
    console.print(f"[green]Declared[/green] {dns_name} (HTTP {status})")


@dns_app.command("remove")
@handle_cli_errors
def remove_dns_asset(
    ctx: typer.Context,
    deployment_id: str = typer.Argument(..., help="Deployment id"),
    dns_name: str = typer.Argument(..., help="DNS name to remove"),
) -> None:
    status = get_client(ctx).assets_write.remove_external_dns_name_asset(deployment_id, dns_name)
    console.print(f"[green]Removed[/green] {dns_name} (HTTP {status})")
