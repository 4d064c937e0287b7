"""Deployment commands."""

from __future__ import annotations

import typer
from rich.table import Table

from .common import console, get_client, handle_cli_errors, print_model

app = typer.Typer(help="Inspect deployments.")


@app.command("list")
@handle_cli_errors
def list_deployments(ctx: typer.Context) -> None:
    deployments = get_client(ctx).deployments.list_deployments()
    table = Table("ID", "Name", "Platform", "Enabled")
    for deployment in deployments:
        platform = deployment.platform.type if deployment.platform else ""
        table.add_row(
            deployment.id or "",
            deployment.name or "",
            platform or "",
            str(bool(deployment.enabled)),
        )
    console.print(table)


@app.command("show")
@handle_cli_errors
def show_deployment(
    ctx: typer.Context, deployment_id: str = typer.Argument(..., help="Deployment id")
) -> None:
    print_model(get_client(ctx).deployments.get_deployment(deployment_id))
