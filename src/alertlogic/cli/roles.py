"""Role commands."""

from __future__ import annotations

import typer
from rich.table import Table

from .common import console, get_client, handle_cli_errors, print_model

app = typer.Typer(help="Inspect AIMS roles.")


@app.command("list")
@handle_cli_errors
def list_roles(
    ctx: typer.Context,
    global_roles: bool = typer.Option(False, "--global", help="List global roles instead"),
) -> None:
    """List account (or global) roles."""

    client = get_client(ctx)
    roles = client.roles.list_global_roles() if global_roles else client.roles.list_roles()
    table = Table("ID", "Name", "Permissions")
    for role in roles.roles:
        table.add_row(role.id or "", role.name or "", str(len(role.permissions)))
    console.print(table)


@app.command("show")
@handle_cli_errors
def show_role(
    ctx: typer.Context,
    role_id: str = typer.Argument(..., help="Role id"),
    global_role: bool = typer.Option(False, "--global", help="Look up a global role"),
) -> None:
    """Print a role's details."""

    client = get_client(ctx)
    if global_role:
        role = client.roles.get_global_role_details(role_id)
    else:
        role = client.roles.get_role_details(role_id)
    print_model(role)
