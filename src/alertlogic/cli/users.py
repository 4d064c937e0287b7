"""User commands."""

from __future__ import annotations

import typer
from rich.table import Table

from ..models.aims import UserList
from .common import console, get_client, handle_cli_errors, print_model

app = typer.Typer(help="Inspect AIMS users.")


def _print_users(users: UserList) -> None:
    table = Table("ID", "Name", "Email", "Active")
    for user in users.users:
        table.add_row(user.id or "", user.name or "", user.email or "", str(bool(user.active)))
    console.print(table)


@app.command("list")
@handle_cli_errors
def list_users(
    ctx: typer.Context,
    role_id: str | None = typer.Option(None, help="Only list members of this role"),
    email: str | None = typer.Option(None, help="Search users across accounts by email"),
) -> None:
    """List users of the account."""

    client = get_client(ctx)
    if email:
        users = client.users.list_users_by_email(email)
    else:
        users = client.users.list_users(role_id=role_id)
    _print_users(users)


@app.command("show")
@handle_cli_errors
def show_user(
    ctx: typer.Context,
    user_id: str = typer.Argument(..., help="User id"),
    include_role_ids: bool = typer.Option(False, help="Embed assigned role ids"),
) -> None:
    """Print a user's details."""

    user = get_client(ctx).users.get_user_details(user_id, include_role_ids=include_role_ids)
    print_model(user)


@app.command("roles")
@handle_cli_errors
def user_roles(ctx: typer.Context, user_id: str = typer.Argument(..., help="User id")) -> None:
    """List roles assigned to a user."""

    roles = get_client(ctx).user_roles.get_assigned_roles(user_id)
    for role in roles.roles:
        console.print(f"{role.id}  {role.name or ''}")


@app.command("permissions")
@handle_cli_errors
def user_permissions(
    ctx: typer.Context, user_id: str = typer.Argument(..., help="User id")
) -> None:
    """Print the effective permissions of a user."""

    permissions = get_client(ctx).user_roles.get_user_permissions(user_id)
    for entry in permissions.permissions:
        for name, value in entry.items():
            colour = "green" if value.value == "allowed" else "red"
            console.print(f"[{colour}]{value.value}[/{colour}] {name}")
