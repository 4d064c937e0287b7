"""Account commands."""

from __future__ import annotations

import typer

from ..models.aims import AccountRelationship
from .common import console, get_client, handle_cli_errors, print_model

app = typer.Typer(help="Inspect the configured Alert Logic account.")


@app.command("show")
@handle_cli_errors
def show_account(ctx: typer.Context) -> None:
    """Print account details."""

    print_model(get_client(ctx).accounts.get_account_details())


@app.command("relationship")
@handle_cli_errors
def account_relationship(
    ctx: typer.Context,
    related_account_id: str = typer.Argument(..., help="Secondary account id"),
    relationship: AccountRelationship = typer.Option(
        AccountRelationship.MANAGED, help="Relationship to check"
    ),
) -> None:
    """Check whether the account has RELATIONSHIP to RELATED_ACCOUNT_ID."""

    status = get_client(ctx).accounts.get_account_relationship(related_account_id, relationship)
    console.print(
        f"[green]{relationship.value}[/green] relationship with {related_account_id} "
        f"exists (HTTP {status})"
    )
