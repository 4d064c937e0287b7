from __future__ import annotations

import typer

from ..config import AlertLogicSettings
from . import account, assets, deployments, roles, users
from .common import configure_logging, handle_cli_errors, load_settings

app = typer.Typer(help="Alert Logic Cloud Insight CLI")


def _register_sub_app(name: str, sub_app: typer.Typer) -> None:
    app.add_typer(sub_app, name=name)


_register_sub_app("account", account.app)
_register_sub_app("users", users.app)
_register_sub_app("roles", roles.app)
_register_sub_app("deployments", deployments.app)
_register_sub_app("assets", assets.app)


@app.callback()
@handle_cli_errors
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging and settings shared by every command."""

    data = ctx.ensure_object(dict)
    settings = data.get("settings")
    if not isinstance(settings, AlertLogicSettings):
        settings = load_settings()
        data["settings"] = settings
    configure_logging("DEBUG" if verbose else settings.log_level)


__all__ = ["app"]
