from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape

from ..client import AlertLogic
from ..config import LOG_LEVELS, AlertLogicSettings
from ..errors import AlertLogicError, ConfigurationError, HttpError, InvalidCredentialsError

console = Console()

LOG_FORMAT = "%(levelname)s %(name)s - %(message)s"


def configure_logging(level_name: str) -> None:
    """Attach a stream handler to the ``alertlogic`` logger at ``level_name``."""

    name = level_name.upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(
            f"unknown log level {level_name!r}; expected one of {', '.join(LOG_LEVELS)}"
        )
    level = getattr(logging, name)
    logger = logging.getLogger("alertlogic")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)


def load_settings() -> AlertLogicSettings:
    """Read :class:`AlertLogicSettings`, reporting bad values as :class:`ConfigurationError`."""

    try:
        return AlertLogicSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid ALERTLOGIC_* settings: {exc}") from exc


def _render_http_error(exc: HttpError) -> None:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    details = getattr(exc, "details", None)
    if isinstance(details, (dict, list)):
        console.print(json.dumps(details, indent=2))


CommandParams = ParamSpec("CommandParams")
CommandReturn = TypeVar("CommandReturn")


def handle_cli_errors(
    func: Callable[CommandParams, CommandReturn],
) -> Callable[CommandParams, CommandReturn]:
    @wraps(func)
    def wrapper(*args: CommandParams.args, **kwargs: CommandParams.kwargs) -> CommandReturn:
        try:
            return func(*args, **kwargs)
        except typer.BadParameter:
            raise
        except typer.Exit:
            raise
        except InvalidCredentialsError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            console.print(
                "Check ALERTLOGIC_API_TOKEN, ALERTLOGIC_ACCESS_KEY_ID/ALERTLOGIC_SECRET_KEY "
                "or ALERTLOGIC_USERNAME/ALERTLOGIC_PASSWORD."
            )
            raise typer.Exit(1) from None
        except HttpError as exc:
            _render_http_error(exc)
            raise typer.Exit(1) from None
        except ConfigurationError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            console.print("Set ALERTLOGIC_ACCOUNT_ID and one set of credentials.")
            raise typer.Exit(1) from None
        except AlertLogicError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise typer.Exit(1) from None
        except Exception as exc:
            if os.getenv("ALERTLOGIC_DEBUG"):
                raise
            console.print(f"[red]Error:[/red] Unexpected failure: {escape(str(exc))}")
            console.print("Set ALERTLOGIC_DEBUG=1 for a stack trace.")
            raise typer.Exit(1) from exc

    return wrapper


def get_client(ctx: typer.Context) -> AlertLogic:
    """Return the :class:`AlertLogic` cached on ``ctx``, building it on first use."""

    ctx_obj = cast(dict[str, Any], ctx.ensure_object(dict))
    client = ctx_obj.get("client")
    if client is not None:
        return cast(AlertLogic, client)
    settings = ctx_obj.get("settings")
    if not isinstance(settings, AlertLogicSettings):
        settings = load_settings()
    client = AlertLogic.from_settings(settings)
    ctx_obj["client"] = client
    ctx.call_on_close(client.close)
    return client


def print_model(model: BaseModel) -> None:
    console.print_json(model.model_dump_json(by_alias=True, exclude_none=True))


__all__ = [
    "configure_logging",
    "console",
    "get_client",
    "handle_cli_errors",
    "load_settings",
    "print_model",
]
