"""userfetch CLI (Typer).

Thin glue: builds the pipeline from `AppSettings`, drives a `UserPresenter`
and renders its state with Rich.
"""

from __future__ import annotations

import asyncio
import json

import typer
from rich.console import Console

from adapters.http_client import HttpxTransportClient
from cli import doctor
from cli.presenter import UserPresenter
from cli.ui_components import build_error_panel, build_user_panel, print_banner
from core.config import AppSettings
from core.logging import configure_logging
from core.services.user_interactor import UserInteractor

app = typer.Typer(no_args_is_help=True, help="Fetch GitHub users through a typed HTTP pipeline.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def build_interactor(settings: AppSettings) -> UserInteractor:
    return UserInteractor(HttpxTransportClient(settings), settings)


@app.callback()
def main() -> None:
    # Runs before any subcommand.
    configure_logging(AppSettings().log_level)


@app.command()
def user(
    username: str = typer.Argument(..., help="GitHub username to look up."),
    as_json: bool = typer.Option(False, "--json", help="Print the user as JSON (schema field names)."),
    banner: bool = typer.Option(False, "--banner", help="Show the welcome banner."),
) -> None:
    """Fetch one user and print it."""

    settings = AppSettings()
    presenter = UserPresenter(build_interactor(settings))
    asyncio.run(presenter.load_user(username))

    if presenter.user is None:
        _err_console.print(build_error_panel(presenter.error_message or "Unknown error."))
        raise typer.Exit(code=1)

    if as_json:
        payload = presenter.user.model_dump(mode="json", by_alias=True)
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))
        return

    if banner:
        print_banner(_console)
    _console.print(build_user_panel(presenter.user))


def run() -> None:
    app()
