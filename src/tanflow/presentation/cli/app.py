"""tanflow CLI application using Typer.

Runs FinTS operations from the terminal. Any TAN or decoupled confirmation
the bank asks for is handled interactively on the console, and the session
state is kept between runs.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from datetime import date, timedelta
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.table import Table

from tanflow.application.services import (
    AuthenticationDispatcher,
    ChallengePresenter,
    DecoupledAuthenticator,
    SessionOrchestrator,
    TanAuthenticator,
)
from tanflow.domain.shared.exceptions import DomainException
from tanflow.infrastructure.banking import (
    ChallengeImageDecoder,
    FetchAccountsAction,
    FetchTransactionsAction,
    HhdFlickerDecoder,
    PythonFintsAdapter,
    SvgFlickerRenderer,
    build_connection_options,
    create_engine,
)
from tanflow.infrastructure.persistence import FileSessionStore
from tanflow.presentation.cli.console_user_io import ConsoleUserIO
from tanflow_config import Settings, get_settings

app = typer.Typer(
    name="tanflow",
    help="tanflow - FinTS banking with TAN and decoupled authentication",
    no_args_is_help=True,
)
console = Console()

# Create session subcommand group
session_app = typer.Typer(
    name="session",
    help="Stored session state",
    no_args_is_help=True,
)
app.add_typer(session_app)

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    """Configure logging once per CLI run.

    - Console output with timestamps and module names (stderr)
    - Configurable log level for tanflow modules (from settings)
    - WARNING level for python-fints, which logs whole messages
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("tanflow").setLevel(log_level)
    logging.getLogger("fints").setLevel(logging.WARNING)


def _session_store(settings: Settings) -> FileSessionStore:
    key = settings.session_encryption_key
    return FileSessionStore(
        settings.session_file,
        encryption_key=key.get_secret_value().encode() if key else None,
    )


def build_orchestrator(
    settings: Settings,
    engine: PythonFintsAdapter,
    user_io: ConsoleUserIO,
) -> SessionOrchestrator:
    """Wire the authentication flow around an engine."""
    presenter = ChallengePresenter(
        user_io,
        flicker_decoder=HhdFlickerDecoder(),
        image_decoder=ChallengeImageDecoder(),
        flicker_renderer=SvgFlickerRenderer(),
    )
    dispatcher = AuthenticationDispatcher(
        TanAuthenticator(engine, user_io, presenter),
        DecoupledAuthenticator(
            engine,
            user_io,
            presenter,
            confirmation_token=settings.confirmation_token,
        ),
    )
    return SessionOrchestrator(engine, dispatcher, _session_store(settings))


def _create_engine(settings: Settings) -> PythonFintsAdapter:
    pin = settings.fints_pin.get_secret_value() if settings.fints_pin else ""
    options = build_connection_options(
        blz=settings.fints_blz,
        server_url=settings.fints_server_url,
        product_id=settings.fints_product_id,
        product_version=settings.fints_product_version,
        user_id=settings.fints_username,
        pin=pin,
        tan_mechanism=settings.fints_tan_mechanism,
        tan_medium=settings.fints_tan_medium,
    )
    return create_engine(options)


@contextmanager
def _banking_session() -> Iterator[SessionOrchestrator]:
    """Restore the stored session, log in and close the dialog afterwards."""
    settings = get_settings()
    _configure_logging(settings)

    engine: Optional[PythonFintsAdapter] = None
    try:
        engine = _create_engine(settings)
        orchestrator = build_orchestrator(settings, engine, ConsoleUserIO(console))
        orchestrator.restore_session()
        orchestrator.login()
        yield orchestrator
        engine.close()
        orchestrator.persist_session()
    except DomainException as e:
        logger.debug("Command failed: %r", e)
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from e
    finally:
        if engine is not None:
            engine.close()


@app.command("login")
def login() -> None:
    """Log in and complete any strong authentication the bank asks for."""
    with _banking_session():
        console.print("[green]Logged in.[/green]")


@app.command("accounts")
def accounts() -> None:
    """List the SEPA accounts of the user."""
    with _banking_session() as orchestrator:
        action = orchestrator.perform_action(FetchAccountsAction())

    table = Table(title="Accounts")
    table.add_column("IBAN", style="cyan")
    table.add_column("BIC")
    table.add_column("Account number")
    for account in action.result or []:
        table.add_row(
            getattr(account, "iban", ""),
            getattr(account, "bic", ""),
            getattr(account, "accountnumber", ""),
        )
    console.print(table)


@app.command("transactions")
def transactions(
    iban: str = typer.Option(..., help="IBAN of the account"),
    days: int = typer.Option(30, min=1, help="Number of days to look back"),
) -> None:
    """Show booked transactions of one account."""
    wanted = iban.replace(" ", "").upper()
    with _banking_session() as orchestrator:
        accounts_action = orchestrator.perform_action(FetchAccountsAction())
        account = next(
            (
                acc
                for acc in accounts_action.result or []
                if getattr(acc, "iban", "").replace(" ", "").upper() == wanted
            ),
            None,
        )
        if account is None:
            console.print(f"[red]Account {iban} not found.[/red]")
            raise typer.Exit(code=1)

        action = orchestrator.perform_action(
            FetchTransactionsAction(account, date.today() - timedelta(days=days))
        )

    table = Table(title=f"Transactions {account.iban}")
    table.add_column("Date")
    table.add_column("Amount", justify="right")
    table.add_column("Purpose")
    for transaction in action.result or []:
        data = getattr(transaction, "data", {})
        table.add_row(
            str(data.get("date", "")),
            str(data.get("amount", "")),
            str(data.get("purpose", "") or ""),
        )
    console.print(table)


@session_app.command("clear")
def clear_session() -> None:
    """Forget the stored session state."""
    settings = get_settings()
    store = _session_store(settings)
    store.clear()
    console.print(f"Removed session state [dim]{store.path}[/dim]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
