"""Mini README: Entry point CLI for the expense tracker.

``serve`` starts the FastAPI application with uvicorn. The remaining
commands act as a terminal client against a running server. ``list`` and
``summary`` load the current list; ``add``, ``edit``, and ``delete`` send a
single request and print the server's reply. Each command closes its HTTP
connection before returning. Host, port, and API URL default to the
``EXPENSE_TRACKER_`` settings.
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from expensetracker.client import ClientApplication, TransactionApiClient
from expensetracker.configuration import get_settings
from expensetracker.finance import Transaction, TransactionType
from expensetracker.logging_utils import configure_root_logger

cli = typer.Typer(help="Run and use the expense tracker.")


def _build_application(api_url: Optional[str] = None) -> ClientApplication:
    return ClientApplication(TransactionApiClient(base_url=api_url or get_settings().api_base_url))


def _format(transaction: Transaction) -> str:
    return (
        f"#{transaction.transaction_id:<4} {transaction.transaction_type.value:<8} "
        f"{transaction.amount:>12.2f}  {transaction.name}"
    )


def _exit_on_error(application: ClientApplication) -> None:
    if application.error:
        typer.echo(f"Error: {application.error}", err=True)
        raise typer.Exit(code=1)


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the API server using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # 0.0.0.0 is a bind address, not something a browser or client can open.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting expense tracker on {effective_host}:{effective_port}.\n"
        f"API available at http://{browser_host}:{effective_port}/api/transactions"
    )
    uvicorn.run(
        "expensetracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command("list")
def list_transactions(
    api_url: str = typer.Option(None, help="Base URL of the API server."),
) -> None:
    """Print every transaction followed by the totals."""

    with _build_application(api_url) as application:
        application.load()
        _exit_on_error(application)
        if not application.transactions:
            typer.echo("No transactions yet.")
        for transaction in application.transactions:
            typer.echo(_format(transaction))
        _echo_totals(application)


@cli.command()
def add(
    name: str = typer.Argument(..., help="Display label."),
    transaction_type: TransactionType = typer.Argument(..., help="Income or Expenses."),
    amount: float = typer.Argument(..., help="Amount of the transaction."),
    api_url: str = typer.Option(None, help="Base URL of the API server."),
) -> None:
    """Create a transaction."""

    with _build_application(api_url) as application:
        created = application.create(name, transaction_type, amount)
        _exit_on_error(application)
        typer.echo(f"Created {_format(created)}")


@cli.command()
def edit(
    transaction_id: int = typer.Argument(..., help="Id of the transaction to replace."),
    name: str = typer.Argument(..., help="Display label."),
    transaction_type: TransactionType = typer.Argument(..., help="Income or Expenses."),
    amount: float = typer.Argument(..., help="Amount of the transaction."),
    api_url: str = typer.Option(None, help="Base URL of the API server."),
) -> None:
    """Replace the fields of an existing transaction."""

    with _build_application(api_url) as application:
        updated = application.update(transaction_id, name, transaction_type, amount)
        _exit_on_error(application)
        typer.echo(f"Updated {_format(updated)}")


@cli.command()
def delete(
    transaction_id: int = typer.Argument(..., help="Id of the transaction to remove."),
    api_url: str = typer.Option(None, help="Base URL of the API server."),
) -> None:
    """Delete a transaction."""

    with _build_application(api_url) as application:
        application.delete(transaction_id)
        _exit_on_error(application)
        typer.echo(f"Deleted transaction #{transaction_id}")


@cli.command()
def summary(
    api_url: str = typer.Option(None, help="Base URL of the API server."),
) -> None:
    """Print income, expense, and net totals."""

    with _build_application(api_url) as application:
        application.load()
        _exit_on_error(application)
        _echo_totals(application)


def _echo_totals(application: ClientApplication) -> None:
    totals = application.summary()
    typer.echo(
        f"Income: {totals.income:.2f}  Expenses: {totals.expenses:.2f}  Total: {totals.net:.2f}"
    )


if __name__ == "__main__":
    cli()
