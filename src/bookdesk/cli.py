"""Command-line interface for bookdesk.

Built with Typer for commands and Rich for output.
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .catalog import (
    CatalogManager,
    ConsoleNotifier,
    OperationResult,
    Reader,
    RecordingNotifier,
    run_demo,
)
from .config import get_config
from .logs import configure_logging

# Create the main app
app = typer.Typer(
    name="bookdesk",
    help="Manage an in-memory book catalog with loans and notifications.",
    no_args_is_help=True,
)

# Rich console for pretty output
console = Console()


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_result(result: OperationResult) -> None:
    """Print an operation result at its diagnostic level."""
    message = escape(result.message)
    if result.level >= logging.ERROR:
        print_error(message)
    elif result.level >= logging.WARNING:
        print_warning(message)
    else:
        print_success(message)


def format_book_table(catalog: CatalogManager, title: str = "Books") -> Table:
    """Create a rich table for displaying the catalog."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Title", style="cyan", no_wrap=False, max_width=40)
    table.add_column("Author", style="green", max_width=25)
    table.add_column("ISBN", style="yellow")

    for book in catalog.list_all_books():
        table.add_row(escape(book.title), escape(book.author), escape(book.isbn))

    return table


def format_loan_table(catalog: CatalogManager, title: str = "Loans") -> Table:
    """Create a rich table for displaying outstanding loans."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ISBN", style="yellow")
    table.add_column("User", style="green")
    table.add_column("Date", justify="center")

    for loan in catalog.list_all_loans():
        table.add_row(escape(loan.isbn), escape(loan.user_id), loan.date.strftime("%Y-%m-%d %H:%M"))

    return table


# ============================================================================
# Commands
# ============================================================================


@app.command()
def demo(
    readers: Optional[list[str]] = typer.Option(
        None, "--reader", "-r", help="Name of a reader to notify about new books"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Record emails instead of printing them"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also show catalog log records"),
) -> None:
    """Run the loan lifecycle walkthrough on a fresh catalog.

    Adds a book, tries to add a duplicate, then lends and returns it,
    including returns that have no matching loan. Each step is printed
    once; --verbose adds the catalog's own log records on stderr.
    """
    config = get_config()
    errors = config.validate()
    if errors:
        for error in errors:
            print_error(escape(error))
        raise typer.Exit(1)

    if verbose:
        configure_logging(config.log_level_number)

    notifier = RecordingNotifier() if quiet else ConsoleNotifier(console, sender=config.sender)
    catalog = CatalogManager(notifier)
    listeners = [Reader(name, console=console) for name in readers or []]

    for result in run_demo(catalog, listeners):
        print_result(result)

    console.print()
    console.print(format_book_table(catalog))
    console.print(format_loan_table(catalog))

    if isinstance(notifier, RecordingNotifier):
        console.print(f"[dim]{len(notifier.sent)} email(s) recorded[/dim]")


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"bookdesk version {__version__}")


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
