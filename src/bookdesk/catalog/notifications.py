"""Notification collaborators for the catalog.

The catalog talks to two kinds of external parties:

- a Notifier, which delivers messages to borrowers on loan and return
- Listeners, which are told about every newly added book

Both are structural protocols, so any object with the right method works.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)


@runtime_checkable
class Notifier(Protocol):
    """Delivers a message to a user."""

    def send_email(self, user_id: str, message: str) -> None:
        ...


@runtime_checkable
class Listener(Protocol):
    """Receives the title of each book added to the catalog."""

    def update(self, book_title: str) -> None:
        ...


class ConsoleNotifier:
    """Notifier that prints outgoing emails to the console."""

    def __init__(self, console: Optional[Console] = None, sender: str = "bookdesk"):
        """Initialize console notifier.

        Args:
            console: Rich console to print to (defaults to stdout)
            sender: Name shown as the origin of each message
        """
        self.console = console or Console()
        self.sender = sender

    def send_email(self, user_id: str, message: str) -> None:
        logger.debug("Sending email to %s: %s", user_id, message)
        self.console.print(
            f"[dim]{escape(self.sender)}[/dim] "
            f"[bold]Sending email to {escape(user_id)}:[/bold] {escape(message)}"
        )


class RecordingNotifier:
    """Notifier that keeps every message in memory instead of sending it."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send_email(self, user_id: str, message: str) -> None:
        self.sent.append((user_id, message))

    def messages_for(self, user_id: str) -> list[str]:
        """Messages sent to one user, oldest first."""
        return [message for recipient, message in self.sent if recipient == user_id]


class Reader:
    """A person who wants to hear about new books."""

    def __init__(self, name: str, console: Optional[Console] = None):
        self.name = name
        self.console = console
        self.notified: list[str] = []

    def __repr__(self) -> str:
        return f"<Reader(name='{self.name}')>"

    def update(self, book_title: str) -> None:
        self.notified.append(book_title)
        if self.console is not None:
            self.console.print(
                f"{escape(self.name)} has been notified about the new book: "
                f"[cyan]{escape(book_title)}[/cyan]"
            )
