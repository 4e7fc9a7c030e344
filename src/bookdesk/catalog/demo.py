"""Scripted walkthrough of the catalog's loan lifecycle."""

from typing import Iterable, Optional

from .manager import CatalogManager
from .notifications import Listener
from .schemas import OperationResult

GATSBY = ("El Gran Gatsby", "F. Scott Fitzgerald", "123456789")
ORWELL = ("1984", "George Orwell", "123456789")  # reuses Gatsby's isbn on purpose
MISSING_ISBN = "987654321"
DEMO_USER = "user01"


def run_demo(
    catalog: CatalogManager,
    listeners: Optional[Iterable[Listener]] = None,
) -> list[OperationResult]:
    """Run the demo scenario against a catalog.

    Args:
        catalog: Catalog to operate on
        listeners: Listeners to register before any book is added

    Returns:
        Result of every mutating step, in order
    """
    for listener in listeners or ():
        catalog.add_observer(listener)

    return [
        catalog.add_book(*GATSBY),
        catalog.add_book(*ORWELL),
        catalog.return_book(MISSING_ISBN, DEMO_USER),
        catalog.loan_book(GATSBY[2], DEMO_USER),
        catalog.return_book(GATSBY[2], DEMO_USER),
        catalog.return_book(GATSBY[2], DEMO_USER),
        catalog.return_book(MISSING_ISBN, DEMO_USER),
    ]
