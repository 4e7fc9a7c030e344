"""Book catalog module.

Provides functionality for:
- Adding, removing and searching books
- Lending and returning books with borrower notifications
- Notifying listeners about new books
"""

from .demo import run_demo
from .manager import CatalogManager, get_catalog, reset_catalog
from .notifications import (
    ConsoleNotifier,
    Listener,
    Notifier,
    Reader,
    RecordingNotifier,
)
from .schemas import BookRecord, LoanRecord, OperationResult, Outcome

__all__ = [
    "CatalogManager",
    "get_catalog",
    "reset_catalog",
    "run_demo",
    "BookRecord",
    "LoanRecord",
    "OperationResult",
    "Outcome",
    "Notifier",
    "Listener",
    "ConsoleNotifier",
    "RecordingNotifier",
    "Reader",
]
