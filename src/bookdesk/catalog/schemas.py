"""Pydantic schemas for catalog records and operation results."""

import logging
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Outcome(str, Enum):
    """Result of a mutating catalog operation."""

    OK = "ok"
    DUPLICATE_ISBN = "duplicate_isbn"  # add_book with an existing isbn
    BOOK_NOT_FOUND = "book_not_found"  # remove_book / loan_book
    LOAN_NOT_FOUND = "loan_not_found"  # return_book with no matching loan
    DANGLING_BOOK = "dangling_book"  # loan returned, book no longer cataloged


# Diagnostic level emitted for each outcome
OUTCOME_LEVELS = {
    Outcome.OK: logging.INFO,
    Outcome.DUPLICATE_ISBN: logging.ERROR,
    Outcome.BOOK_NOT_FOUND: logging.WARNING,
    Outcome.LOAN_NOT_FOUND: logging.WARNING,
    Outcome.DANGLING_BOOK: logging.ERROR,
}


# ============================================================================
# Records
# ============================================================================


class BookRecord(BaseModel):
    """A cataloged book. The isbn is unique within a catalog."""

    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    isbn: str = Field(..., description="Unique identifier")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"


class LoanRecord(BaseModel):
    """An outstanding loan of a book to a user."""

    isbn: str
    user_id: str
    date: datetime

    model_config = {"frozen": True}


# ============================================================================
# Results
# ============================================================================


class OperationResult(BaseModel):
    """Typed result returned by every mutating catalog operation."""

    outcome: Outcome
    message: str
    book: Optional[BookRecord] = None
    loan: Optional[LoanRecord] = None

    @property
    def ok(self) -> bool:
        """Check if the operation completed without any diagnostic."""
        return self.outcome == Outcome.OK

    @property
    def committed(self) -> bool:
        """Check if the operation changed catalog state.

        A dangling return still removes the loan, so it counts as committed.
        """
        return self.outcome in (Outcome.OK, Outcome.DANGLING_BOOK)

    @property
    def level(self) -> int:
        """Logging level that was emitted for this result."""
        return OUTCOME_LEVELS[self.outcome]
