"""Tests for catalog schemas."""

import logging
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from bookdesk.catalog.schemas import BookRecord, LoanRecord, OperationResult, Outcome


class TestBookRecord:
    """Tests for BookRecord."""

    def test_create(self):
        """Test creating a book record."""
        book = BookRecord(title="1984", author="George Orwell", isbn="987654321")

        assert book.title == "1984"
        assert str(book) == "1984 by George Orwell (ISBN: 987654321)"

    def test_requires_all_fields(self):
        """Test all three fields are required."""
        with pytest.raises(ValidationError):
            BookRecord(title="1984", author="George Orwell")

    def test_frozen(self):
        """Test records cannot be changed after creation."""
        book = BookRecord(title="1984", author="George Orwell", isbn="987654321")
        with pytest.raises(ValidationError):
            book.isbn = "000"


class TestLoanRecord:
    """Tests for LoanRecord."""

    def test_requires_date(self):
        """Test the loan date must be given."""
        with pytest.raises(ValidationError):
            LoanRecord(isbn="42", user_id="user01")

    def test_explicit_date(self):
        """Test an explicit date is kept."""
        when = datetime(2025, 1, 1, tzinfo=timezone.utc)
        loan = LoanRecord(isbn="42", user_id="user01", date=when)
        assert loan.date == when


class TestOperationResult:
    """Tests for OperationResult."""

    @pytest.mark.parametrize(
        "outcome, level, committed",
        [
            (Outcome.OK, logging.INFO, True),
            (Outcome.DUPLICATE_ISBN, logging.ERROR, False),
            (Outcome.BOOK_NOT_FOUND, logging.WARNING, False),
            (Outcome.LOAN_NOT_FOUND, logging.WARNING, False),
            (Outcome.DANGLING_BOOK, logging.ERROR, True),
        ],
    )
    def test_outcome_properties(self, outcome, level, committed):
        """Test level and commit state for each outcome."""
        result = OperationResult(outcome=outcome, message="m")

        assert result.level == level
        assert result.committed is committed
        assert result.ok is (outcome == Outcome.OK)

    def test_outcome_values(self):
        """Test outcomes serialize as plain strings."""
        result = OperationResult(outcome=Outcome.LOAN_NOT_FOUND, message="m")
        assert result.model_dump()["outcome"] == "loan_not_found"
