"""Catalog manager for book and loan operations."""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from .notifications import Listener, Notifier
from .schemas import BookRecord, LoanRecord, OperationResult, Outcome

logger = logging.getLogger(__name__)


class CatalogManager:
    """Manages the book catalog, outstanding loans and new-book listeners.

    No operation raises. Failures are logged (WARNING for lookups that find
    nothing, ERROR for duplicates and dangling references) and reported in
    the returned OperationResult.
    """

    def __init__(
        self,
        notifier: Notifier,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize catalog manager.

        Args:
            notifier: Collaborator that delivers loan and return messages
            clock: Source of loan timestamps (defaults to UTC now)
        """
        self.notifier = notifier
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self._books: list[BookRecord] = []
        self._loans: list[LoanRecord] = []
        self._observers: list[Listener] = []

    def __len__(self) -> int:
        return len(self._books)

    def __repr__(self) -> str:
        return f"<CatalogManager(books={len(self._books)}, loans={len(self._loans)})>"

    @property
    def books(self) -> tuple[BookRecord, ...]:
        return tuple(self._books)

    @property
    def loans(self) -> tuple[LoanRecord, ...]:
        return tuple(self._loans)

    @property
    def observers(self) -> tuple[Listener, ...]:
        return tuple(self._observers)

    def _result(
        self,
        outcome: Outcome,
        message: str,
        book: Optional[BookRecord] = None,
        loan: Optional[LoanRecord] = None,
    ) -> OperationResult:
        result = OperationResult(outcome=outcome, message=message, book=book, loan=loan)
        logger.log(result.level, message)
        return result

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def add_observer(self, listener: Listener) -> None:
        """Register a listener for new books. Registering twice has no effect."""
        if not any(observer is listener for observer in self._observers):
            self._observers.append(listener)

    def remove_observer(self, listener: Listener) -> None:
        """Unregister a listener. Unknown listeners are ignored."""
        self._observers = [o for o in self._observers if o is not listener]

    def notify_observers(self, book_title: str) -> None:
        """Tell every listener about a book, in registration order."""
        for observer in list(self._observers):
            observer.update(book_title)

    # -------------------------------------------------------------------------
    # Books
    # -------------------------------------------------------------------------

    def add_book(self, title: str, author: str, isbn: str) -> OperationResult:
        """Add a book to the catalog.

        Args:
            title: Book title
            author: Book author
            isbn: Unique identifier

        Returns:
            OK with the new record, or DUPLICATE_ISBN if the isbn is taken
        """
        existing = self.search_by_isbn(isbn)
        if existing is not None:
            return self._result(
                Outcome.DUPLICATE_ISBN,
                f"A book with ISBN {isbn} already exists in the catalog: {existing.title}",
                book=existing,
            )

        book = BookRecord(title=title, author=author, isbn=isbn)
        self._books.append(book)
        result = self._result(Outcome.OK, f"Book added: {title} (ISBN: {isbn})", book=book)
        self.notify_observers(title)
        return result

    def remove_book(self, isbn: str) -> OperationResult:
        """Remove a book from the catalog.

        Outstanding loans of the book are kept.

        Args:
            isbn: Identifier of the book to remove

        Returns:
            OK with the removed record, or BOOK_NOT_FOUND
        """
        for index, book in enumerate(self._books):
            if book.isbn == isbn:
                del self._books[index]
                return self._result(
                    Outcome.OK, f"Book removed: {book.title} (ISBN: {isbn})", book=book
                )

        return self._result(
            Outcome.BOOK_NOT_FOUND,
            f"Attempted to remove a book that does not exist, ISBN: {isbn}",
        )

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search_by_title(self, title: str) -> list[BookRecord]:
        """Books whose title contains the given text (case-sensitive)."""
        return [book for book in self._books if title in book.title]

    def search_by_author(self, author: str) -> list[BookRecord]:
        """Books whose author contains the given text (case-sensitive)."""
        return [book for book in self._books if author in book.author]

    def search_by_isbn(self, isbn: str) -> Optional[BookRecord]:
        """Book with exactly this isbn, or None."""
        return next((book for book in self._books if book.isbn == isbn), None)

    def search(self, query: str) -> list[BookRecord]:
        """Search titles, authors and isbns at once.

        Matches books whose title or author contains the query, or whose isbn
        equals it. Each book appears once, in catalog order.

        Args:
            query: Text to look for

        Returns:
            Matching books (possibly empty)
        """
        results = [
            book
            for book in self._books
            if query in book.title or query in book.author or book.isbn == query
        ]

        if results:
            logger.info('Search for "%s" found %d result(s)', query, len(results))
        else:
            logger.info('Search for "%s" returned no results', query)

        return results

    # -------------------------------------------------------------------------
    # Loans
    # -------------------------------------------------------------------------

    def loan_book(self, isbn: str, user_id: str) -> OperationResult:
        """Lend a book to a user and notify them.

        The same book may be on loan to several users at once.

        Args:
            isbn: Identifier of the book
            user_id: Borrowing user

        Returns:
            OK with the new loan, or BOOK_NOT_FOUND
        """
        book = self.search_by_isbn(isbn)
        if book is None:
            return self._result(
                Outcome.BOOK_NOT_FOUND,
                f"Attempted to loan a book that does not exist, ISBN: {isbn}",
            )

        loan = LoanRecord(isbn=isbn, user_id=user_id, date=self.clock())
        self._loans.append(loan)
        result = self._result(
            Outcome.OK, f"Loan registered: {book.title} to {user_id}", book=book, loan=loan
        )
        self.notifier.send_email(user_id, f"You have borrowed the book {book.title}")
        return result

    def return_book(self, isbn: str, user_id: str) -> OperationResult:
        """Close the first outstanding loan of a book by a user.

        If the book has been removed from the catalog since it was lent, the
        loan is still closed but the user is not notified.

        Args:
            isbn: Identifier of the book
            user_id: Returning user

        Returns:
            OK, LOAN_NOT_FOUND, or DANGLING_BOOK when the book is gone
        """
        index = next(
            (
                i
                for i, loan in enumerate(self._loans)
                if loan.isbn == isbn and loan.user_id == user_id
            ),
            None,
        )
        if index is None:
            return self._result(
                Outcome.LOAN_NOT_FOUND,
                f"Attempted to return a book that is not on loan: ISBN {isbn}, user {user_id}",
            )

        loan = self._loans.pop(index)
        logger.info(
            "Return registered: loaned %s, user %s, ISBN %s",
            loan.date.isoformat(),
            user_id,
            isbn,
        )

        book = self.search_by_isbn(isbn)
        if book is None:
            return self._result(
                Outcome.DANGLING_BOOK,
                f"The book with ISBN {isbn} was not found in the catalog",
                loan=loan,
            )

        result = self._result(
            Outcome.OK, f"Return completed: {book.title} from {user_id}", book=book, loan=loan
        )
        self.notifier.send_email(
            user_id, f"You have returned the book with ISBN {isbn}. Thank you!"
        )
        return result

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    def list_all_books(self) -> list[BookRecord]:
        """Snapshot of all books in catalog order."""
        return list(self._books)

    def list_all_loans(self) -> list[LoanRecord]:
        """Snapshot of all outstanding loans, oldest first."""
        return list(self._loans)


# Global catalog instance
_catalog: Optional[CatalogManager] = None


def get_catalog(notifier: Optional[Notifier] = None) -> CatalogManager:
    """Get or create the global catalog instance.

    The notifier is only used on first creation; later calls return the
    existing catalog unchanged.

    Raises:
        ValueError: If no catalog exists yet and no notifier is given
    """
    global _catalog
    if _catalog is None:
        if notifier is None:
            raise ValueError("A notifier is required to create the catalog")
        _catalog = CatalogManager(notifier)
    return _catalog


def reset_catalog() -> None:
    """Reset the global catalog instance. Used for testing."""
    global _catalog
    _catalog = None
