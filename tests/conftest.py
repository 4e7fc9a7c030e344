"""Pytest configuration and shared fixtures.

This module provides fixtures for testing bookdesk, including a fresh
catalog wired to a recording notifier and sample book data.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Generator

import pytest

from bookdesk.catalog.manager import CatalogManager, reset_catalog
from bookdesk.catalog.notifications import Reader, RecordingNotifier
from bookdesk.config import reset_config


# ============================================================================
# Global State Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None, None, None]:
    """Reset the global catalog, config and package logger around each test."""
    reset_catalog()
    reset_config()
    yield
    reset_catalog()
    reset_config()

    package_logger = logging.getLogger("bookdesk")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)

    for key in ("BOOKDESK_LOG_LEVEL", "BOOKDESK_SENDER"):
        os.environ.pop(key, None)


# ============================================================================
# Catalog Fixtures
# ============================================================================


FIXED_NOW = datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Create a notifier that records outgoing messages."""
    return RecordingNotifier()


@pytest.fixture
def catalog(notifier: RecordingNotifier) -> CatalogManager:
    """Create an empty catalog with a fixed clock."""
    return CatalogManager(notifier, clock=lambda: FIXED_NOW)


@pytest.fixture
def sample_books() -> list[tuple[str, str, str]]:
    """Sample (title, author, isbn) tuples."""
    return [
        ("El Gran Gatsby", "F. Scott Fitzgerald", "123456789"),
        ("1984", "George Orwell", "987654321"),
        ("Animal Farm", "George Orwell", "111111111"),
        ("Tender Is the Night", "F. Scott Fitzgerald", "222222222"),
    ]


@pytest.fixture
def stocked_catalog(catalog: CatalogManager, sample_books) -> CatalogManager:
    """Create a catalog holding the sample books."""
    for title, author, isbn in sample_books:
        catalog.add_book(title, author, isbn)
    return catalog


@pytest.fixture
def reader() -> Reader:
    """Create a reader listener without console output."""
    return Reader("Ana")


@pytest.fixture
def fixed_now() -> datetime:
    """Timestamp returned by the catalog fixture's clock."""
    return FIXED_NOW
