"""In-memory book catalog with loans and notifications."""

__version__ = "0.1.0"
