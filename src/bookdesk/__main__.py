"""Main entry point for the bookdesk package."""

from bookdesk.cli import main

if __name__ == "__main__":
    main()
