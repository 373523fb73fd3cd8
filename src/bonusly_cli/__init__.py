"""Command-line tool and typed client for the Bonusly REST API."""

__version__ = "0.1.0"
