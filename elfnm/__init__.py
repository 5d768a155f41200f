"""Option parsing, nm-style name ordering, formatted output and text helpers for a symbol lister."""

__version__ = "0.1.0"