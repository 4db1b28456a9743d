"""rosterctl: interactive player roster console."""

__version__ = "0.1.0"
