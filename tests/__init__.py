"""rosterctl test suite."""
