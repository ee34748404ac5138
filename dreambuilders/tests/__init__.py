"""Dream Builders test suite."""
