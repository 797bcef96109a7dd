"""Web step definitions."""
