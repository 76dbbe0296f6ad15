"""Car queries."""
