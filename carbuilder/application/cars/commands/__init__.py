"""Car commands."""
