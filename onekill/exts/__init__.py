"""Discord commands."""
