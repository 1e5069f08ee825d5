"""Customer support requests."""
