"""Business logic for the page registry."""
