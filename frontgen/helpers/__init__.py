"""Helper utilities for the frontgen CLI."""
