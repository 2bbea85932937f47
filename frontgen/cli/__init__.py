"""Command-line interface for frontgen."""
