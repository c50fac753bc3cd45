"""Command handlers invoked by the CLI."""
