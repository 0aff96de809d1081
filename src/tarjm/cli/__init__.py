"""Command-line surface and mode dispatch."""
