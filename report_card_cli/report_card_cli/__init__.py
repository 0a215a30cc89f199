"""Command-line interface for Report Card."""
