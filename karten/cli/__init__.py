"""Command-line interface for Karten."""
