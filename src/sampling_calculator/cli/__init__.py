"""Command-line interface for the sampling calculator."""
