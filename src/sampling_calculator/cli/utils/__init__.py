"""Shared helpers for CLI commands: output formatting, option definitions, and groups."""
