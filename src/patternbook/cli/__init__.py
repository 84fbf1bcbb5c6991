"""Command-line interface package."""
