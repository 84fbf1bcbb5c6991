"""Illustrated creational design patterns: a fluent builder and prototype cloning."""

__version__ = "0.1.0"
