"""Semantic versions derived from git tags."""

__version__ = "1.0.0"
