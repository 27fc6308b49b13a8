"""Scaleway CLI - profile initialization."""

__version__ = "2.0.0"
