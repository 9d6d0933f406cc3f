"""Command-line interface for the violin tuner."""

from .main import main

__all__ = ["main"]
