"""Command line interface for sample-mean animations."""

from .cli import app, main

__all__ = ["app", "main"]
