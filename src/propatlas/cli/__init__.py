"""Command line interface."""

from .prove import main

__all__ = ['main']
