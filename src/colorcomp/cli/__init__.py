"""Command line interface for colorcomp."""

from .main import cli

__all__ = ["cli"]
