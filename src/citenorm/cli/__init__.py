"""Command-line interface for citenorm."""

from citenorm.cli.main import cli

__all__ = ["cli"]
