"""Command line interface."""

from griddy.cli.app import create_app

__all__ = ["create_app"]
