"""Command line interface."""

from splitter_layout.cli.app import create_app

__all__ = ["create_app"]
