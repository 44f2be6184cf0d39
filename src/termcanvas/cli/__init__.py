"""Command-line demos for termcanvas."""

from termcanvas.cli.app import create_app

__all__ = ["create_app"]
