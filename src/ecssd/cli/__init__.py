# src/ecssd/cli/__init__.py
"""
ecssd CLI Package

This package exposes the top-level Typer `app` used by the console
entrypoint and the tests.
"""

from .main import app

__all__ = ["app"]
