"""Command-line interface module for the XML determiner.

This module provides the ``xml-determiner`` tool for checking documents given
as text, validating files and profiling validation runs.
"""

from .main import main

__all__ = ["main"]
