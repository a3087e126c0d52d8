"""
fsadmin Command Line Interface.
"""

from fsadmin.cli.main import cli, main

__all__ = ["cli", "main"]
