"""
Command-line front ends for the portfolio terminal.
"""

from termfolio.cli.main import main

__all__ = ["main"]
