"""Command-line interface modules for recur."""

from recur.cli.run_levels import run_level_files, main

__all__ = ['run_level_files', 'main']
