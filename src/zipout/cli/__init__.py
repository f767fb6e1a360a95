"""Command-line interface modules for zipout."""

from zipout.cli.run_zip import run_zip_output, main

__all__ = ['run_zip_output', 'main']
