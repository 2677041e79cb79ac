"""
Command-line todo tracker package.

The package keeps every todo in a single SQLite file and exposes five
operations (add, list, complete, delete, update) through the `todo` console
script defined in `todo_cli.cli`.
"""

__version__ = "0.1.0"
