"""
Main entry point for the viewforge CLI when run as a module.

This allows the CLI to be executed using:
    python -m viewforge.cli
"""

from . import main

if __name__ == '__main__':
    main()
