"""
Entry point for running funcsetup as a module.

Usage: python -m funcsetup [command] [options]
"""

from funcsetup.cli.parser import main

if __name__ == "__main__":
    main()
