"""
Entry point for running funcsetup CLI as a module.

Usage: python -m funcsetup.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
