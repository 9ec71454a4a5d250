"""Entry point for 'python -m shopbind' command.

This module allows the shopbind CLI to be invoked using
'python -m shopbind'.
"""

from shopbind.cli import main

if __name__ == "__main__":
    main()
