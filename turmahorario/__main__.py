"""
Package entry point.

Allows running the application via:

    python -m turmahorario

This simply forwards execution to turmahorario.cli.main().
"""

from turmahorario.cli import main

if __name__ == "__main__":
    main()
