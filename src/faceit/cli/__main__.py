"""Entry point for running the CLI as a module.

Usage:
    python -m faceit.cli --help
"""

from faceit.cli.main import app

if __name__ == "__main__":
    app()
