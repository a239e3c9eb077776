"""Main entry point for ``python -m colorcomp``."""

from colorcomp.cli.main import cli

if __name__ == "__main__":
    cli()
