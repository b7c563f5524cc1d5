"""Entry point for python -m covkit."""

from covkit.cli.main import cli

if __name__ == "__main__":
    cli()
