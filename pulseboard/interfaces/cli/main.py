"""Entry point for the Pulseboard CLI.

Usage:
    python -m pulseboard.interfaces.cli.main

Or via installed entry point:
    pulseboard <command>
"""

from pulseboard.interfaces.cli import app


def main() -> None:
    """Run the Pulseboard CLI application."""
    app()


if __name__ == "__main__":
    main()
