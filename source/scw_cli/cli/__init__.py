# ABOUTME: CLI module for the Scaleway CLI
# ABOUTME: Provides the command-line application and its entry point

"""Command-line interface for the Scaleway CLI."""

from cleo.application import Application

from scw_cli import __version__
from scw_cli.cli.commands.init import InitCommand
from scw_cli.cli.utils.logs import setup_logging


def create_application() -> Application:
    """Create the CLI application."""
    application = Application("scw", __version__)

    application.add(InitCommand())

    return application


def main():
    """Main entry point for the CLI."""
    setup_logging()
    application = create_application()
    application.run()


if __name__ == "__main__":
    main()
