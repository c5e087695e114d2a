"""Main CLI entry point for ignorekit."""

import click
from colorama import init

from ignorekit import __version__
from ignorekit.cli.output import BANNER
from ignorekit.cli.commands import check_cmd, patterns_cmd, config_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class IgnorekitGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=IgnorekitGroup)
@click.version_option(version=__version__)
def cli():
    pass


cli.add_command(check_cmd)
cli.add_command(patterns_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
