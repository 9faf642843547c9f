"""Main CLI entry point for fixturehash."""

import click
from colorama import init

from fixturehash import __version__
from fixturehash.cli.output import BANNER
from fixturehash.cli.commands import hash_cmd, verify_cmd, check_cmd, key_cmd, config_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class FixtureHashGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=FixtureHashGroup)
@click.version_option(version=__version__)
def cli():
    pass


cli.add_command(hash_cmd)
cli.add_command(verify_cmd)
cli.add_command(check_cmd)
cli.add_command(key_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
