"""Key command - show the cache filename generated for a key."""

import click
from fixturehash.core.hash import filename_for_key
from fixturehash.cli.output import error, digest_line


@click.command('key')
@click.argument('keys', nargs=-1, required=True)
def key_cmd(keys):
    """
    Print the cache filename for each KEY.

    Examples:
        fixturehash key http://test.com
    """
    for key in keys:
        try:
            filename = filename_for_key(key)
        except UnicodeEncodeError as e:
            click.echo(error(f"Cannot encode key {key!r}: {e}"))
            raise click.Abort()
        click.echo(digest_line(filename, key))
