"""Hash command - print SHA-1 digests of files, strings or stdin."""

import click
from fixturehash.core.config import get_config
from fixturehash.core.hash import hash_file, hash_stream, hash_string, HEX_DIGEST_LENGTH
from fixturehash.cli.output import error, digest_line


@click.command('hash')
@click.argument('files', nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option('-s', '--string', 'strings', multiple=True, help='Hash a string instead of a file')
@click.option('--stdin', 'use_stdin', is_flag=True, help='Read data from standard input')
@click.option('--abbrev', type=click.IntRange(4, HEX_DIGEST_LENGTH),
              help='Abbreviate digests to N characters')
def hash_cmd(files, strings, use_stdin, abbrev):
    """
    Compute SHA-1 digests.

    With no FILES and no --string, reads standard input.

    Examples:
        fixturehash hash tests/fixtures/image.jpg
        fixturehash hash -s "http://test.com"
        cat image.jpg | fixturehash hash
    """
    try:
        config = get_config()
        if abbrev is None:
            abbrev = config.abbrev
        encoding = config.encoding
        chunk_size = config.chunk_size
    except ValueError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    if use_stdin or not (files or strings):
        digest = hash_stream(click.get_binary_stream('stdin'), chunk_size)
        click.echo(digest_line(digest[:abbrev], '-'))

    for text in strings:
        try:
            digest = hash_string(text, encoding)
        except (LookupError, UnicodeEncodeError) as e:
            click.echo(error(f"Cannot encode string with {encoding}: {e}"))
            raise click.Abort()
        click.echo(digest_line(digest[:abbrev], repr(text)))

    for path in files:
        try:
            digest = hash_file(path, chunk_size)
        except OSError as e:
            click.echo(error(f"Cannot read {path}: {e}"))
            raise click.Abort()
        click.echo(digest_line(digest[:abbrev], path))
