"""Verify and check commands - compare files against expected digests."""

import click
from fixturehash.core.config import get_config
from fixturehash.core.hash import hash_file, is_hex_digest
from fixturehash.core.manifest import check_manifest, STATUS_OK, STATUS_MISSING, STATUS_UNREADABLE
from fixturehash.cli.output import success, error, warning, info


def _chunk_size():
    try:
        return get_config().chunk_size
    except ValueError as e:
        click.echo(error(str(e)))
        raise click.Abort()


@click.command('verify')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.argument('expected')
def verify_cmd(file, expected):
    """
    Check that FILE has the SHA-1 digest EXPECTED.

    Examples:
        fixturehash verify tests/fixtures/image.jpg 50334ee0b51600df6397ce93ceed4728c37fee4e
    """
    expected = expected.lower()
    if not is_hex_digest(expected):
        click.echo(error(f"Not a SHA-1 digest: {expected}"))
        raise click.Abort()

    chunk_size = _chunk_size()
    try:
        actual = hash_file(file, chunk_size)
    except OSError as e:
        click.echo(error(f"Cannot read {file}: {e}"))
        raise click.Abort()

    if actual != expected:
        click.echo(error(f"{file}: digest mismatch"))
        click.echo(f"  expected {expected}")
        click.echo(f"  actual   {actual}")
        raise click.Abort()

    click.echo(success(f"{file}: OK"))


@click.command('check')
@click.argument('manifest', type=click.Path(exists=True, dir_okay=False))
@click.option('-q', '--quiet', is_flag=True, help="Don't print OK lines")
def check_cmd(manifest, quiet):
    """
    Verify every file listed in a sha1sum-style MANIFEST.

    Paths in the manifest are relative to the manifest's directory.

    Examples:
        fixturehash check tests/fixtures/SHA1SUMS
    """
    try:
        results = check_manifest(manifest, _chunk_size())
    except (ValueError, OSError) as e:
        click.echo(error(f"{manifest}: {e}"))
        raise click.Abort()

    if not results:
        click.echo(info("Manifest lists no files"))
        return

    failures = 0
    for result in results:
        path = result.entry.path
        if result.status == STATUS_OK:
            if not quiet:
                click.echo(success(f"{path}: OK"))
        elif result.status == STATUS_MISSING:
            failures += 1
            click.echo(warning(f"{path}: MISSING"))
        elif result.status == STATUS_UNREADABLE:
            failures += 1
            click.echo(error(f"{path}: UNREADABLE"))
        else:
            failures += 1
            click.echo(error(f"{path}: FAILED"))

    if failures:
        click.echo(error(f"{failures} of {len(results)} files did not match"))
        raise click.Abort()
