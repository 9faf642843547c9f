"""Config command - manage project and global configuration."""

import click
from fixturehash.core.config import get_config
from fixturehash.cli.output import success, error, info


def _split_key(key):
    return key.split('.', 1) if '.' in key else ('core', key)


@click.group('config')
def config_cmd():
    """Get and set project or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        fixturehash config set core.abbrev 12
        fixturehash config set --global core.chunksize 65536
    """
    section, option = _split_key(key)
    get_config().set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "project"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
def config_get(key):
    """
    Get a config value.

    Examples:
        fixturehash config get core.abbrev
    """
    section, option = _split_key(key)
    value = get_config().get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """Remove a config value."""
    section, option = _split_key(key)
    if not get_config().unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not set: {key}"))
        raise click.Abort()
    click.echo(success(f"Unset {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        fixturehash config list
        fixturehash config list --global
    """
    values = get_config().list_all(global_only=is_global)
    if not values:
        click.echo(info("No configuration set"))
        return

    for section, items in values.items():
        for key, value in items.items():
            click.echo(f"  {section}.{key}={value}")
