"""Config command - manage ignorekit configuration."""

import click
from pathlib import Path
from ignorekit.core.config import Config, split_key
from ignorekit.cli.output import success, error, info

root_option = click.option('--root', type=click.Path(file_okay=False, path_type=Path), default='.',
                           help='Directory holding the .ignorekit file')


@click.group('config')
def config_cmd():
    """Get and set root-local or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
@root_option
def config_set(key, value, is_global, root):
    """
    Set a config value.

    Examples:
        ignorekit config set core.ignorefile .scanignore
        ignorekit config set core.excludes "*.bak"
        ignorekit config set --global core.ignoregitdir false
    """
    section, option = split_key(key)
    try:
        Config(root).set(section, option, value, global_config=is_global)
    except (OSError, ValueError) as e:
        click.echo(error(str(e)))
        raise click.Abort()

    scope = "global" if is_global else "root"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@root_option
def config_get(key, root):
    """
    Get a config value, including built-in defaults.

    Examples:
        ignorekit config get core.ignorefile
    """
    section, option = split_key(key)
    value = Config(root).get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
@root_option
def config_unset(key, is_global, root):
    """Remove a config value."""
    section, option = split_key(key)
    try:
        removed = Config(root).unset(section, option, global_config=is_global)
    except (OSError, ValueError) as e:
        click.echo(error(str(e)))
        raise click.Abort()
    if not removed:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(success(f"Unset {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
@root_option
def config_list(is_global, root):
    """
    List all config values.

    Examples:
        ignorekit config list
        ignorekit config list --global
    """
    values = Config(root).list_all(global_only=is_global)
    if not values:
        click.echo(info("No configuration set"))
        return

    for section, items in values.items():
        for key, value in items.items():
            click.echo(f"  {section}.{key}={value}")
