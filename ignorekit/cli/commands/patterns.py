"""Patterns command - list the compiled ignore patterns."""

import click
from pathlib import Path
from colorama import Fore, Style
from ignorekit.utils.loader import IgnoreFileError, get_ignore_matcher
from ignorekit.cli.output import error, info, warning, describe_pattern


def pattern_flags(pattern) -> str:
    flags = []
    if pattern.negated:
        flags.append('negated')
    if pattern.anchored:
        flags.append('anchored')
    if pattern.directory_only:
        flags.append('dir-only')
    return ', '.join(flags)


@click.command('patterns')
@click.option('--root', type=click.Path(file_okay=False, path_type=Path), default='.',
              help='Directory to load the ignore file from')
@click.option('--ignore-file', type=click.Path(dir_okay=False, path_type=Path),
              help='Ignore file to use instead of the configured one')
def patterns_cmd(root, ignore_file):
    """
    List ignore patterns in evaluation order.

    Later patterns override earlier ones. Negated patterns are shown in
    green, ignoring ones in red. Lines that can never match are reported.

    Examples:
        ignorekit patterns
        ignorekit patterns --ignore-file templates/Node.gitignore
    """
    try:
        matcher = get_ignore_matcher(root, ignore_file=ignore_file)
    except (IgnoreFileError, ValueError) as e:
        click.echo(error(str(e)))
        raise click.Abort()

    if not len(matcher):
        click.echo(info("No ignore patterns"))
        return

    click.echo(info(f"{len(matcher)} pattern(s), last match wins:"))
    click.echo()

    inert = []
    for position, pattern in enumerate(matcher, 1):
        color = Fore.GREEN if pattern.negated else Fore.RED
        flags = pattern_flags(pattern)
        suffix = f"  {Style.DIM}({flags}){Style.RESET_ALL}" if flags else ''
        click.echo(f"  {position:>3}  {color}{pattern}{Style.RESET_ALL}{suffix}")
        if pattern.inert:
            inert.append(pattern)

    if inert:
        click.echo()
        click.echo(warning(f"{len(inert)} pattern(s) can never match:"))
        for pattern in inert:
            click.echo(warning(f"  {describe_pattern(pattern)}"))
