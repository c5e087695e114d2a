"""Check command - report which paths are ignored."""

import click
from pathlib import Path
from typing import Optional
from ignorekit.utils.loader import IgnoreFileError, get_ignore_matcher
from ignorekit.cli.output import error, describe_pattern

# Status for fatal errors, as in git check-ignore.
ERROR_EXIT_CODE = 128


def relative_to_root(path: str, root: Path) -> Optional[str]:
    """
    Express a path relative to the ignore root.

    Relative paths are taken as already relative to the root. Absolute
    paths inside the root are made relative; a trailing / is kept so the
    path still reads as a directory. Returns None for an absolute path
    outside the root.
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        return path
    try:
        rel_path = candidate.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return None
    if path.endswith(('/', '\\')):
        rel_path += '/'
    return rel_path


@click.command('check')
@click.argument('paths', nargs=-1)
@click.option('--root', type=click.Path(file_okay=False, path_type=Path), default='.',
              help='Directory the paths are relative to')
@click.option('--ignore-file', type=click.Path(dir_okay=False, path_type=Path),
              help='Ignore file to use instead of the configured one')
@click.option('-d', '--dir', 'is_dir', is_flag=True, help='Treat every path as a directory')
@click.option('-v', '--verbose', is_flag=True, help='Show the pattern that decided each path')
@click.option('-n', '--non-matching', is_flag=True, help='Also show paths that are not ignored')
@click.option('--stdin', 'from_stdin', is_flag=True, help='Read paths from standard input')
@click.pass_context
def check_cmd(ctx, paths, root, ignore_file, is_dir, verbose, non_matching, from_stdin):
    """
    Check paths against the ignore patterns.

    Prints every ignored path. A trailing / marks a path as a directory.
    Exits with status 0 if at least one path is ignored, 1 otherwise,
    and 128 on errors.

    Examples:
        ignorekit check build/main.o
        ignorekit check -v node_modules/ src/index.js
        git ls-files -o | ignorekit check --stdin
    """
    paths = list(paths)
    if from_stdin:
        paths.extend(line.strip() for line in click.get_text_stream('stdin') if line.strip())

    if not paths:
        click.echo(error("No paths given"))
        ctx.exit(ERROR_EXIT_CODE)

    try:
        matcher = get_ignore_matcher(root, ignore_file=ignore_file)
    except (IgnoreFileError, ValueError) as e:
        click.echo(error(str(e)))
        ctx.exit(ERROR_EXIT_CODE)

    candidates = []
    for path in paths:
        rel_path = relative_to_root(path, root)
        if rel_path is None:
            click.echo(error(f"{path} is outside {root}"))
            ctx.exit(ERROR_EXIT_CODE)
        candidates.append((path, rel_path))

    any_ignored = False
    for path, rel_path in candidates:
        pattern = matcher.match(rel_path, is_dir=is_dir)
        ignored = pattern is not None and not pattern.negated

        if ignored:
            any_ignored = True
            click.echo(f"{describe_pattern(pattern)}\t{path}" if verbose else path)
        elif non_matching:
            origin = describe_pattern(pattern) if pattern is not None else '::'
            click.echo(f"{origin}\t{path}")

    ctx.exit(0 if any_ignored else 1)
