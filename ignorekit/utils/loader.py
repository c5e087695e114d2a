"""Reading ignore files from disk."""

from pathlib import Path
from typing import Iterator, List, Optional, Union

from ignorekit.core.config import Config
from ignorekit.core.matcher import IgnoreMatcher
from ignorekit.core.pattern import is_pattern_line

GIT_DIR_PATTERN = '.git/'


class IgnoreFileError(OSError):
    """Raised when an ignore file is missing or cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Cannot read ignore file {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8', errors='replace')
    except OSError as e:
        raise IgnoreFileError(path, e.strerror or str(e)) from e


def iter_pattern_lines(text: str) -> Iterator[str]:
    """Yield the trimmed pattern lines of an ignore file, skipping blanks and comments."""
    for line in text.splitlines():
        if is_pattern_line(line):
            yield line.strip()


def read_ignore_lines(path: Union[str, Path]) -> List[str]:
    """
    Read the pattern lines of an ignore file.

    An existing file without patterns gives an empty list.

    Args:
        path: Path to the ignore file

    Returns:
        Trimmed pattern lines in file order

    Raises:
        IgnoreFileError: If the file is missing or unreadable
    """
    return list(iter_pattern_lines(_read_text(Path(path))))


def load_ignore_file(path: Union[str, Path]) -> IgnoreMatcher:
    """
    Load an ignore file into a matcher.

    Patterns keep their line numbers within the file.

    Raises:
        IgnoreFileError: If the file is missing or unreadable
    """
    path = Path(path)
    return IgnoreMatcher.from_lines(_read_text(path).splitlines(), source=str(path))


def get_ignore_matcher(root: Union[str, Path], config: Optional[Config] = None,
                       ignore_file: Optional[Union[str, Path]] = None) -> IgnoreMatcher:
    """
    Create an IgnoreMatcher for a directory.

    Loads patterns, in evaluation order, from:
    1. The ``core.excludes`` config value
    2. The ignore file (``ignore_file`` if given, else ``core.ignorefile``
       under `root`)
    3. The built-in ``.git/`` pattern, unless ``core.ignoregitdir`` is off

    A missing default ignore file adds no patterns. An explicitly given
    `ignore_file` has to exist.

    Args:
        root: Directory the paths to check are relative to
        config: Config to use; defaults to the config for `root`
        ignore_file: Explicit ignore file path

    Returns:
        Configured IgnoreMatcher

    Raises:
        IgnoreFileError: If the ignore file cannot be read
        ValueError: If a config value is invalid
    """
    root = Path(root)
    if config is None:
        config = Config(root)

    matcher = IgnoreMatcher.from_lines(config.get_list('core', 'excludes'), source='core.excludes')

    if ignore_file is not None:
        matcher = matcher + load_ignore_file(ignore_file)
    else:
        default_file = root / config.get('core', 'ignorefile')
        if default_file.exists():
            matcher = matcher + load_ignore_file(default_file)

    if config.get_bool('core', 'ignoregitdir', fallback=True):
        matcher = matcher.extend([GIT_DIR_PATTERN], source='built-in')

    return matcher
