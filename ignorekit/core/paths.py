"""Candidate path normalization."""

from typing import List, Tuple


def split_path(path: str) -> List[str]:
    """
    Split a path into its components.

    Backslashes are treated as separators, and empty and ``.`` components
    are dropped, so ``./a//b\\c`` becomes ``['a', 'b', 'c']``.

    Args:
        path: Path relative to the ignore root, with or without a leading /

    Returns:
        List of path components
    """
    return [part for part in path.replace('\\', '/').split('/') if part and part != '.']


def normalize_path(path: str) -> str:
    """
    Normalize a path to the root-prefixed form used for matching.

    Args:
        path: Path relative to the ignore root

    Returns:
        Path with single / separators and a leading /
    """
    return '/' + '/'.join(split_path(path))


def split_candidate(path: str) -> Tuple[List[str], bool]:
    """Split a candidate path, reporting whether it names a directory (trailing /)."""
    return split_path(path), path.endswith(('/', '\\'))
