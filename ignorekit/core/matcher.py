"""Ignore decisions over an ordered list of compiled patterns."""

from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from ignorekit.core.paths import split_candidate
from ignorekit.core.pattern import CompiledPattern, compile_patterns


def last_match(path: str, patterns: Iterable[CompiledPattern],
               is_dir: bool = False) -> Optional[CompiledPattern]:
    """
    Find the last pattern in `patterns` that matches `path`.

    Args:
        path: Path relative to the ignore root. A trailing / marks a directory.
        patterns: Compiled patterns in file order
        is_dir: Whether the path is a directory

    Returns:
        The deciding pattern, or None if nothing matches
    """
    parts, trailing_slash = split_candidate(path)
    is_dir = is_dir or trailing_slash

    found = None
    for pattern in patterns:
        if pattern.match_parts(parts, is_dir):
            found = pattern
    return found


def is_ignored(path: str, patterns: Iterable[CompiledPattern], is_dir: bool = False) -> bool:
    """
    Decide whether a path is ignored.

    Patterns are applied in file order and the last matching one wins:
    a plain pattern ignores the path, a negated one re-includes it.
    Patterns that don't match leave the verdict as it was.

    Args:
        path: Path relative to the ignore root. A trailing / marks a directory.
        patterns: Compiled patterns in file order
        is_dir: Whether the path is a directory

    Returns:
        True if the path should be ignored
    """
    parts, trailing_slash = split_candidate(path)
    is_dir = is_dir or trailing_slash

    ignored = False
    for pattern in patterns:
        if pattern.match_parts(parts, is_dir):
            ignored = not pattern.negated
    return ignored


class IgnoreMatcher:
    """
    An immutable, ordered set of ignore patterns.

    Matchers never change once built; `extend` and ``+`` return new
    matchers. That makes one matcher safe to share between threads.
    """

    __slots__ = ('_patterns',)

    def __init__(self, patterns: Iterable[CompiledPattern] = ()):
        self._patterns: Tuple[CompiledPattern, ...] = tuple(patterns)

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: Optional[str] = None) -> 'IgnoreMatcher':
        """
        Build a matcher from raw ignore-file lines.

        Blank lines and comments are skipped.

        Args:
            lines: Lines in file order
            source: Name of the file the lines came from

        Returns:
            New IgnoreMatcher
        """
        return cls(compile_patterns(lines, source=source))

    @property
    def patterns(self) -> Tuple[CompiledPattern, ...]:
        return self._patterns

    def extend(self, lines: Iterable[str], source: Optional[str] = None) -> 'IgnoreMatcher':
        """Return a new matcher with `lines` evaluated after the current patterns."""
        return self + IgnoreMatcher.from_lines(lines, source=source)

    def is_ignored(self, path: str, is_dir: bool = False) -> bool:
        """Check if a path should be ignored. See `is_ignored`."""
        return is_ignored(path, self._patterns, is_dir)

    def match(self, path: str, is_dir: bool = False) -> Optional[CompiledPattern]:
        """Return the pattern that decides the verdict for `path`, if any."""
        return last_match(path, self._patterns, is_dir)

    def filter_paths(self, paths: Iterable[str],
                     is_dir_func: Optional[Callable[[str], bool]] = None) -> List[str]:
        """
        Filter a list of paths, removing ignored ones.

        Args:
            paths: Paths relative to the ignore root
            is_dir_func: Optional function to check if a path is a directory

        Returns:
            List of paths that are not ignored, in input order
        """
        result = []
        for path in paths:
            is_dir = is_dir_func(path) if is_dir_func else False
            if not self.is_ignored(path, is_dir):
                result.append(path)
        return result

    def __add__(self, other: 'IgnoreMatcher') -> 'IgnoreMatcher':
        if not isinstance(other, IgnoreMatcher):
            return NotImplemented
        return IgnoreMatcher(self._patterns + other._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[CompiledPattern]:
        return iter(self._patterns)

    def __eq__(self, other) -> bool:
        if not isinstance(other, IgnoreMatcher):
            return NotImplemented
        return self._patterns == other._patterns

    def __hash__(self) -> int:
        return hash(self._patterns)

    def __repr__(self) -> str:
        return f"IgnoreMatcher({[str(p) for p in self._patterns]!r})"
