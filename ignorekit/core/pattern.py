"""Compilation of ignore-file lines into patterns."""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple

from ignorekit.core.glob import DOUBLE_STAR, compile_glob, match_segments
from ignorekit.core.paths import split_candidate


def is_pattern_line(line: str) -> bool:
    """Return True unless the line is blank or a ``#`` comment."""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith('#')


@dataclass(frozen=True)
class CompiledPattern:
    """
    A single compiled ignore pattern.

    `text` is the glob body with the leading ``!``, the leading ``/`` and
    the trailing ``/`` removed. The flags record what those characters
    meant. `source` and `lineno` say where the line came from and do not
    take part in equality.
    """

    text: str
    negated: bool = False
    anchored: bool = False
    directory_only: bool = False
    source: Optional[str] = field(default=None, compare=False)
    lineno: int = field(default=0, compare=False)
    segments: Optional[Tuple] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        segments = compile_glob(self.text)
        # Unanchored patterns may start at any directory level
        if segments is not None and not self.anchored and segments[0] != DOUBLE_STAR:
            segments = (DOUBLE_STAR,) + segments
        object.__setattr__(self, 'segments', segments)

    @property
    def inert(self) -> bool:
        """True if the pattern can never match anything."""
        return self.segments is None

    def match_parts(self, parts: Sequence[str], is_dir: bool = False) -> bool:
        """
        Check the pattern against already split path components.

        A pattern matches a path when it matches the path itself or any of
        its parent directories. Directory-only patterns only match the path
        itself when `is_dir` is set.

        Args:
            parts: Path components, as returned by ``split_path``
            is_dir: Whether the full path names a directory

        Returns:
            True if the pattern matches
        """
        if self.segments is None:
            return False

        if (is_dir or not self.directory_only) and match_segments(parts, self.segments):
            return True

        for end in range(len(parts) - 1, 0, -1):
            if match_segments(parts[:end], self.segments):
                return True
        return False

    def matches(self, path: str, is_dir: bool = False) -> bool:
        """
        Check if a path matches this pattern.

        Args:
            path: The path to check, relative to the ignore root. A
                trailing / marks it as a directory.
            is_dir: Whether the path is a directory

        Returns:
            True if the path matches this pattern
        """
        parts, trailing_slash = split_candidate(path)
        return self.match_parts(parts, is_dir or trailing_slash)

    def __str__(self) -> str:
        return '{}{}{}{}'.format(
            '!' if self.negated else '',
            '/' if self.anchored else '',
            self.text,
            '/' if self.directory_only else '',
        )


def compile_pattern(line: str, source: Optional[str] = None, lineno: int = 0) -> CompiledPattern:
    """
    Compile one ignore-file line.

    Blank and comment lines are expected to be filtered out beforehand.
    A line that is empty once its markers are removed (``!`` or ``/``)
    compiles to an inert pattern rather than failing.

    Args:
        line: A single ignore-file line
        source: Name of the file the line came from
        lineno: 1-based line number within `source`

    Returns:
        The compiled pattern
    """
    text = line.strip()

    negated = text.startswith('!')
    if negated:
        text = text[1:].strip()

    anchored = text.startswith('/')
    if anchored:
        text = text[1:]

    text = text.rstrip()
    directory_only = text.endswith('/')
    if directory_only:
        text = text[:-1]

    return CompiledPattern(
        text=text,
        negated=negated,
        anchored=anchored,
        directory_only=directory_only,
        source=source,
        lineno=lineno,
    )


def compile_patterns(lines: Iterable[str], source: Optional[str] = None) -> Tuple[CompiledPattern, ...]:
    """
    Compile ignore-file lines in order, skipping blanks and comments.

    Line numbers count every input line, so they point back into the file.
    """
    return tuple(
        compile_pattern(line, source=source, lineno=lineno)
        for lineno, line in enumerate(lines, 1)
        if is_pattern_line(line)
    )
