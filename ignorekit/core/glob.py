"""Glob engine for gitignore-style patterns.

A pattern is split on ``/`` into segments. The segment list is matched
against the path components with ``**`` standing for any number of whole
components, and every other segment is matched against a single component
using ``*``, ``?`` and ``[...]`` wildcards.

Both levels use the iterative two-pointer wildcard algorithm, which only
remembers the most recent star. Matching costs O(pattern x path) per level
and never recurses, so long runs of stars cannot blow up.
"""

import string
from typing import Optional, Sequence, Tuple

from ignorekit.core.paths import split_path

DOUBLE_STAR = '**'

STAR = 'star'
ANY = 'any'
LITERAL = 'literal'
CLASS = 'class'

_STAR_TOKEN = (STAR,)
_ANY_TOKEN = (ANY,)

_NAMED_CLASSES = {
    'alnum': string.ascii_letters + string.digits,
    'alpha': string.ascii_letters,
    'blank': ' \t',
    'cntrl': ''.join(chr(i) for i in range(32)) + chr(127),
    'digit': string.digits,
    'graph': string.ascii_letters + string.digits + string.punctuation,
    'lower': string.ascii_lowercase,
    'print': string.ascii_letters + string.digits + string.punctuation + ' ',
    'punct': string.punctuation,
    'space': string.whitespace,
    'upper': string.ascii_uppercase,
    'xdigit': string.hexdigits,
}


def _parse_class(segment: str, start: int):
    """
    Parse a bracket expression starting at ``segment[start] == '['``.

    Returns:
        Tuple of (token, next index). The token is None when the bracket
        is never closed, in which case the ``[`` is a literal.
    """
    n = len(segment)
    i = start + 1
    negated = False
    if i < n and segment[i] in '!^':
        negated = True
        i += 1

    ranges = []
    chars = set()
    first = True
    while i < n:
        c = segment[i]
        if c == ']' and not first:
            return (CLASS, negated, tuple(ranges), frozenset(chars)), i + 1
        first = False

        if segment.startswith('[:', i):
            end = segment.find(':]', i + 2)
            if end != -1 and segment[i + 2:end] in _NAMED_CLASSES:
                chars.update(_NAMED_CLASSES[segment[i + 2:end]])
                i = end + 2
                continue

        if c == '\\':
            i += 1
            if i >= n:
                return None, start + 1
            c = segment[i]
        i += 1

        # Range such as a-z; a '-' right before ']' is a literal
        if i + 1 < n and segment[i] == '-' and segment[i + 1] != ']':
            hi = segment[i + 1]
            i += 2
            if hi == '\\':
                if i >= n:
                    return None, start + 1
                hi = segment[i]
                i += 1
            if c <= hi:
                ranges.append((c, hi))
            continue

        chars.add(c)

    return None, start + 1


def compile_segment(segment: str) -> Optional[Tuple]:
    """
    Tokenize one pattern segment (no ``/`` inside).

    Args:
        segment: A single path component pattern

    Returns:
        Tuple of tokens, or None if the segment ends in a dangling backslash
    """
    tokens = []
    n = len(segment)
    i = 0
    while i < n:
        c = segment[i]
        if c == '*':
            # Any run of stars inside a segment is a single star
            while i < n and segment[i] == '*':
                i += 1
            tokens.append(_STAR_TOKEN)
        elif c == '?':
            tokens.append(_ANY_TOKEN)
            i += 1
        elif c == '[':
            token, i = _parse_class(segment, i)
            tokens.append(token if token is not None else (LITERAL, '['))
        elif c == '\\':
            if i + 1 >= n:
                return None
            tokens.append((LITERAL, segment[i + 1]))
            i += 2
        else:
            tokens.append((LITERAL, c))
            i += 1
    return tuple(tokens)


def compile_glob(pattern: str) -> Optional[Tuple]:
    """
    Compile a glob into a tuple of segments.

    Each segment is either ``DOUBLE_STAR`` or a token tuple from
    ``compile_segment``. Leading, trailing and repeated slashes are
    ignored, and consecutive ``**`` segments are collapsed.

    Args:
        pattern: Glob body such as ``src/**/*.py``

    Returns:
        Tuple of segments, or None if the pattern can never match
        (empty, or malformed)
    """
    segments = []
    for part in pattern.split('/'):
        if not part:
            continue
        if part == DOUBLE_STAR:
            if not segments or segments[-1] != DOUBLE_STAR:
                segments.append(DOUBLE_STAR)
            continue
        tokens = compile_segment(part)
        if tokens is None:
            return None
        segments.append(tokens)

    if not segments:
        return None
    return tuple(segments)


def _match_char(c: str, token: Tuple) -> bool:
    kind = token[0]
    if kind == LITERAL:
        return c == token[1]
    if kind == ANY:
        return True
    _, negated, ranges, chars = token
    found = c in chars or any(lo <= c <= hi for lo, hi in ranges)
    return found != negated


def match_component(name: str, tokens: Sequence[Tuple]) -> bool:
    """Match one path component against a compiled segment."""
    t = c = 0
    star = -1
    mark = 0
    while c < len(name):
        if t < len(tokens) and tokens[t][0] == STAR:
            star = t
            mark = c
            t += 1
        elif t < len(tokens) and _match_char(name[c], tokens[t]):
            t += 1
            c += 1
        elif star != -1:
            t = star + 1
            mark += 1
            c = mark
        else:
            return False

    while t < len(tokens) and tokens[t][0] == STAR:
        t += 1
    return t == len(tokens)


def match_segments(parts: Sequence[str], segments: Sequence) -> bool:
    """
    Match path components against compiled segments.

    Args:
        parts: Path components, as returned by ``split_path``
        segments: Compiled segments, as returned by ``compile_glob``

    Returns:
        True if the whole path matches the whole pattern
    """
    p = s = 0
    star = -1
    mark = 0
    while s < len(parts):
        if p < len(segments) and segments[p] == DOUBLE_STAR:
            star = p
            mark = s
            p += 1
        elif p < len(segments) and match_component(parts[s], segments[p]):
            p += 1
            s += 1
        elif star != -1:
            p = star + 1
            mark += 1
            s = mark
        else:
            return False

    while p < len(segments) and segments[p] == DOUBLE_STAR:
        p += 1
    return p == len(segments)


def glob_match(path: str, pattern: str) -> bool:
    """
    Test a path against a glob with gitignore semantics.

    ``*`` and ``?`` never cross a ``/``; a ``**`` segment matches zero or
    more whole segments. The glob has to cover the whole path from the
    root. Matching is case-sensitive.

    Args:
        path: Candidate path, e.g. ``/src/main.py``
        pattern: Glob, e.g. ``**/*.py``

    Returns:
        True if the path matches. Empty or malformed globs never match.
    """
    segments = compile_glob(pattern)
    if segments is None:
        return False
    return match_segments(split_path(path), segments)
