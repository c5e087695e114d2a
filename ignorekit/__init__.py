"""ignorekit - gitignore-compatible path exclusion matching."""

__version__ = '0.1.0'

from ignorekit.core.glob import glob_match
from ignorekit.core.pattern import CompiledPattern, compile_pattern, compile_patterns
from ignorekit.core.matcher import IgnoreMatcher, is_ignored
from ignorekit.utils.loader import IgnoreFileError, get_ignore_matcher, load_ignore_file

__all__ = [
    'glob_match',
    'CompiledPattern',
    'compile_pattern',
    'compile_patterns',
    'IgnoreMatcher',
    'is_ignored',
    'IgnoreFileError',
    'get_ignore_matcher',
    'load_ignore_file',
]
