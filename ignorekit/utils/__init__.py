"""Utilities for loading ignore files.

This module contains:
- The ignore-file line supplier
- Loading of the configured ignore file for a root directory
"""

from ignorekit.utils.loader import (IgnoreFileError, iter_pattern_lines, read_ignore_lines,
                                    load_ignore_file, get_ignore_matcher)

__all__ = [
    'IgnoreFileError', 'iter_pattern_lines', 'read_ignore_lines',
    'load_ignore_file', 'get_ignore_matcher',
]
