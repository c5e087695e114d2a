"""Core matching for ignorekit.

This module contains:
- The glob engine (glob)
- Pattern compilation (pattern)
- The ignore decision fold (matcher)
- Candidate path normalization (paths)
- Configuration management (config)

For reading ignore files from disk, see ignorekit.utils
"""

from ignorekit.core.glob import glob_match, compile_glob
from ignorekit.core.paths import normalize_path, split_path
from ignorekit.core.pattern import CompiledPattern, compile_pattern, compile_patterns, is_pattern_line
from ignorekit.core.matcher import IgnoreMatcher, is_ignored, last_match
from ignorekit.core.config import Config

__all__ = [
    'glob_match',
    'compile_glob',
    'normalize_path',
    'split_path',
    'CompiledPattern',
    'compile_pattern',
    'compile_patterns',
    'is_pattern_line',
    'IgnoreMatcher',
    'is_ignored',
    'last_match',
    'Config',
]
