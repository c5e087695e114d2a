"""Tests for the glob engine."""

import time

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from ignorekit.core.glob import (DOUBLE_STAR, compile_glob, compile_segment,
                                 glob_match, match_component)


class TestSingleStar:
    """Tests for * inside a segment."""

    def test_matches_any_run(self):
        assert glob_match('/main.go', '*.go')
        assert glob_match('/.go', '*.go')
        assert glob_match('/a.b.go', '*.go')

    def test_does_not_cross_separator(self):
        assert not glob_match('/src/main.go', '*.go')
        assert not glob_match('/a/b', 'a*b')

    def test_matches_dotfiles(self):
        assert glob_match('/.env', '*')
        assert glob_match('/.env.local', '*.env*')

    def test_star_in_middle(self):
        assert glob_match('/hs_err_pid1234.log', 'hs_err_pid*')
        assert glob_match('/npm-debug.log.1', 'npm-debug.log*')
        assert not glob_match('/npm-error.log', 'npm-debug.log*')

    def test_repeated_stars_inside_segment(self):
        """a**b inside a segment behaves like a*b."""
        assert glob_match('/axxb', 'a**b')
        assert not glob_match('/a/x/b', 'a**b')


class TestQuestionMark:
    """Tests for ? wildcard."""

    def test_single_character(self):
        assert glob_match('/test1.txt', 'test?.txt')
        assert glob_match('/testa.txt', 'test?.txt')
        assert not glob_match('/test.txt', 'test?.txt')
        assert not glob_match('/test12.txt', 'test?.txt')

    def test_not_separator(self):
        assert not glob_match('/a/b', 'a?b')


class TestCharacterClass:
    """Tests for [...] classes."""

    def test_set(self):
        assert glob_match('/x.pyc', '*.py[cod]')
        assert glob_match('/x.pyo', '*.py[cod]')
        assert not glob_match('/x.pyx', '*.py[cod]')

    def test_range(self):
        assert glob_match('/report.1.json', 'report.[0-9].json')
        assert not glob_match('/report.a.json', 'report.[0-9].json')

    def test_negated_with_bang_and_caret(self):
        assert glob_match('/xa', 'x[!b]')
        assert not glob_match('/xb', 'x[!b]')
        assert glob_match('/xa', 'x[^b]')
        assert not glob_match('/xb', 'x[^b]')

    def test_closing_bracket_first_is_literal(self):
        assert glob_match('/]', '[]a]')
        assert glob_match('/a', '[]a]')
        assert not glob_match('/b', '[]a]')

    def test_dash_at_end_is_literal(self):
        assert glob_match('/-', '[a-]')
        assert not glob_match('/b', '[a-]')

    def test_named_class(self):
        assert glob_match('/file7', 'file[[:digit:]]')
        assert not glob_match('/filex', 'file[[:digit:]]')
        assert glob_match('/X', '[[:upper:]]')

    def test_unclosed_bracket_is_literal(self):
        assert glob_match('/a[b', 'a[b')
        assert not glob_match('/ab', 'a[b')

    def test_reversed_range_matches_nothing(self):
        assert not glob_match('/m', '[z-a]')


class TestEscapes:
    """Tests for backslash escapes."""

    def test_escaped_wildcards_are_literal(self):
        assert glob_match('/a*b', r'a\*b')
        assert not glob_match('/axb', r'a\*b')
        assert glob_match('/what?', r'what\?')

    def test_escaped_hash_and_bang(self):
        assert glob_match('/#notes', r'\#notes')
        assert glob_match('/!important', r'\!important')

    def test_dangling_backslash_never_matches(self):
        assert compile_segment('abc\\') is None
        assert not glob_match('/abc\\', 'abc\\')
        assert not glob_match('/abc', 'abc\\')


class TestDoubleStar:
    """Tests for ** segments."""

    def test_leading(self):
        assert glob_match('/test.log', '**/test.log')
        assert glob_match('/dir/test.log', '**/test.log')
        assert glob_match('/dir/sub/test.log', '**/test.log')

    def test_trailing_includes_parent(self):
        assert glob_match('/abc', 'abc/**')
        assert glob_match('/abc/x', 'abc/**')
        assert glob_match('/abc/x/y/z', 'abc/**')
        assert not glob_match('/abcd/x', 'abc/**')

    def test_middle_matches_zero_or_more(self):
        assert glob_match('/a/b', 'a/**/b')
        assert glob_match('/a/x/b', 'a/**/b')
        assert glob_match('/a/x/y/b', 'a/**/b')
        assert not glob_match('/a/x/c', 'a/**/b')

    def test_pycache_anywhere(self):
        pattern = '**/__pycache__/**'
        assert glob_match('/__pycache__/cache.pyc', pattern)
        assert glob_match('/src/__pycache__/cache.pyc', pattern)
        assert not glob_match('/src/cache.pyc', pattern)

    def test_alone_matches_everything(self):
        assert glob_match('/', '**')
        assert glob_match('/a', '**')
        assert glob_match('/a/b/c.txt', '**')

    def test_consecutive_double_stars_collapse(self):
        assert compile_glob('**/**/a') == (DOUBLE_STAR, (('literal', 'a'),))


class TestGlobMatch:
    """General glob_match behaviour."""

    def test_empty_pattern_never_matches(self):
        assert compile_glob('') is None
        assert not glob_match('/', '')
        assert not glob_match('/a', '')
        assert not glob_match('/a', '/')

    def test_case_sensitive(self):
        assert not glob_match('/Main.GO', '*.go')
        assert glob_match('/Makefile', 'Makefile')
        assert not glob_match('/makefile', 'Makefile')

    def test_must_cover_whole_path(self):
        assert glob_match('/build/main.test', 'build/*.test')
        assert not glob_match('/build/main.test', 'build')
        assert not glob_match('/sub/build/main.test', 'build/*.test')

    def test_leading_slashes_ignored(self):
        assert glob_match('build/x', '/build/x')
        assert glob_match('/build/x', 'build/x')

    def test_match_component_directly(self):
        tokens = compile_segment('*.log')
        assert match_component('server.log', tokens)
        assert not match_component('server.txt', tokens)


class TestBoundedTime:
    """Adversarial inputs must not cause exponential backtracking."""

    def test_many_stars_against_long_name(self):
        pattern = '*a' * 30 + 'b'
        path = '/' + 'a' * 500
        start = time.perf_counter()
        assert not glob_match(path, pattern)
        assert time.perf_counter() - start < 2.0

    def test_many_double_stars_against_deep_path(self):
        pattern = '**/a/' * 20 + 'b'
        path = '/' + 'a/' * 200 + 'c'
        start = time.perf_counter()
        assert not glob_match(path, pattern)
        assert time.perf_counter() - start < 2.0

    @settings(deadline=1000, max_examples=100,
              suppress_health_check=[HealthCheck.function_scoped_fixture])
    @given(
        pattern=st.text(alphabet='*?ab/[]!', max_size=40),
        path=st.text(alphabet='ab/', max_size=200),
    )
    def test_any_short_pattern_terminates_quickly(self, pattern, path):
        result = glob_match(path, pattern)
        assert isinstance(result, bool)
        assert glob_match(path, pattern) == result
