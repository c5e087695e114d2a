"""Shared pytest fixtures for ignorekit tests."""

import os
import pytest
from pathlib import Path
from ignorekit.core.matcher import IgnoreMatcher
from ignorekit.utils.loader import load_ignore_file

SAMPLES_DIR = Path(__file__).parent / 'data' / 'gitignore_samples'


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """Keep tests away from the real ~/.ignorekitconfig and IGNOREKIT_* variables."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.setenv('USERPROFILE', str(home))
    for key in list(os.environ):
        if key.startswith('IGNOREKIT_'):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def root(tmp_path):
    """Create an empty directory to load ignore files from."""
    work_dir = tmp_path / 'work'
    work_dir.mkdir()
    return work_dir


@pytest.fixture
def samples_dir():
    """Directory holding the sample .gitignore templates."""
    return SAMPLES_DIR


@pytest.fixture
def load_sample():
    """Load a sample template by name, e.g. load_sample('Go')."""
    def load(name):
        return load_ignore_file(SAMPLES_DIR / f'{name}.gitignore')
    return load


@pytest.fixture
def make_matcher():
    """Build a matcher from pattern lines."""
    def make(*lines):
        return IgnoreMatcher.from_lines(lines)
    return make
