"""
Configuration for the rframe test suite.
"""
import os
import sys
import tempfile
import shutil
import pytest

# Add the parent directory to the path so we can import rframe
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from rframe import RandomSource, set_config, set_random_source
from rframe.config import SEED_ENV_VAR


@pytest.fixture(autouse=True)
def reset_process_state(monkeypatch):
    """Give every test fresh process-wide configuration and random source."""
    monkeypatch.delenv(SEED_ENV_VAR, raising=False)
    set_config(None)
    set_random_source(None)
    yield
    set_config(None)
    set_random_source(None)


@pytest.fixture
def test_dir():
    """Provides a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp(prefix="rframe_test_")
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def seeded_source():
    """Random source with a fixed seed."""
    return RandomSource(seed=1234)
